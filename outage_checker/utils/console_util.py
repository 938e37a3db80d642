# utils/console_util.py
from ..mailer.email_format_util import format_outage_sections

RULE = "━" * 46


def format_console_report(outages, source, window_days=7):
    lines = [
        "",
        "╔════════════════════════════════════════════════════════════════╗",
        "║        ⚡ DRY RUN - POWER OUTAGE DATA (NO EMAIL SENT) ⚡        ║",
        "╚════════════════════════════════════════════════════════════════╝",
        "",
    ]
    if not outages:
        lines.append(f"✅ No outages found in the next {window_days} days.")
        lines.append("")
        return "\n".join(lines)

    lines.append(f"Found {len(outages)} scheduled outage(s):")
    lines.append("")
    lines.append(format_outage_sections(outages, width=17, align=True))
    lines += [RULE, f"Source: {source}", RULE, ""]
    return "\n".join(lines)


def print_report(outages, source, window_days=7):
    print(format_console_report(outages, source, window_days))
