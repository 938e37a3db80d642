# mailer/email_format_util.py
from html import escape

SUBJECT = "⚡ Power Outage Alert"
FIELDS = (
    ("📅", "Date", "date"),
    ("📍", "Location", "location"),
    ("🛣️ ", "Street", "street"),
    ("⏰", "Time", "time"),
    ("📝", "Note", "note"),
)


def email_subject(filter_text=None):
    return f"{SUBJECT} - {filter_text}" if filter_text else SUBJECT


def format_outage_sections(outages, width=3, align=False):
    """One numbered block per outage. The note line is left out when empty."""
    bar = "━" * width
    lines = []
    for i, outage in enumerate(outages, 1):
        lines.append(f"{bar} OUTAGE {i} {bar}")
        for icon, label, attr in FIELDS:
            value = getattr(outage, attr)
            if attr == "note" and not value:
                continue
            key = f"{label}:"
            if align:
                key = f"{key:<9}"
            lines.append(f"{icon} {key} {value}")
        lines.append("")
    return "\n".join(lines)


def format_email_body(outages, source):
    return (
        "⚡ PLANNED POWER OUTAGES IN YOUR AREA ⚡\n\n"
        f"Found {len(outages)} scheduled outage(s):\n\n"
        f"{format_outage_sections(outages)}\n"
        "\n---\n"
        "This is an automated notification from HEP Outage Checker\n"
        f"Source: {source}\n"
    )


def format_outages_as_html(outages, source=None):
    html = [
        "<h2>Planned Power Outages</h2>",
        '<table border="1" cellpadding="5" cellspacing="0">',
        "<thead><tr><th>Date</th><th>Time</th><th>Location</th><th>Street</th><th>Note</th></tr></thead><tbody>"
    ]
    for o in outages:
        html.append(
            "<tr>"
            f"<td>{escape(o.date)}</td>"
            f"<td>{escape(o.time)}</td>"
            f"<td>{escape(o.location)}</td>"
            f"<td>{escape(o.street)}</td>"
            f"<td>{escape(o.note)}</td>"
            "</tr>"
        )
    html.append("</tbody></table>")
    if source:
        html.append(f'<p>Source: <a href="{escape(source)}">{escape(source)}</a></p>')
    return "".join(html)
