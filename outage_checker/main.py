# main.py
import argparse
import logging
import sys
import time
from datetime import date
from functools import partial

from .utils.my_logging import setup_logging
from .utils.env_util import AppConfig, ConfigError
from .utils.config_util import DEFAULT_CONFIG_PATH, RunSettings, load_config
from .utils.filter_util import filter_outages
from .utils.console_util import print_report
from .scraping.hep_scraper import fetch_page, parse_outages, source_url
from .scraping.window import collect_window
from .mailer.email_util import send_outage_email

APP_NAME = "hep-outage-checker"

logger = logging.getLogger(APP_NAME)


def run_check(config: AppConfig, settings: RunSettings, dry_run=False, filter_text=None,
              today=None, fetch=None, sleep=time.sleep):
    """
    One full pass: collect the window, filter, then print or e-mail.
    Returns the filtered outages.
    """
    source = source_url(config.region_id, config.office_id, settings.base_url)
    result = collect_window(
        today or date.today(),
        config.region_id,
        config.office_id,
        days=settings.window_days,
        delay_seconds=settings.delay_seconds,
        fetch=fetch or partial(fetch_page, base_url=settings.base_url),
        parse=partial(parse_outages, heading_tag=settings.heading_tag),
        sleep=sleep,
        logger=logger,
    )
    all_outages = result.records
    outages = filter_outages(all_outages, filter_text)

    if filter_text:
        logger.info(
            f"Filter applied: '{filter_text}' - {len(outages)} of {len(all_outages)} outage(s) match"
        )

    if dry_run:
        print_report(outages, source, settings.window_days)
        return outages

    if outages:
        logger.info("Sending email notification...")
        if send_outage_email(outages, config, source, filter_text=filter_text, logger=logger):
            logger.info("Email sent successfully!")
    elif filter_text:
        logger.info("No matching outages found. No email sent.")
    else:
        logger.info(f"No outages found in the next {settings.window_days} days. No email sent.")
    return outages


def non_negative_int(value):
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if days < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {days}")
    return days


def build_parser():
    parser = argparse.ArgumentParser(
        prog="outage-checker",
        description="Check for HEP power outages and send notifications",
    )
    parser.add_argument("--dry-run", action="store_true",
                        help="Print outage data to console instead of sending email")
    parser.add_argument("-f", "--filter", default=None,
                        help="Filter outages by location or street (partial match). Shows all if not provided")
    parser.add_argument("--days", type=non_negative_int, default=None,
                        help="Number of days ahead to check (default from config, 7)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to the YAML settings file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(APP_NAME)

    try:
        config = AppConfig.from_env(require_email=not args.dry_run)
        cfg = load_config(args.config)
        if args.days is not None:
            cfg["window_days"] = args.days
        settings = RunSettings.from_dict(cfg)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    logger.info("HEP Outage Checker starting...")
    if args.dry_run:
        logger.info("Mode: DRY RUN (no email will be sent)")
    else:
        logger.info(f"Will notify: {', '.join(config.recipients)}")

    run_check(config, settings, dry_run=args.dry_run, filter_text=args.filter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
