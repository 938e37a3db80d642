#!/usr/bin/env python3
# runner.py
from __future__ import annotations

import argparse
import logging
import signal
import sys
import time
from datetime import datetime
from zoneinfo import ZoneInfo

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from outage_checker.main import APP_NAME, run_check
from outage_checker.utils.my_logging import setup_logging
from outage_checker.utils.env_util import AppConfig, ConfigError
from outage_checker.utils.config_util import DEFAULT_CONFIG_PATH, RunSettings, load_config

logger = logging.getLogger(APP_NAME)


def human_dur(seconds: float) -> str:
    s = int(seconds)
    h, rem = divmod(s, 3600)
    m, s = divmod(rem, 60)
    if h: return f"{h}h {m}m {s}s"
    if m: return f"{m}m {s}s"
    return f"{s}s"


def run_job(config: AppConfig, settings: RunSettings):
    tz = ZoneInfo(settings.timezone)
    t0 = time.time()
    try:
        outages = run_check(
            config,
            settings,
            filter_text=settings.filter,
            today=datetime.now(tz).date(),
        )
    except Exception:
        # keep the scheduler alive; the next trigger retries the whole window
        logger.exception(f"Scheduled check failed after {human_dur(time.time() - t0)}")
        return
    logger.info(f"Scheduled check done: {len(outages)} outage(s) in {human_dur(time.time() - t0)}")


def schedule_job(sched, config: AppConfig, settings: RunSettings):
    tz = ZoneInfo(settings.timezone)
    trigger = CronTrigger.from_crontab(settings.schedule, timezone=tz)
    sched.add_job(
        run_job,
        trigger=trigger,
        id="hep_outage_check",
        kwargs={"config": config, "settings": settings},
        max_instances=1,
        coalesce=True,
        misfire_grace_time=60*30,
        replace_existing=True,
    )
    next_fire = trigger.get_next_fire_time(None, datetime.now(tz))
    logger.info(f"Scheduled '{settings.schedule}' ({settings.timezone}), next={next_fire}")
    return trigger


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the HEP outage check on a schedule")
    parser.add_argument("--run-now", action="store_true", help="Run one check immediately and exit")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    args = parser.parse_args(argv)
    setup_logging(APP_NAME)

    try:
        config = AppConfig.from_env(require_email=True)
        settings = RunSettings.from_dict(load_config(args.config))
    except ConfigError as e:
        logger.error(str(e))
        return 1

    if args.run_now:
        run_job(config, settings)
        return 0

    if not settings.schedule:
        logger.error(f"Missing 'schedule' in {args.config}")
        return 1

    scheduler = BackgroundScheduler(timezone=ZoneInfo(settings.timezone))
    try:
        schedule_job(scheduler, config, settings)
    except ValueError as e:
        logger.error(f"Invalid cron '{settings.schedule}': {e}")
        return 1
    scheduler.start()
    logger.info("APScheduler started. Press Ctrl+C to exit. jobs=%d", len(scheduler.get_jobs()))

    def _shutdown(signum, frame):
        logger.info("Shutting down scheduler...")
        scheduler.shutdown(wait=False)
        sys.exit(0)

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)

    while True:
        time.sleep(60)


if __name__ == "__main__":
    sys.exit(main())
