from datetime import date
from unittest.mock import MagicMock, patch

from apscheduler.triggers.cron import CronTrigger

import runner
from outage_checker.utils.config_util import RunSettings
from outage_checker.utils.env_util import AppConfig

CONFIG = AppConfig(region_id="1", office_id="4011")
SETTINGS = RunSettings(schedule="0 7 * * *", timezone="Europe/Zagreb", filter="Sesvete")


def test_human_dur():
    assert runner.human_dur(5) == "5s"
    assert runner.human_dur(65) == "1m 5s"
    assert runner.human_dur(3725) == "1h 2m 5s"


def test_schedule_job_adds_single_instance_job():
    sched = MagicMock()
    trigger = runner.schedule_job(sched, CONFIG, SETTINGS)
    assert isinstance(trigger, CronTrigger)
    _, kwargs = sched.add_job.call_args
    assert kwargs["max_instances"] == 1
    assert kwargs["coalesce"] is True
    assert kwargs["kwargs"] == {"config": CONFIG, "settings": SETTINGS}


def test_run_job_passes_filter_and_local_date():
    with patch("runner.run_check", return_value=[]) as run:
        runner.run_job(CONFIG, SETTINGS)
    args, kwargs = run.call_args
    assert args == (CONFIG, SETTINGS)
    assert kwargs["filter_text"] == "Sesvete"
    assert isinstance(kwargs["today"], date)


def test_run_job_failure_is_logged_not_raised(caplog):
    with patch("runner.run_check", side_effect=RuntimeError("boom")):
        runner.run_job(CONFIG, SETTINGS)
    assert "Scheduled check failed" in caplog.text
