# utils/my_logging.py
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(app_name, base_dir=None, level=None):
    base_dir = os.path.expanduser(base_dir or os.getenv("LOG_BASE_DIR", "~/projects"))
    app_logs_dir = os.path.join(base_dir, "logs", app_name)
    os.makedirs(app_logs_dir, exist_ok=True)

    log_file = os.path.join(app_logs_dir, f"{app_name}.log")

    level = level or os.getenv("LOG_LEVEL", "INFO")
    logger = logging.getLogger(app_name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # avoid duplicate handlers on reruns
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        console_handler = logging.StreamHandler()
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    logger.debug(f"Logger initialized, writing to {log_file}")
    return logger
