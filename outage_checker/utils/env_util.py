# utils/env_util.py
"""
Settings read from the environment (and a local .env file, if present).

HEP_CITY and HEP_OFFICE select the distribution area and office on the portal
and are always needed. The mail settings are only needed when a report is
e-mailed, so a dry run works with just the two portal ids.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SMTP_SERVER = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 587

PORTAL_VARS = ("HEP_CITY", "HEP_OFFICE")
EMAIL_VARS = ("TO_EMAIL", "FROM_EMAIL", "SMTP_USERNAME", "SMTP_PASSWORD")


class ConfigError(EnvironmentError):
    pass


def split_emails(raw: Optional[str]) -> List[str]:
    """Comma separated list -> clean list. Returns [] if not set."""
    if not raw:
        return []
    return [e.strip() for e in raw.split(",") if e.strip()]


@dataclass(frozen=True)
class AppConfig:
    region_id: str
    office_id: str
    recipients: List[str] = field(default_factory=list)
    from_email: Optional[str] = None
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_server: str = DEFAULT_SMTP_SERVER
    smtp_port: int = DEFAULT_SMTP_PORT

    @property
    def can_send_email(self) -> bool:
        return bool(self.recipients and self.from_email and self.smtp_username and self.smtp_password)

    @classmethod
    def from_env(cls, require_email: bool = True) -> "AppConfig":
        required = list(PORTAL_VARS)
        if require_email:
            required += EMAIL_VARS
        missing = [key for key in required if not os.getenv(key, "").strip()]
        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}. "
                f"Set them in the environment or in a .env file."
            )

        port = os.getenv("SMTP_PORT", "").strip() or DEFAULT_SMTP_PORT
        try:
            port = int(port)
        except ValueError:
            raise ConfigError(f"SMTP_PORT must be a number, got {port!r}") from None

        return cls(
            region_id=os.environ["HEP_CITY"].strip(),
            office_id=os.environ["HEP_OFFICE"].strip(),
            recipients=split_emails(os.getenv("TO_EMAIL")),
            from_email=os.getenv("FROM_EMAIL") or None,
            smtp_username=os.getenv("SMTP_USERNAME") or None,
            smtp_password=os.getenv("SMTP_PASSWORD") or None,
            smtp_server=os.getenv("SMTP_SERVER", "").strip() or DEFAULT_SMTP_SERVER,
            smtp_port=port,
        )
