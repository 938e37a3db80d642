# mailer/email_util.py
import smtplib
from email.header import Header
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from .email_format_util import email_subject, format_email_body, format_outages_as_html


def build_message(subject, body_text, body_html, from_email, recipients):
    msg = MIMEMultipart("alternative")
    msg['From'] = from_email
    msg['To'] = ", ".join(recipients)
    msg['Subject'] = Header(subject, 'utf-8')
    msg.attach(MIMEText(body_text, 'plain', 'utf-8'))
    if body_html:
        msg.attach(MIMEText(body_html, 'html', 'utf-8'))
    return msg


def send_email(subject, body_text, config, body_html=None, logger=None):
    """Send one message with the SMTP settings in config. Returns True on success."""
    if not config.recipients:
        if logger: logger.error("No recipients configured. Set TO_EMAIL.")
        return False

    msg = build_message(subject, body_text, body_html, config.from_email, config.recipients)
    try:
        with smtplib.SMTP(config.smtp_server, config.smtp_port, timeout=30) as server:
            server.starttls()
            server.login(config.smtp_username, config.smtp_password)
            server.sendmail(config.from_email, config.recipients, msg.as_string())
    except Exception as e:
        # SMTPException, OSError, or UnicodeEncodeError from non-ASCII credentials
        if logger: logger.error(f"Failed to send email: {e}")
        return False

    if logger: logger.info(f"Email sent to {', '.join(config.recipients)}")
    return True


def send_outage_email(outages, config, source, filter_text=None, logger=None):
    return send_email(
        subject=email_subject(filter_text),
        body_text=format_email_body(outages, source),
        body_html=format_outages_as_html(outages, source),
        config=config,
        logger=logger,
    )
