# core/notifications.py
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import List, Optional

from core.auto_reply import get_auto_reply_settings
from core.config import settings
from core.logging_config import logger
from models.auto_reply import ScheduledNotification


# -----------------------------------------------------
# 📧 Send email (SMTP)
# -----------------------------------------------------
def send_email(
    subject: str,
    body: str,
    to: Optional[str] = None,
    recipients: Optional[List[str]] = None,
    html_body: Optional[str] = None,
) -> bool:
    """
    Send email via SMTP.

    Returns False (and logs) when there is no recipient or SMTP is not
    configured; SMTP failures are logged and re-raised.

    Args:
        subject: Email subject
        body: Plain text email body
        to: Single recipient email
        recipients: List of recipient email addresses
        html_body: Optional HTML email body
    """
    smtp_host = settings.SMTP_HOST
    smtp_port = settings.SMTP_PORT
    smtp_user = settings.SMTP_USER
    smtp_pass = settings.SMTP_PASS

    if recipients:
        recipient_list = recipients
    elif to:
        recipient_list = [to]
    else:
        recipient_list = []

    if not recipient_list:
        logger.warning("No recipients specified - skipping email.")
        return False

    if not all([smtp_host, smtp_port, smtp_user, smtp_pass]):
        logger.warning(f"Email credentials missing - skipping email '{subject}' to {', '.join(recipient_list)}")
        return False

    try:
        msg = MIMEMultipart("alternative")
        msg["From"] = settings.SMTP_FROM or smtp_user
        msg["To"] = ", ".join(recipient_list)
        msg["Subject"] = subject

        msg.attach(MIMEText(body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        with smtplib.SMTP_SSL(smtp_host, smtp_port) as server:
            server.login(smtp_user, smtp_pass)
            server.send_message(msg)

        logger.info(f"Email sent to {', '.join(recipient_list)}")
        return True

    except Exception as e:
        logger.error(f"Email failed: {e}")
        raise


# -----------------------------------------------------
# Deliver a scheduled auto-reply
# -----------------------------------------------------
def dispatch_notification(notification: ScheduledNotification) -> bool:
    """Send a queued auto-reply and count the attempt toward /auto-reply/status."""
    auto_reply = get_auto_reply_settings()

    try:
        sent = send_email(
            subject=notification.subject,
            body=notification.body,
            to=notification.to,
        )
    except Exception:
        auto_reply.record_delivery(False)
        raise

    auto_reply.record_delivery(sent)
    if sent:
        logger.info(f"Auto-reply sent to {notification.to} (request {notification.request_id})")
    return sent
