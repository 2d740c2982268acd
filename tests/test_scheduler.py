# tests/test_scheduler.py

"""
Tests for queueing notifications and delivering them over SMTP.
"""

import pytest
from datetime import datetime
from unittest.mock import MagicMock, patch

from core import scheduler
from core.auto_reply import auto_reply_settings
from core.notifications import dispatch_notification, send_email
from models.auto_reply import ScheduledNotification


@pytest.fixture
def notification():
    return ScheduledNotification(
        to="a@acme.com",
        subject="Received",
        body="Thanks Acme",
        fire_at=datetime(2030, 1, 1, 0, 10),
        request_id="req-1",
    )


@pytest.fixture(autouse=True)
def fresh_scheduler():
    scheduler.shutdown_scheduler()
    yield
    scheduler.shutdown_scheduler()


def test_enqueue_adds_date_job(notification):
    scheduler.start_scheduler()
    job_id = scheduler.enqueue_notification(notification)

    assert job_id == "auto_reply:req-1"
    jobs = scheduler.get_scheduler().get_jobs()
    assert len(jobs) == 1
    assert jobs[0].args == (notification,)


def test_enqueue_same_request_replaces_job(notification):
    scheduler.start_scheduler()
    scheduler.enqueue_notification(notification)
    scheduler.enqueue_notification(notification.model_copy(update={"body": "v2"}))

    jobs = scheduler.get_scheduler().get_jobs()
    assert len(jobs) == 1
    assert jobs[0].args[0].body == "v2"


def test_enqueue_without_running_scheduler_queues_nothing(notification):
    assert scheduler.enqueue_notification(notification) is None
    assert scheduler.get_scheduler().get_jobs() == []


def test_send_email_skips_without_credentials():
    with patch("core.notifications.settings") as mock_settings, patch("core.notifications.smtplib") as mock_smtp:
        mock_settings.SMTP_HOST = None
        assert send_email("s", "b", to="a@acme.com") is False

    mock_smtp.SMTP_SSL.assert_not_called()


def test_send_email_skips_without_recipients():
    assert send_email("s", "b") is False


def test_dispatch_sends_over_smtp(notification):
    server = MagicMock()

    with patch("core.notifications.settings") as mock_settings, patch("core.notifications.smtplib") as mock_smtp:
        mock_settings.SMTP_HOST = "smtp.example.com"
        mock_settings.SMTP_PORT = 465
        mock_settings.SMTP_USER = "bot@example.com"
        mock_settings.SMTP_PASS = "secret"
        mock_settings.SMTP_FROM = None
        mock_smtp.SMTP_SSL.return_value.__enter__.return_value = server

        assert dispatch_notification(notification) is True

    server.login.assert_called_once_with("bot@example.com", "secret")
    sent = server.send_message.call_args.args[0]
    assert sent["To"] == "a@acme.com"
    assert sent["Subject"] == "Received"

    status = auto_reply_settings.status()
    assert status.total_sent == 1
    assert status.last_sent is not None
    assert status.success_rate == 100


def test_dispatch_failure_counts_against_success_rate(notification):
    with patch("core.notifications.settings") as mock_settings, patch("core.notifications.smtplib") as mock_smtp:
        mock_settings.SMTP_HOST = "smtp.example.com"
        mock_settings.SMTP_PORT = 465
        mock_settings.SMTP_USER = "bot@example.com"
        mock_settings.SMTP_PASS = "secret"
        mock_settings.SMTP_FROM = None
        mock_smtp.SMTP_SSL.side_effect = OSError("connection refused")

        with pytest.raises(OSError):
            dispatch_notification(notification)

    status = auto_reply_settings.status()
    assert status.total_sent == 0
    assert status.last_sent is None
    assert status.success_rate == 0
