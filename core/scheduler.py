# core/scheduler.py
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger

from core.logging_config import logger
from core.notifications import dispatch_notification
from models.auto_reply import ScheduledNotification


_scheduler: Optional[BackgroundScheduler] = None


def get_scheduler() -> BackgroundScheduler:
    """Lazily create the process-wide scheduler (not started)."""
    global _scheduler
    if _scheduler is None:
        _scheduler = BackgroundScheduler(timezone="UTC")
    return _scheduler


def start_scheduler():
    """
    Start the APScheduler background thread that delivers queued
    auto-reply emails.
    """
    scheduler = get_scheduler()
    if not scheduler.running:
        scheduler.start()
        logger.info("⏰ Notification scheduler started.")


def shutdown_scheduler():
    global _scheduler
    if _scheduler is not None and _scheduler.running:
        _scheduler.shutdown(wait=False)
        logger.info("Notification scheduler stopped.")
    _scheduler = None


def enqueue_notification(notification: ScheduledNotification) -> Optional[str]:
    """
    Queue a one-off send at notification.fire_at and return the job id.
    Jobs are keyed by request id, so re-queueing a request replaces its job.

    Returns None and queues nothing when the scheduler is not running.
    """
    job_id = f"auto_reply:{notification.request_id or notification.to}"
    scheduler = get_scheduler()

    if not scheduler.running:
        logger.warning(f"Scheduler not running - auto-reply {job_id} not queued")
        return None

    scheduler.add_job(
        dispatch_notification,
        trigger=DateTrigger(run_date=notification.fire_at, timezone="UTC"),
        args=[notification],
        id=job_id,
        replace_existing=True,
        misfire_grace_time=None,
    )

    logger.info(f"Queued {job_id} for {notification.fire_at.isoformat()}")
    return job_id
