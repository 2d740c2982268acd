# core/auto_reply.py

"""
Auto-reply for organization requests.

schedule() decides *what* confirmation email to send and *when*; it owns no
timer and performs no I/O. The host hands the result to core.scheduler,
which queues the actual SMTP send.
"""

from typing import Optional
from datetime import datetime, timedelta
from threading import Lock

from core.config import settings
from core.logging_config import logger
from models.auto_reply import (
    AutoReplyConfig,
    AutoReplyConfigUpdate,
    AutoReplyStatus,
    AutoReplyTemplate,
    ScheduledNotification,
)
from models.enums import RequestStatus
from models.organization_request import OrganizationRequest


DEFAULT_SUBJECT = "Organization Setup Request Received - We'll Connect Back Soon!"

DEFAULT_BODY = """Dear {{organizationName}} Team,

Thank you for submitting your organization setup request!

We've received your request and our team is excited to help you get started with our organization management system.

What happens next:
• Our super admin team will review your request shortly
• You'll receive a follow-up email with next steps
• We'll schedule a brief setup call to configure your organization
• Your system will be ready within 24 hours

Your Request Details:
• Organization: {{organizationName}}
• Contact Email: {{contactEmail}}
• Business Type: {{businessType}}
• Submitted: {{submissionDate}}

Need immediate assistance?
If you have any urgent questions, contact our support team.

Best regards,
The Super Admin Team
Organization Management System

---
This is an automated message. Please do not reply directly to this email."""

NOT_SPECIFIED = "Not specified"


def format_submission_date(value: datetime) -> str:
    """e.g. 1/1/2024, 9:05:00 AM"""
    time_part = value.strftime("%I:%M:%S %p").lstrip("0")
    return f"{value.month}/{value.day}/{value.year}, {time_part}"


def template_values(request: OrganizationRequest) -> dict:
    return {
        "{{organizationName}}": request.organization_name,
        "{{contactEmail}}": request.contact_email,
        "{{businessType}}": request.business_type or NOT_SPECIFIED,
        "{{submissionDate}}": format_submission_date(request.created_at),
    }


def render_template(template: AutoReplyTemplate, request: OrganizationRequest) -> AutoReplyTemplate:
    """
    Literal substitution of the four known tokens in subject and body.
    Unknown {{tokens}} are left untouched.
    """
    subject = template.subject
    body = template.body

    for token, value in template_values(request).items():
        subject = subject.replace(token, value)
        body = body.replace(token, value)

    return AutoReplyTemplate(subject=subject, body=body)


def schedule(
    request: OrganizationRequest,
    config: AutoReplyConfig,
    now: Optional[datetime] = None,
) -> Optional[ScheduledNotification]:
    """
    Build the confirmation email for a submitted request, or None when
    auto-reply is disabled. `now` defaults to the submission time.
    """
    if not config.enabled:
        logger.info(f"Auto-reply disabled, skipping email for: {request.organization_name}")
        return None

    content = render_template(config.template, request)
    base_time = now or request.created_at

    notification = ScheduledNotification(
        to=request.contact_email,
        subject=content.subject,
        body=content.body,
        fire_at=base_time + timedelta(minutes=config.delay_minutes),
        request_id=request.id,
    )

    logger.info(
        f"Auto-reply for {request.organization_name} scheduled in "
        f"{config.delay_minutes} minutes ({notification.fire_at.isoformat()})"
    )
    return notification


def default_config() -> AutoReplyConfig:
    return AutoReplyConfig(
        enabled=settings.AUTO_REPLY_ENABLED,
        delay_minutes=settings.AUTO_REPLY_DELAY_MINUTES,
        template=AutoReplyTemplate(subject=DEFAULT_SUBJECT, body=DEFAULT_BODY),
    )


# ============================================================
# Process-wide config holder
# ============================================================
class AutoReplySettings:
    """
    Owns the runtime AutoReplyConfig and the delivery counters. Updates
    replace the whole config object (last write wins); readers always see
    a complete config.
    """

    def __init__(self, config: Optional[AutoReplyConfig] = None):
        self._config = config or default_config()
        self._lock = Lock()
        self._attempted = 0
        self._sent = 0
        self._last_sent: Optional[datetime] = None

    def get(self) -> AutoReplyConfig:
        return self._config

    def update(self, changes: AutoReplyConfigUpdate) -> AutoReplyConfig:
        update = {name: value for name, value in changes if value is not None}

        with self._lock:
            self._config = self._config.model_copy(update=update)
            config = self._config

        logger.info(
            f"Auto-reply configuration updated: enabled={config.enabled}, "
            f"delay_minutes={config.delay_minutes}"
        )
        return config

    def record_delivery(self, sent: bool, at: Optional[datetime] = None):
        with self._lock:
            self._attempted += 1
            if sent:
                self._sent += 1
                self._last_sent = at or datetime.utcnow()

    def reset(self):
        with self._lock:
            self._config = default_config()
            self._attempted = 0
            self._sent = 0
            self._last_sent = None

    def status(self) -> AutoReplyStatus:
        with self._lock:
            config = self._config
            attempted, sent, last_sent = self._attempted, self._sent, self._last_sent

        if not config.enabled:
            success_rate = 0
        elif attempted:
            success_rate = round(100 * sent / attempted)
        else:
            success_rate = 100

        return AutoReplyStatus(
            enabled=config.enabled,
            delay_minutes=config.delay_minutes,
            success_rate=success_rate,
            total_sent=sent,
            last_sent=last_sent,
        )

    def preview(self) -> AutoReplyTemplate:
        """Render the current template against a sample request."""
        return render_template(self._config.template, sample_request())


def sample_request() -> OrganizationRequest:
    return OrganizationRequest(
        id="sample-id",
        organization_name="Acme Corporation",
        contact_email="admin@acme.com",
        contact_name="John Smith",
        business_type="Technology",
        country="United States",
        status=RequestStatus.PENDING,
        created_at=datetime.utcnow(),
    )


# Global holder instance
auto_reply_settings = AutoReplySettings()


def get_auto_reply_settings() -> AutoReplySettings:
    """FastAPI dependency / accessor for the global holder."""
    return auto_reply_settings
