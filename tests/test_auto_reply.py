# tests/test_auto_reply.py

"""
Tests for auto-reply rendering, scheduling and the config holder.
"""

from datetime import datetime, timedelta

from core.auto_reply import (
    AutoReplySettings,
    default_config,
    format_submission_date,
    render_template,
    schedule,
)
from models.auto_reply import AutoReplyConfigUpdate, AutoReplyTemplate


TOKENS = "{{organizationName}}|{{contactEmail}}|{{businessType}}|{{submissionDate}}"


def test_render_replaces_all_tokens(acme_request):
    template = AutoReplyTemplate(subject="Hi {{organizationName}}", body=TOKENS)
    rendered = render_template(template, acme_request)

    assert rendered.subject == "Hi Acme"
    assert rendered.body == "Acme|a@acme.com|Tech|1/1/2024, 12:00:00 AM"
    assert "{{" not in rendered.body


def test_render_is_idempotent(acme_request):
    template = default_config().template
    assert render_template(template, acme_request) == render_template(template, acme_request)


def test_render_without_tokens_is_unchanged(acme_request):
    template = AutoReplyTemplate(subject="Thanks", body="We got your request.")
    assert render_template(template, acme_request) == template


def test_render_keeps_unknown_tokens(acme_request):
    template = AutoReplyTemplate(subject="s", body="{{organizationName}} {{ticketNumber}}")
    assert render_template(template, acme_request).body == "Acme {{ticketNumber}}"


def test_missing_business_type_renders_not_specified(acme_request):
    req = acme_request.model_copy(update={"business_type": None})
    template = AutoReplyTemplate(subject="s", body="{{businessType}}")
    assert render_template(template, req).body == "Not specified"


def test_submission_date_format():
    assert format_submission_date(datetime(2024, 3, 5, 14, 7, 9)) == "3/5/2024, 2:07:09 PM"


def test_schedule_returns_none_when_disabled(acme_request):
    config = default_config().model_copy(update={"enabled": False})
    assert schedule(acme_request, config) is None


def test_schedule_acme_end_to_end(acme_request):
    notification = schedule(acme_request, default_config())

    assert notification is not None
    assert notification.to == "a@acme.com"
    assert "Acme" in notification.body
    assert "a@acme.com" in notification.body
    assert notification.fire_at == datetime(2024, 1, 1) + timedelta(minutes=10)
    assert notification.request_id == "req-1"


def test_schedule_uses_explicit_now(acme_request):
    now = datetime(2024, 6, 1, 12, 0)
    config = default_config().model_copy(update={"delay_minutes": 3})
    assert schedule(acme_request, config, now=now).fire_at == now + timedelta(minutes=3)


def test_settings_update_is_partial():
    holder = AutoReplySettings()
    original_template = holder.get().template

    config = holder.update(AutoReplyConfigUpdate(delay_minutes=30))

    assert config.delay_minutes == 30
    assert config.enabled is True
    assert config.template == original_template
    assert holder.get() is config


def test_settings_update_template():
    holder = AutoReplySettings()
    new_template = AutoReplyTemplate(subject="New", body="Body for {{organizationName}}")

    holder.update(AutoReplyConfigUpdate(template=new_template))

    assert isinstance(holder.get().template, AutoReplyTemplate)
    assert holder.preview().body == "Body for Acme Corporation"


def test_status_reflects_enabled_flag():
    holder = AutoReplySettings()
    assert holder.status().success_rate == 100

    holder.update(AutoReplyConfigUpdate(enabled=False))
    status = holder.status()
    assert status.enabled is False
    assert status.success_rate == 0


def test_status_counts_deliveries():
    holder = AutoReplySettings()
    sent_at = datetime(2024, 1, 1, 0, 10)

    holder.record_delivery(True, at=sent_at)
    holder.record_delivery(True, at=sent_at)
    holder.record_delivery(False)
    status = holder.status()

    assert status.total_sent == 2
    assert status.last_sent == sent_at
    assert status.success_rate == 67

    holder.reset()
    assert holder.status().total_sent == 0
