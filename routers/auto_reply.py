# routers/auto_reply.py

from fastapi import APIRouter, Depends

from core.auto_reply import AutoReplySettings, get_auto_reply_settings
from dependencies.auth import require_super_admin
from models.auto_reply import AutoReplyConfig, AutoReplyConfigUpdate, AutoReplyStatus, AutoReplyTemplate


router = APIRouter(
    prefix="/auto-reply",
    tags=["Auto Reply"],
    dependencies=[Depends(require_super_admin)],
)


@router.get("/status", response_model=AutoReplyStatus, summary="Auto-reply status")
def read_status(auto_reply: AutoReplySettings = Depends(get_auto_reply_settings)):
    return auto_reply.status()


@router.get("/config", response_model=AutoReplyConfig, summary="Current auto-reply configuration")
def read_config(auto_reply: AutoReplySettings = Depends(get_auto_reply_settings)):
    return auto_reply.get()


@router.patch("/config", response_model=AutoReplyConfig, summary="Update auto-reply configuration")
def update_config(
    payload: AutoReplyConfigUpdate,
    auto_reply: AutoReplySettings = Depends(get_auto_reply_settings),
):
    return auto_reply.update(payload)


@router.get("/preview", response_model=AutoReplyTemplate, summary="Render the template with sample data")
def preview(auto_reply: AutoReplySettings = Depends(get_auto_reply_settings)):
    return auto_reply.preview()
