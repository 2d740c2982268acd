# -------------------------
# Enums
# -------------------------
from .enums import (
    Role,
    RequestStatus,
    OrganizationStatus,
    SessionState,
)

# -------------------------
# Identity / Session
# -------------------------
from .profile import ExternalPrincipal, UserProfile
from .session import ResolvedSession

# -------------------------
# Organization Requests
# -------------------------
from .organization_request import (
    OrganizationRequest,
    OrganizationRequestCreate,
    OrganizationRequestSubmitted,
    OrganizationRequestApproved,
)

# -------------------------
# Auto Reply
# -------------------------
from .auto_reply import (
    AutoReplyConfig,
    AutoReplyConfigUpdate,
    AutoReplyStatus,
    AutoReplyTemplate,
    ScheduledNotification,
)
