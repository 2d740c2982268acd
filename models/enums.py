from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class Role(BaseStrEnum):
    """Profile role. Every role except SUPER_ADMIN belongs to the ORG_ family."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ORG_ADMIN = "ORG_ADMIN"
    ORG_MEMBER = "ORG_MEMBER"
    ORG_FINANCE = "ORG_FINANCE"
    ORG_AUDITOR = "ORG_AUDITOR"
    ORG_USER = "ORG_USER"


ORG_ROLE_PREFIX = "ORG_"


ROLE_LABELS = {
    Role.SUPER_ADMIN: "Super Administrator",
    Role.ORG_ADMIN: "Organization Administrator",
    Role.ORG_MEMBER: "Organization Member",
    Role.ORG_FINANCE: "Finance Manager",
    Role.ORG_AUDITOR: "Auditor",
    Role.ORG_USER: "Organization User",
}


def role_label(role) -> str:
    """Display label for a role; unknown roles are shown as stored."""
    if not role:
        return "None"
    try:
        return ROLE_LABELS[Role(role)]
    except ValueError:
        return str(role)


# -----------------------------------------------------
# ORGANIZATION REQUEST STATUS
# -----------------------------------------------------
class RequestStatus(BaseStrEnum):
    """Lifecycle of a public organization request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


# -----------------------------------------------------
# ORGANIZATION STATUS
# -----------------------------------------------------
class OrganizationStatus(BaseStrEnum):
    PENDING = "PENDING"
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


# -----------------------------------------------------
# SESSION STATE (redirect policy)
# -----------------------------------------------------
class SessionState(BaseStrEnum):
    """Where a session stands; each state maps to one canonical route."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    PROVISIONING = "PROVISIONING"
    PENDING_ACTIVATION = "PENDING_ACTIVATION"
    ACTIVE_SUPER_ADMIN = "ACTIVE_SUPER_ADMIN"
    ACTIVE_ORG = "ACTIVE_ORG"
    UNKNOWN_ROLE = "UNKNOWN_ROLE"
