"""Moderation-related enumerations."""

from enum import Enum


class ReportType(str, Enum):
    """Kind of content a report points at."""

    AVISO = "aviso"
    PETOMATCH = "petomatch"
    USER = "user"


class ReportReason(str, Enum):
    """Reason code chosen by the reporter."""

    SPAM = "spam"
    INAPPROPRIATE = "inappropriate"
    FAKE = "fake"
    HARASSMENT = "harassment"
    SCAM = "scam"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Review status of a report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class ModerationAction(str, Enum):
    """Administrative action applied to reported content."""

    DISABLE = "disable"
    ENABLE = "enable"
    DELETE = "delete"


class HelpRequestState(str, Enum):
    """Values of the ``estado`` column of help-network posts."""

    ACTIVE = "activo"
    EXPIRED = "vencido"
