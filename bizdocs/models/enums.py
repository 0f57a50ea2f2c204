"""Enums for model fields."""

from enum import Enum


class CompanySize(str, Enum):
    """Size classification of a company (Brazilian legal categories)."""

    MEI = "MEI"  # microempreendedor individual
    ME = "ME"  # microempresa
    EPP = "EPP"  # empresa de pequeno porte
    EMP = "EMP"  # empresa de medio porte
    EG = "EG"  # empresa de grande porte

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class ServiceRequestStatus(str, Enum):
    """Lifecycle of a service request raised by a company."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CLOSED = "closed"
