"""
Response envelope returned by every mutating service operation.

Not to be confused with an HTTP response: the envelope carries the outcome of
a create/update/delete/link/unlink call, and the transport layer decides how
to render it.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.enums import ServiceStatus

_OK_STATUSES = frozenset(
    {
        ServiceStatus.CREATED,
        ServiceStatus.UPDATED,
        ServiceStatus.DELETED,
        ServiceStatus.SUCCESS,
    }
)


class ServiceResponse(BaseModel):
    """Status-tagged result of a mutating operation."""

    status: ServiceStatus
    created_id: Optional[int] = Field(
        default=None, description="Identity of the new entity; only set when status is CREATED"
    )
    messages: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in _OK_STATUSES

    @classmethod
    def not_found(cls, *messages: str) -> "ServiceResponse":
        return cls(status=ServiceStatus.NOT_FOUND, messages=list(messages))

    @classmethod
    def created(cls, created_id: int) -> "ServiceResponse":
        return cls(status=ServiceStatus.CREATED, created_id=created_id)

    @classmethod
    def updated(cls) -> "ServiceResponse":
        return cls(status=ServiceStatus.UPDATED)

    @classmethod
    def deleted(cls) -> "ServiceResponse":
        return cls(status=ServiceStatus.DELETED)

    @classmethod
    def success(cls) -> "ServiceResponse":
        return cls(status=ServiceStatus.SUCCESS)

    @classmethod
    def error(cls, *messages: str) -> "ServiceResponse":
        return cls(status=ServiceStatus.ERROR, messages=list(messages))

    @classmethod
    def duplicate(cls, *messages: str) -> "ServiceResponse":
        return cls(status=ServiceStatus.DUPLICATE, messages=list(messages))
