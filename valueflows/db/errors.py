"""
Error taxonomy for the persistence layer.

NotFoundError and ValidationError are the domain errors reported by the
repositories. Every other persistence failure surfaces as StorageFault,
carrying the original driver exception.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


class ResourceError(Exception):
    """Base class for errors raised by the repositories."""


class NotFoundError(ResourceError):
    def __init__(self, message: str = "not found"):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ValidationError(ResourceError):
    """One entry per invalid field, accepted or rejected as a unit."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: List[FieldError] = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(summary or "invalid")

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldError(field, message)])

    @classmethod
    def from_pydantic(cls, exc, prefix: Optional[str] = None) -> "ValidationError":
        """Convert a ``pydantic.ValidationError`` into field/message pairs."""
        errors = []
        for err in exc.errors():
            parts = ([prefix] if prefix else []) + [str(part) for part in err.get("loc", ())]
            loc = ".".join(parts) or "__root__"
            msg = err.get("msg", "is invalid")
            # pydantic prefixes messages raised from validators
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]
            errors.append(FieldError(loc, msg))
        return cls(errors)

    def as_list(self) -> list:
        return [e.as_dict() for e in self.errors]


class StorageFault(ResourceError):
    """Unrecoverable persistence failure; the transaction has been rolled back."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original
