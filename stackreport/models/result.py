"""Explicit success/failure value for remote calls that may fall back."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class RemoteResult(BaseModel, Generic[T]):
    """Outcome of a remote call: either a value or an error message."""

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> "RemoteResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "RemoteResult[T]":
        return cls(ok=False, error=error)
