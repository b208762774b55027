from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    status_code: int


class SchoolStoreError(RuntimeError):
    """Raised when the backing database cannot serve a request."""


class SchoolAlreadyExistsError(SchoolStoreError):
    """Raised when (name, address) is already registered."""
