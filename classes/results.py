"""Result types shared by the assessment engine and the routes.

``Ok`` / ``Err`` model the ``{success, data, error}`` response envelope,
``Inserted`` / ``ConflictExisting`` model the outcome of a write that may hit
a uniqueness constraint.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

# error code -> HTTP status
STATUS_CODES = {
    "VALIDATION_ERROR": 400,
    "INVALID_TEST_TYPE": 400,
    "INVALID_STUDENT": 400,
    "ALREADY_COMPLETED": 400,
    "PRE_TEST_REQUIRED": 400,
    "EXPORT_ERROR": 400,
    "UNAUTHORIZED": 401,
    "INVALID_CREDENTIALS": 401,
    "NO_TOKEN": 401,
    "FORBIDDEN": 403,
    "NOT_FOUND": 404,
    "USER_NOT_FOUND": 404,
    "INTERNAL_ERROR": 500,
}


@dataclass(frozen=True)
class Ok:
    data: Any = None
    status: int = 200

    @property
    def success(self):
        return True


@dataclass(frozen=True)
class Err:
    code: str
    message: str
    details: Optional[dict] = None

    @property
    def success(self):
        return False

    @property
    def status(self):
        return STATUS_CODES.get(self.code, 500)

    def to_dict(self):
        error = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return error


@dataclass(frozen=True)
class Inserted:
    row: Any


@dataclass(frozen=True)
class ConflictExisting:
    table: str = ""
    constraint: dict = field(default_factory=dict)
