"""Per-request values shared with log records and error responses."""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

_request_id: ContextVar[str] = ContextVar("taskassist_request_id", default=NO_REQUEST_ID)
_user_id: ContextVar[int | None] = ContextVar("taskassist_user_id", default=None)


def new_request_id() -> str:
    return uuid.uuid4().hex


def get_request_id() -> str:
    return _request_id.get()


def bind_request_id(request_id: str) -> Token[str]:
    return _request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id.reset(token)


def get_user_id() -> int | None:
    """Return the id of the authenticated caller, if the request resolved one."""

    return _user_id.get()


def bind_user_id(user_id: int | None) -> Token[int | None]:
    """Remember the authenticated caller for the rest of the request."""

    return _user_id.set(user_id)


__all__ = [
    "NO_REQUEST_ID",
    "REQUEST_ID_HEADER",
    "bind_request_id",
    "bind_user_id",
    "get_request_id",
    "get_user_id",
    "new_request_id",
    "reset_request_id",
]
