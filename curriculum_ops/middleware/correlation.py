"""Request correlation ids.

Every response carries ``X-Request-ID``. A caller-supplied id is echoed back
(trimmed to ``MAX_REQUEST_ID_LENGTH``); otherwise a UUID4 is minted. The id is
picked up by the logging processor and attached to error envelopes' logs.
"""

import uuid

from asgi_correlation_id import CorrelationIdMiddleware
from asgi_correlation_id.context import correlation_id
from fastapi import FastAPI

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128


def _trim_request_id(value: str) -> str:
    return value.strip()[:MAX_REQUEST_ID_LENGTH]


def setup_correlation_middleware(app: FastAPI) -> None:
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name=REQUEST_ID_HEADER,
        update_request_header=True,
        generator=lambda: str(uuid.uuid4()),
        validator=None,
        transformer=_trim_request_id,
    )


def get_correlation_id() -> str | None:
    """Correlation id of the request being served, or None outside one."""
    return correlation_id.get(None)


__all__ = ["REQUEST_ID_HEADER", "setup_correlation_middleware", "get_correlation_id"]
