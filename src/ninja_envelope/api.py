"""
ninja_envelope.api
~~~~~~~~~~~~~~~~~~
EnvelopeAPI — a NinjaAPI subclass that wraps every successful view result
in the response envelope.

Drop-in replacement for NinjaAPI::

    # Before:
    from ninja import NinjaAPI
    api = NinjaAPI()

    # After:
    from ninja_envelope import EnvelopeAPI
    api = EnvelopeAPI()

Every argument NinjaAPI accepts still works::

    api = EnvelopeAPI(title="Bookstore API", version="2.0")

What EnvelopeAPI does
---------------------
1. Results with a status below 400 become ``{"success": True, "data": <payload>}``
2. ``return 201, obj`` keeps its status and is wrapped the same way
3. Values that already carry ``"success"`` are passed through as-is
4. Error bodies from Ninja's exception handlers (404, 422, ...) are left alone
5. Views returning an ``HttpResponse`` (e.g. ``success(...)``) bypass all of this
"""

import logging
from http import HTTPStatus
from typing import Any

from ninja import NinjaAPI

from ninja_envelope.conf import envelope_settings
from ninja_envelope.responses import is_enveloped

logger = logging.getLogger("ninja_envelope.api")


class EnvelopeAPI(NinjaAPI):
    """Drop-in NinjaAPI subclass that applies the success envelope."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        logger.debug("EnvelopeAPI initialised: title=%r version=%r",
                     getattr(self, "title", None), getattr(self, "version", None))

    def create_response(self, request, data: Any, *args, status=None,
                        temporal_response=None, **kwargs):
        """
        Wrap *data* in the response envelope when the response is a success
        and *data* is not already wrapped.
        """
        if _is_success(_effective_status(status, temporal_response)) and not is_enveloped(data):
            data = envelope_settings.RESPONSE_WRAPPER(data)
        return super().create_response(
            request, data, *args,
            status=status, temporal_response=temporal_response, **kwargs,
        )


def _effective_status(status, temporal_response) -> int:
    if status:
        return int(status)
    if temporal_response is not None:
        return temporal_response.status_code
    return HTTPStatus.OK


def _is_success(status: int) -> bool:
    return status < HTTPStatus.BAD_REQUEST
