"""
ninja_envelope.responses
~~~~~~~~~~~~~~~~~~~~~~~~
Standard success response envelope.

Every successful response is wrapped as::

    {"success": True, "data": <payload>}

Return one explicitly from any view with ``success``::

    from ninja_envelope import success

    @api.post("/orders")
    def create_order(request, payload: OrderIn):
        order = OrderService.create(payload)
        return success(order.as_dict(), 201)

Customise the wrapper ``EnvelopeAPI`` applies by pointing
``NINJA_ENVELOPE["RESPONSE_WRAPPER"]`` at your own callable with signature
``(data: Any) -> dict``.
"""

from http import HTTPStatus
from typing import Any

ENVELOPE_KEY = "success"


def envelope(data: Any) -> dict:
    """Return a fresh success envelope around *data*."""
    return {ENVELOPE_KEY: True, "data": data}


def wrap_response(data: Any) -> dict:
    """Wrap *data* in the standard success envelope."""
    return envelope(data)


def is_enveloped(data: Any) -> bool:
    """True if *data* is already a success envelope: ``success`` is True and ``data`` is present."""
    return isinstance(data, dict) and data.get(ENVELOPE_KEY) is True and "data" in data


def build_success(factory, data: Any, code: int = HTTPStatus.OK):
    """Factory helper registered as ``success`` on every ``ResponseFactory``."""
    return factory.json(envelope(data), status=code)


def success(data: Any, code: int = HTTPStatus.OK):
    """
    Build a JSON response with body ``{"success": true, "data": data}``.

    *code* is handed to the response layer as-is. Django rejects
    non-integer codes with ``TypeError`` and codes outside 100-599 with
    ``ValueError``; payloads the JSON encoder cannot serialise raise from
    the encoder. Neither is caught here.
    """
    from ninja_envelope.factory import response_factory
    return build_success(response_factory, data, code)
