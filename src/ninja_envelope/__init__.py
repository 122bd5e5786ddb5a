"""
ninja_envelope — Standard success envelope for Django Ninja APIs.

Every successful response carries the same shape::

    {"success": true, "data": <payload>}

    pip install django-ninja django-ninja-envelope

Basic usage::

    from ninja_envelope import EnvelopeAPI, success

    api = EnvelopeAPI(title="My API")

    @api.get("/items")
    def list_items(request):
        return ItemService.list()            # wrapped automatically

    @api.post("/items")
    def create_item(request, payload: ItemIn):
        return success(ItemService.create(payload), 201)
"""

from ninja_envelope.responses import envelope, is_enveloped, success, wrap_response
from ninja_envelope.factory   import ResponseFactory, response, response_factory

__version__ = "0.1.0"

__all__ = [
    "envelope", "is_enveloped", "success", "wrap_response",
    "ResponseFactory", "response", "response_factory",
    "EnvelopeAPI",
]


def __getattr__(name):
    # Importing ninja reads Django settings, so EnvelopeAPI loads on first use.
    if name == "EnvelopeAPI":
        from ninja_envelope.api import EnvelopeAPI
        return EnvelopeAPI
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
