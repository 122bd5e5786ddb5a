"""Callables referenced by dotted path from NINJA_ENVELOPE in the test suite."""

from ninja_envelope.responses import envelope


def created(factory, data, location=None):
    headers = {"Location": location} if location else None
    return factory.json(envelope(data), 201, headers)


def legacy_wrapper(data):
    return {"ok": True, "payload": data}
