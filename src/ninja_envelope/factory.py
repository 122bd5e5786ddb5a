"""
ninja_envelope.factory
~~~~~~~~~~~~~~~~~~~~~~
ResponseFactory — builds JSON responses and carries named response helpers
("macros") that views call by name.

Every factory knows ``json`` (the primitive) and ``success``::

    from ninja_envelope.factory import response

    return response().success({"id": 1})          # 200
    return response().success(order, 201)          # 201
    return response().json({"raw": True}, 202)     # no envelope

Registering your own helpers::

    from ninja_envelope.factory import response_factory

    @response_factory.macro("created")
    def created(factory, data, location=None):
        headers = {"Location": location} if location else None
        return factory.json({"success": True, "data": data}, 201, headers)

    return response().created(order, location=f"/orders/{order.id}")

Registering via settings (auto-loaded on startup)::

    NINJA_ENVELOPE = {
        "MACROS": {
            "created": "apps.orders.responses.created",
        },
    }

Helpers receive the factory as their first argument, followed by whatever
the caller passes.
"""

import logging
from http import HTTPStatus
from types import MethodType
from typing import Any, Callable

from django.http import JsonResponse

from ninja_envelope.conf import envelope_settings
from ninja_envelope.responses import build_success

logger = logging.getLogger("ninja_envelope.factory")


class ResponseFactory:
    """
    JSON response builder with a per-instance table of named helpers.

    The helper table is written at startup and read during requests.
    """

    def __init__(self):
        self._macros: dict[str, Callable] = {}
        self.macro("success", build_success)

    # ── Primitive ─────────────────────────────────────────────────────────

    def json(self, body: Any, status: int = HTTPStatus.OK,
             headers: dict | None = None) -> JsonResponse:
        """
        Serialise *body* into a ``JsonResponse`` with the given *status*.

        Non-dict bodies (lists, scalars, None) are allowed.
        """
        response = JsonResponse(
            body,
            status=status,
            safe=False,
            encoder=envelope_settings.JSON_ENCODER,
        )
        for name, value in (headers or {}).items():
            response[name] = value
        return response

    # ── Registration ──────────────────────────────────────────────────────

    def macro(self, name: str, fn: Callable | None = None, *, replace: bool = False):
        """
        Register *fn* as a helper called *name*.

        Without *fn*, returns a decorator::

            @factory.macro("accepted")
            def accepted(factory, data):
                return factory.json({"success": True, "data": data}, 202)
        """
        if fn is None:
            def decorator(func: Callable) -> Callable:
                self.macro(name, func, replace=replace)
                return func
            return decorator

        if not is_valid_macro_name(name):
            raise ValueError(
                f"{name!r} cannot be used as a response helper name. "
                "Use a public identifier that does not shadow a ResponseFactory method."
            )
        if name in self._macros and not replace:
            raise ValueError(
                f"A response helper named {name!r} is already registered. "
                "Pass replace=True to override it."
            )
        if not callable(fn):
            raise TypeError(f"Response helper {name!r} must be callable, got {fn!r}")

        self._macros[name] = fn
        logger.debug("Registered response helper '%s' -> %s",
                     name, getattr(fn, "__qualname__", repr(fn)))
        return fn

    def has_macro(self, name: str) -> bool:
        return name in self._macros

    def macros(self) -> list[str]:
        """Return the names of all registered helpers."""
        return list(self._macros)

    def forget(self, name: str) -> None:
        """Remove a helper by name. Unknown names are ignored."""
        self._macros.pop(name, None)

    def flush(self) -> None:
        """Remove every registered helper, ``success`` included."""
        self._macros.clear()

    def load_from_settings(self) -> None:
        """
        Import and register helpers listed in NINJA_ENVELOPE["MACROS"].
        Called automatically by NinjaEnvelopeConfig.ready().
        """
        from django.utils.module_loading import import_string

        for name, dotted_path in envelope_settings.get("MACROS", {}).items():
            try:
                fn = import_string(dotted_path)
            except ImportError:
                logger.exception("Failed to load response helper '%s' from '%s'",
                                 name, dotted_path)
                continue
            self.macro(name, fn, replace=True)

    # ── Dispatch ──────────────────────────────────────────────────────────

    def __getattr__(self, name: str):
        macros = self.__dict__.get("_macros", {})
        if name in macros:
            return MethodType(macros[name], self)
        raise AttributeError(
            f"{type(self).__name__!s} has no response helper named {name!r}"
        )

    def __len__(self) -> int:
        return len(self._macros)

    def __repr__(self) -> str:
        return f"<ResponseFactory [{', '.join(self._macros)}]>"


def is_valid_macro_name(name) -> bool:
    """Public identifier that does not shadow a ResponseFactory attribute."""
    return (isinstance(name, str) and name.isidentifier()
            and not name.startswith("_") and not hasattr(ResponseFactory, name))


# ── Global singleton ──────────────────────────────────────────────────────
response_factory = ResponseFactory()


def response() -> ResponseFactory:
    """Return the global response factory."""
    return response_factory
