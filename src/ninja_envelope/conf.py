"""
ninja_envelope.conf
~~~~~~~~~~~~~~~~~~~
Centralised settings proxy with safe defaults and lazy loading.

Configure via ``settings.NINJA_ENVELOPE`` (all keys optional — defaults work
out of the box). The proxy resolves and caches each dotted-path string on
first access.

Full reference::

    NINJA_ENVELOPE = {
        # Callable (data) -> dict applied by EnvelopeAPI to view results
        "RESPONSE_WRAPPER": "ninja_envelope.responses.wrap_response",

        # json.JSONEncoder subclass used by ResponseFactory.json
        "JSON_ENCODER":     "django.core.serializers.json.DjangoJSONEncoder",

        # Extra response helpers, auto-loaded on startup
        "MACROS": {
            # "created": "apps.orders.responses.created",
        },
    }
"""

from django.utils.module_loading import import_string


DEFAULTS = {
    "RESPONSE_WRAPPER": "ninja_envelope.responses.wrap_response",
    "JSON_ENCODER":     "django.core.serializers.json.DjangoJSONEncoder",
}

# Keys that are dicts/lists rather than dotted-path strings
NON_IMPORT_KEYS = {"MACROS"}


class EnvelopeSettings:
    """Lazy proxy around NINJA_ENVELOPE that falls back to built-in defaults."""

    _cache: dict = {}

    def _resolve(self, key: str):
        if key not in self._cache:
            dotted = self.get(key) or DEFAULTS.get(key)
            if dotted is None:
                raise ValueError(f"No default defined for NINJA_ENVELOPE[{key!r}]")
            self._cache[key] = import_string(dotted)
        return self._cache[key]

    def get(self, key: str, default=None):
        """Return raw (non-import) setting value by key."""
        from django.conf import settings
        cfg = getattr(settings, "NINJA_ENVELOPE", None) or {}
        return cfg.get(key, default)

    @property
    def RESPONSE_WRAPPER(self): return self._resolve("RESPONSE_WRAPPER")
    @property
    def JSON_ENCODER(self):     return self._resolve("JSON_ENCODER")

    def reload(self):
        """Clear the import cache — useful in tests or settings overrides."""
        self._cache.clear()


envelope_settings = EnvelopeSettings()
