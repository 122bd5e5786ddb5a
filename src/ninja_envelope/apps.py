"""
ninja_envelope.apps
~~~~~~~~~~~~~~~~~~~
Django AppConfig that validates settings and registers configured response
helpers on startup.
"""

import logging

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured

from ninja_envelope.conf import DEFAULTS, NON_IMPORT_KEYS

logger = logging.getLogger("ninja_envelope.startup")


class NinjaEnvelopeConfig(AppConfig):
    name = "ninja_envelope"
    verbose_name = "Django Ninja Envelope"

    def ready(self):
        from django.conf import settings

        user_config = getattr(settings, "NINJA_ENVELOPE", None)
        if user_config is not None:
            self._validate(user_config)

        from ninja_envelope.factory import response_factory
        response_factory.load_from_settings()

        logger.info("django-ninja-envelope ready: helpers=%s", response_factory.macros())

    # ── Validation ────────────────────────────────────────────────────────

    @staticmethod
    def _validate(cfg) -> None:
        if not isinstance(cfg, dict):
            raise ImproperlyConfigured(
                f"[ninja_envelope] NINJA_ENVELOPE must be a dict, got {type(cfg).__name__}."
            )

        unknown = cfg.keys() - DEFAULTS.keys() - NON_IMPORT_KEYS
        if unknown:
            raise ImproperlyConfigured(
                f"[ninja_envelope] NINJA_ENVELOPE has unknown keys: {sorted(unknown)}. "
                "Run `ninja-envelope config` for a starter block."
            )

        for key in DEFAULTS.keys() & cfg.keys():
            if not isinstance(cfg[key], str):
                raise ImproperlyConfigured(
                    f"[ninja_envelope] NINJA_ENVELOPE[{key!r}] must be a dotted "
                    f"import path string, got {cfg[key]!r}."
                )

        macros = cfg.get("MACROS", {})
        if not isinstance(macros, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in macros.items()
        ):
            raise ImproperlyConfigured(
                "[ninja_envelope] NINJA_ENVELOPE['MACROS'] must map helper names "
                "to dotted import paths."
            )

        from ninja_envelope.factory import is_valid_macro_name
        bad_names = sorted(name for name in macros if not is_valid_macro_name(name))
        if bad_names:
            raise ImproperlyConfigured(
                f"[ninja_envelope] NINJA_ENVELOPE['MACROS'] has invalid helper names: "
                f"{bad_names}. Use public identifiers that do not shadow a "
                "ResponseFactory method."
            )
