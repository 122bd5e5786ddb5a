"""
ninja_envelope.cli
~~~~~~~~~~~~~~~~~~
``ninja-envelope`` — command-line helper.

Commands
--------
    ninja-envelope config                   Print a starter NINJA_ENVELOPE settings block
    ninja-envelope wrap [JSON] [--code N]   Print the response body for a payload

Usage::

    ninja-envelope wrap '{"id": 1}'
    {"success": true, "data": {"id": 1}}

    echo '[1, 2]' | ninja-envelope wrap --code 201 -i
    HTTP 201 Created
    Content-Type: application/json

    {"success": true, "data": [1, 2]}
"""

import argparse
import json
import sys
import textwrap

# ── Starter settings ───────────────────────────────────────────────────────

SETTINGS_BLOCK = textwrap.dedent("""\
    # ── Django Ninja Envelope ─────────────────────────────────────────────────
    INSTALLED_APPS += ["ninja_envelope"]

    NINJA_ENVELOPE = {
        # Envelope: {"success": True, "data": ...}
        "RESPONSE_WRAPPER": "ninja_envelope.responses.wrap_response",
        # Encoder used for every JSON response body
        "JSON_ENCODER":     "django.core.serializers.json.DjangoJSONEncoder",
        # Extra response helpers: response().<name>(...)
        "MACROS": {},
    }
    # ─────────────────────────────────────────────────────────────────────────
""")


# ── Helpers ────────────────────────────────────────────────────────────────

def _ensure_settings() -> None:
    """Configure bare Django settings when run outside a project."""
    from django.conf import settings
    if not settings.configured:
        settings.configure()


# ── Commands ───────────────────────────────────────────────────────────────

def cmd_config(args) -> int:
    print("\n  Add to your settings.py:\n")
    print(SETTINGS_BLOCK)
    return 0


def cmd_wrap(args) -> int:
    raw = args.payload if args.payload is not None else sys.stdin.read()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        print(f"[ninja-envelope] Error: invalid JSON payload: {exc}", file=sys.stderr)
        return 1

    _ensure_settings()
    from ninja_envelope.responses import success

    try:
        response = success(payload, args.code)
    except ValueError as exc:
        print(f"[ninja-envelope] Error: {exc}", file=sys.stderr)
        return 1

    if args.include:
        print(f"HTTP {response.status_code} {response.reason_phrase}")
        for name, value in response.items():
            print(f"{name}: {value}")
        print()
    print(response.content.decode(response.charset))
    return 0


# ── Entrypoint ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ninja-envelope",
        description="Django Ninja Envelope — response envelope tooling",
    )
    subs = parser.add_subparsers(dest="command", required=True)

    c = subs.add_parser("config", help="Print starter NINJA_ENVELOPE settings block")
    c.set_defaults(func=cmd_config)

    w = subs.add_parser("wrap", help="Print the envelope for a JSON payload")
    w.add_argument("payload", nargs="?", help="JSON payload (read from stdin if omitted)")
    w.add_argument("--code", type=int, default=200, help="HTTP status code (default: 200)")
    w.add_argument("-i", "--include", action="store_true",
                   help="Print the status line and headers before the body")
    w.set_defaults(func=cmd_wrap)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
