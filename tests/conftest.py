import pytest


def pytest_configure(config):
    import django
    from django.conf import settings
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            DATABASES={"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}},
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "django.contrib.auth",
                "ninja_envelope",
            ],
            MIDDLEWARE=[],
            ROOT_URLCONF="tests.urls",
            NINJA_ENVELOPE={
                "RESPONSE_WRAPPER": "ninja_envelope.responses.wrap_response",
                "JSON_ENCODER":     "django.core.serializers.json.DjangoJSONEncoder",
                "MACROS": {
                    "created": "tests.helpers.created",
                },
            },
            USE_TZ=True,
        )
        django.setup()


@pytest.fixture
def client():
    from django.test import Client
    return Client()


@pytest.fixture
def settings_override():
    from django.test import override_settings
    return override_settings
