import os

import pytest

FIXTURE_ENV = """# Example configuration
API_KEY=some-value
BUILD_NUMBER=5
IDENTIFIER=com.app.example
MAIL_TEMPLATE="The \\"Quoted\\" Title"
DB_PASSPHRASE=1qaz?#@"' wsx$
NETWORK_TIMEOUT=10.5
ONBOARDING_ENABLED=true
"""

FIXTURE_KEYS = (
    "API_KEY",
    "BUILD_NUMBER",
    "IDENTIFIER",
    "MAIL_TEMPLATE",
    "DB_PASSPHRASE",
    "NETWORK_TIMEOUT",
    "ONBOARDING_ENABLED",
)


@pytest.fixture(autouse=True)
def _isolate_process_env():
    # configure() writes straight into os.environ; restore it after every test
    saved = dict(os.environ)
    for key in list(os.environ):
        if key.startswith("TYPED_DOTENV_") or key in FIXTURE_KEYS:
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def fixture_env(tmp_path):
    path = tmp_path / "fixture.env"
    path.write_text(FIXTURE_ENV, encoding="utf-8")
    return path
