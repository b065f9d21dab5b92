import pytest

from svgnumeric.config import reset_settings

_ENV_VARS = (
    "SVGNUMERIC_CONFIG_FILE",
    "SVGNUMERIC_FLOAT_PRECISION",
    "SVGNUMERIC_LEADING_ZERO",
    "SVGNUMERIC_DEFAULT_PX",
    "SVGNUMERIC_CONVERT_TO_PX",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
