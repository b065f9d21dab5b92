import pytest
from fastapi import HTTPException


def test_import_app():
    from svgnumeric.service.app import app
    assert app is not None


def test_health_reports_active_config(monkeypatch):
    from svgnumeric.service.app import health

    monkeypatch.setenv("SVGNUMERIC_FLOAT_PRECISION", "2")
    payload = health()

    assert payload["status"] == "ok"
    assert payload["config"]["floatPrecision"] == 2


def test_normalize_endpoint():
    from svgnumeric.service.app import NormalizeIn, normalize

    out = normalize(
        NormalizeIn(
            attributes={"viewBox": "0 0 99.999999 50", "width": "1in", "version": "1.1"},
            config={"floatPrecision": 2},
        )
    )

    assert out.attributes == {"viewBox": "0 0 100 50", "width": "96", "version": "1.1"}
    assert out.config["floatPrecision"] == 2


def test_normalize_endpoint_rejects_bad_config():
    from svgnumeric.service.app import NormalizeIn, normalize

    with pytest.raises(HTTPException) as excinfo:
        normalize(NormalizeIn(attributes={"x": "1"}, config={"floatPrecision": -1}))
    assert excinfo.value.status_code == 422


def test_health_reports_invalid_environment(monkeypatch):
    from svgnumeric.service.app import health

    monkeypatch.setenv("SVGNUMERIC_FLOAT_PRECISION", "-4")

    with pytest.raises(HTTPException) as excinfo:
        health()
    assert excinfo.value.status_code == 503
    assert excinfo.value.detail
