from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from .._version import __version__
from ..config import NormalizationConfig, get_settings
from ..normalizer import normalize_attributes

APP_VERSION = __version__

app = FastAPI(title="svgnumeric API", version=APP_VERSION)


class NormalizeIn(BaseModel):
    attributes: Dict[str, str] = Field(..., description="Attribute name to raw value, in document order")
    config: Optional[Dict[str, Any]] = Field(
        default=None, description="Overrides for the server-side normalization settings"
    )


class NormalizeOut(BaseModel):
    attributes: Dict[str, str]
    config: Dict[str, Any]


def _server_settings() -> NormalizationConfig:
    try:
        return get_settings()
    except ValidationError as exc:
        raise HTTPException(status_code=503, detail=exc.errors(include_url=False)) from exc


def _effective_config(overrides: Optional[Dict[str, Any]]) -> NormalizationConfig:
    settings = _server_settings()
    if not overrides:
        return settings
    try:
        return settings.with_overrides(**overrides)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": APP_VERSION,
        "config": _server_settings().model_dump(by_alias=True),
    }


@app.post("/normalize", response_model=NormalizeOut)
def normalize(payload: NormalizeIn):
    config = _effective_config(payload.config)
    return NormalizeOut(
        attributes=normalize_attributes(payload.attributes, config),
        config=config.model_dump(by_alias=True),
    )
