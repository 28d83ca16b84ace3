from __future__ import annotations

import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from preset_validation import (
    PresetValidator,
    TaxOffice,
    TaxOfficeRegistry,
    ValidationPreset,
)

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled — no env var configured
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models ──────────────────────────────────────────────────────────


class ValidateRequest(BaseModel):
    preset: str
    value: Any = None


class ValidateResponse(BaseModel):
    preset: str
    valid: bool


class TaxNumberRequest(BaseModel):
    value: str


class TaxNumberResponse(BaseModel):
    valid: bool
    canonical: str | None = None
    regional_code: str | None = None
    state_name: str | None = None
    reason: str | None = None


class TaxOfficeOut(BaseModel):
    code: str
    state_number: str
    office_number: str
    state_name: str
    procedure: str


def _office_out(office: TaxOffice) -> TaxOfficeOut:
    return TaxOfficeOut(
        code=office.code,
        state_number=office.state_number,
        office_number=office.office_number,
        state_name=office.state_name,
        procedure=office.procedure.value,
    )


# ── Validator singleton ──────────────────────────────────────────────────────

_validator: PresetValidator | None = None


def _build_validator() -> PresetValidator:
    tax_office_file = os.getenv("TAX_OFFICE_FILE")
    registry = TaxOfficeRegistry(Path(tax_office_file)) if tax_office_file else None
    return PresetValidator(registry=registry)


@asynccontextmanager
async def lifespan(_: FastAPI):
    global _validator
    _validator = _build_validator()
    yield
    _validator = None


def _get_validator() -> PresetValidator:
    assert _validator is not None
    return _validator


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="preset-validation", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── JSON API routes ──────────────────────────────────────────────────────────


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.get("/presets", dependencies=[Depends(verify_api_key)])
async def presets() -> list[str]:
    return [p.value for p in ValidationPreset]


@app.post(
    "/validate",
    response_model=ValidateResponse,
    dependencies=[Depends(verify_api_key)],
)
async def validate(request: ValidateRequest) -> ValidateResponse:
    valid = _get_validator().run(request.preset, request.value)
    return ValidateResponse(preset=request.preset, valid=valid)


@app.post(
    "/tax-number",
    response_model=TaxNumberResponse,
    dependencies=[Depends(verify_api_key)],
)
async def tax_number(request: TaxNumberRequest) -> TaxNumberResponse:
    outcome = _get_validator().validate_tax_number_detailed(request.value)
    return TaxNumberResponse(
        valid=outcome.valid,
        canonical=outcome.canonical,
        regional_code=outcome.regional_code,
        state_name=outcome.state_name,
        reason=outcome.reason.value if outcome.reason else None,
    )


@app.get(
    "/tax-offices",
    response_model=list[TaxOfficeOut],
    dependencies=[Depends(verify_api_key)],
)
async def tax_offices(state: str | None = None) -> list[TaxOfficeOut]:
    return [
        _office_out(o)
        for o in _get_validator().registry
        if state is None or o.state_name == state
    ]


@app.get(
    "/tax-offices/{code}",
    response_model=TaxOfficeOut,
    dependencies=[Depends(verify_api_key)],
)
async def tax_office(code: str) -> TaxOfficeOut:
    office = _get_validator().registry.get(code)
    if office is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown tax office")
    return _office_out(office)
