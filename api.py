"""
Ariary Words — FastAPI Server
==============================

RESTful API for spelling ariary amounts on receipts and e-mails.

Endpoints:
    POST /amount/words              Spell an amount in French words
    POST /amount/parse              Read French words back into an amount
    POST /receipts/email-params     Build e-mail relay template variables
    GET  /health                    Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ariary_words import __version__
from ariary_words.config import EmailRelaySettings
from ariary_words.exceptions import (
    EmailRelayNotConfiguredError,
    InvalidAmountError,
    InvalidRecipientError,
)
from ariary_words.models import AmountInWords, ReceiptData
from ariary_words.receipt import build_email_template_params
from ariary_words.speller import CURRENCY_NAME, spell_amount
from ariary_words.word_to_number import words_to_amount

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (load settings once) ──────────────────────

_settings: EmailRelaySettings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read the e-mail relay settings from the environment on startup."""
    global _settings  # noqa: PLW0603
    _settings = EmailRelaySettings.from_env()
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Ariary Words API",
    description=(
        "French amount-in-words for Madagascar point-of-sale receipts. "
        "Spells ariary totals, reads them back for cross-checking, and "
        "prepares receipt e-mail template variables."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class SpellRequest(BaseModel):
    """Request body for the /amount/words endpoint."""

    amount: Optional[Decimal] = Field(
        ...,
        description="Amount in ariary. Decimals are rounded half-up; negatives are reported as invalid.",
        json_schema_extra={"example": 21000},
    )


class ParseRequest(BaseModel):
    """Request body for the /amount/parse endpoint."""

    words: str = Field(
        ...,
        min_length=1,
        description="French amount phrase, with or without 'ariary' or the receipt preamble.",
        json_schema_extra={"example": "vingt et un mille ariary"},
    )


class ParseResponse(BaseModel):
    amount: int
    words: str


class EmailParamsRequest(BaseModel):
    """Request body for the /receipts/email-params endpoint."""

    receipt: ReceiptData
    customer_email: str = Field(..., min_length=3)


class HealthResponse(BaseModel):
    status: str
    version: str
    currency: str
    email_relay_configured: bool


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> EmailRelaySettings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Settings not initialised")
    return _settings


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/amount/words",
    summary="Spell an amount in French words",
    tags=["Amounts"],
)
def amount_to_words(request: SpellRequest) -> AmountInWords:
    """Spell an ariary amount.

    Never fails on a bad amount: `is_valid` is `false` and the words read
    **montant invalide**, exactly as they would on a printed receipt.
    """
    return spell_amount(request.amount)


@app.post(
    "/amount/parse",
    summary="Read French words back into an amount",
    tags=["Amounts"],
    responses={422: {"description": "Text is not a French amount"}},
)
def words_to_amount_endpoint(request: ParseRequest) -> ParseResponse:
    """Convert a French amount phrase back to whole ariary."""
    try:
        amount = words_to_amount(request.words)
    except ValueError as e:
        logger.info("Rejected amount phrase %r: %s", request.words, e)
        raise HTTPException(status_code=422, detail=str(e))
    return ParseResponse(amount=amount, words=request.words)


@app.post(
    "/receipts/email-params",
    summary="Build receipt e-mail template variables",
    tags=["Receipts"],
    responses={
        400: {"description": "Invalid recipient e-mail address"},
        422: {"description": "Receipt amount cannot be formatted"},
        503: {"description": "E-mail relay not configured"},
    },
)
def receipt_email_params(request: EmailParamsRequest) -> dict[str, str]:
    """Prepare the template variables (including `amount_in_words`) for a receipt e-mail."""
    settings = _get_settings()
    try:
        return build_email_template_params(request.receipt, request.customer_email, settings)
    except InvalidRecipientError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EmailRelayNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except InvalidAmountError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Settings not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    settings = _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        currency=CURRENCY_NAME,
        email_relay_configured=settings.is_configured,
    )
