import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from checkdigit import ChecksumError, check, token_at_point
from config import settings
from utils.validators import ISBNValidator

logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=settings.app_version)


# --- Models ---
class CheckResultModel(BaseModel):
    kind: str
    digits: str
    check_digit: str
    token: Optional[str] = None


class AtPointRequest(BaseModel):
    text: str
    position: int = Field(..., description="Cursor position (0-based index, clamped to the text)")
    strict: bool = settings.strict


class ValidateRequest(BaseModel):
    isbn: str


class ValidationModel(BaseModel):
    isbn: str
    kind: str
    expected: str
    actual: str
    valid: bool


# --- Health ---
@app.get("/health")
async def health():
    """Lightweight health endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
    }


# --- Check digits ---
@app.get("/checksum", response_model=CheckResultModel)
async def get_checksum(
    text: str = Query(..., description="ISBN-like text, separators allowed"),
    strict: bool = Query(settings.strict, description="Reject a wrong trailing check digit"),
):
    try:
        result = check(text, strict=strict)
    except ChecksumError as e:
        logger.info(f"Checksum request rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return result.to_dict()


@app.post("/verify-at-point", response_model=CheckResultModel)
async def verify_at_point_endpoint(payload: AtPointRequest):
    token = token_at_point(payload.text, payload.position)
    if not token:
        raise HTTPException(status_code=404, detail=f"No ISBN at position {payload.position}.")
    try:
        result = check(token, strict=payload.strict)
    except ChecksumError as e:
        logger.info(f"Verify-at-point request rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return {**result.to_dict(), "token": token}


@app.post("/validate", response_model=ValidationModel)
async def validate_isbn(payload: ValidateRequest):
    try:
        result = ISBNValidator.validate(payload.isbn)
    except ChecksumError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return result.to_dict()
