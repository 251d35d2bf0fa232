"""Client for the remote kundali calculation API."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Literal, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from astrova.config import ASTROVA_API_TIMEOUT_SEC, ASTROVA_API_URL, KUNDALI_ENDPOINT

logger = logging.getLogger("astrova.api_client")

MIN_YEAR = 1900
AYANAMSHAS = ("lahiri", "raman", "krishnamurti")

ERROR_MESSAGES = {
    "NETWORK_ERROR": "Network error. Please check your connection.",
    "INVALID_INPUT": "Invalid input provided.",
    "SERVER_ERROR": "Server error. Please try again later.",
}


def max_year() -> int:
    return datetime.now(timezone.utc).year + 1


class KundaliRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    year: int = Field(1990, ge=MIN_YEAR, description="Birth year")
    month: int = Field(1, ge=1, le=12, description="Birth month")
    day: int = Field(1, ge=1, le=31, description="Birth day")
    hour: int = Field(12, ge=0, le=23, description="Birth hour")
    minute: int = Field(0, ge=0, le=59, description="Birth minute")
    second: int = Field(0, ge=0, le=59, description="Birth second")
    tz_offset_hours: float = Field(5.5, ge=-12, le=14, description="UTC offset hours")
    latitude: float = Field(19.076, ge=-90, le=90, description="Latitude")
    longitude: float = Field(72.8777, ge=-180, le=180, description="Longitude")
    ayanamsha: Literal["lahiri", "raman", "krishnamurti"] = Field("lahiri", description="Ayanamsha")
    use_utc: bool = Field(False, description="Interpret the time as UTC")

    @field_validator("year")
    @classmethod
    def year_not_too_far_ahead(cls, value: int) -> int:
        if value > max_year():
            raise ValueError(f"year must be <= {max_year()}")
        return value


class CalculationApiError(Exception):
    def __init__(self, message: str, status_code: int = 500, code: Optional[str] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def error_from_response(response: httpx.Response) -> CalculationApiError:
    """Map an upstream failure status to a user-facing error."""
    body = _response_body(response)
    status = response.status_code
    if status >= 500:
        return CalculationApiError(ERROR_MESSAGES["SERVER_ERROR"], status, "SERVER_ERROR", body)
    detail = body.get("detail") if isinstance(body, dict) else None
    message = detail if isinstance(detail, str) and detail.strip() else ERROR_MESSAGES["INVALID_INPUT"]
    return CalculationApiError(message, status, "INVALID_INPUT", body)


async def fetch_kundali(
    request: KundaliRequest,
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, Any]:
    """POST the birth data and return the decoded kundali payload.

    Raises CalculationApiError for transport failures, non-2xx statuses and
    bodies that are not a JSON object.
    """
    url = f"{(base_url or ASTROVA_API_URL).rstrip('/')}{KUNDALI_ENDPOINT}"
    logger.info(
        "kundali request url=%s date=%04d-%02d-%02d ayanamsha=%s",
        url, request.year, request.month, request.day, request.ayanamsha,
    )
    try:
        async with httpx.AsyncClient(timeout=timeout or ASTROVA_API_TIMEOUT_SEC, transport=transport) as client:
            response = await client.post(url, json=request.model_dump())
    except httpx.HTTPError as e:
        logger.warning("kundali request failed: %s", e)
        raise CalculationApiError(ERROR_MESSAGES["NETWORK_ERROR"], 502, "NETWORK_ERROR", str(e)) from e

    if response.status_code >= 400:
        error = error_from_response(response)
        logger.warning("kundali request rejected status=%s message=%s", response.status_code, error.message)
        raise error

    payload = _response_body(response)
    if not isinstance(payload, dict):
        logger.warning("kundali response is not a JSON object (status=%s)", response.status_code)
        raise CalculationApiError(ERROR_MESSAGES["SERVER_ERROR"], 502, "INVALID_RESPONSE", payload)
    return payload
