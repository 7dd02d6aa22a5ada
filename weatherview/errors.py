"""Pipeline error kinds and the failure envelope surfaced to callers."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FailureEnvelope:
    message: str
    code: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"message": self.message}
        if self.code is not None:
            data["code"] = self.code
        return data


class ForecastError(Exception):
    """Base class for every error raised inside the forecast pipeline."""

    kind = "forecast_error"

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_envelope(self) -> FailureEnvelope:
        return FailureEnvelope(message=self.message, code=self.code)


class NotFoundError(ForecastError):
    kind = "not_found"

    def __init__(self, name: str, region_code: str | None = None):
        label = f"{name}, {region_code}" if region_code else name
        super().__init__(f"No location found for: {label}")
        self.name = name
        self.region_code = region_code


class RequestFailedError(ForecastError):
    kind = "request_failed"


class ParseFailedError(ForecastError):
    kind = "parse_failed"


class ValidationFailedError(ForecastError):
    kind = "validation_failed"


class UnknownError(ForecastError):
    kind = "unknown"

    @classmethod
    def wrap(cls, exc: BaseException) -> "UnknownError":
        message = str(exc) or type(exc).__name__
        err = cls(message)
        err.__cause__ = exc
        return err


class MissingApiKeyError(RuntimeError):
    """Raised at startup when no OpenWeatherMap credential is configured."""


def to_envelope(exc: BaseException) -> FailureEnvelope:
    """Normalize any exception into the failure envelope."""
    if isinstance(exc, ForecastError):
        return exc.to_envelope()
    return UnknownError.wrap(exc).to_envelope()
