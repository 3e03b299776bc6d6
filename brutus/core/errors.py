"""Error classes for the password grading engine.

Weak passwords are never signalled with exceptions; they are reported as
violations. The classes here cover the two failure modes that make a verdict
untrustworthy: a malformed configuration and an unreachable lookup backend.
"""

import logging
import uuid
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


SENSITIVE_KEYS = frozenset({"password", "token", "secret", "credential"})


class BrutusError(Exception):
    """
    Base exception for all Brutus errors.

    Carries an error code, structured details and a severity level, and logs
    itself on construction with sensitive details redacted.
    """

    default_code: str = "ERROR"
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = dict(kwargs.get("details") or {})
        self.error_id = str(uuid.uuid4())
        self.recovery_hint = kwargs.get("recovery_hint")
        if kwargs.get("cause") is not None:
            self.__cause__ = kwargs["cause"]

        self._log_error()

    def _log_error(self) -> None:
        """Log error with structured data."""
        logger = logging.getLogger(f"brutus.errors.{self.__class__.__name__}")
        log_data = {
            "error_id": self.error_id,
            "code": self.code,
            "error_message": self.message,
            "severity": self.severity.value,
            "details": self._sanitize_details(self.details),
            "error_class": self.__class__.__name__,
        }

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical("Critical error occurred", extra=log_data)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error", extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error", extra=log_data)
        else:
            logger.info("Low severity error", extra=log_data)

    def _sanitize_details(self, details: dict) -> dict:
        """Sanitize error details to remove sensitive information."""
        sanitized = {}
        for key, value in details.items():
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                sanitized[key] = "***REDACTED***"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_details(value)
            else:
                sanitized[key] = value
        return sanitized

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """Serialize error for callers that report it."""
        data: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
        }
        if include_details and self.details:
            data["details"] = self._sanitize_details(self.details)
        if self.recovery_hint:
            data["recovery_hint"] = self.recovery_hint
        return data

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class DomainError(BrutusError):
    """Base class for domain errors."""

    default_code = "DOMAIN_ERROR"
    severity = ErrorSeverity.MEDIUM


class InfrastructureError(BrutusError):
    """Base class for infrastructure errors."""

    default_code = "INFRASTRUCTURE_ERROR"
    severity = ErrorSeverity.HIGH


class ConfigurationError(InfrastructureError):
    """Malformed policy, message catalog or backend settings."""

    default_code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.CRITICAL

    def __init__(
        self, message: str, config_key: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


class LookupUnavailableError(InfrastructureError):
    """A dictionary backend could not be read or reached."""

    default_code = "LOOKUP_UNAVAILABLE"
    severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        backend: str,
        source: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault(
            "recovery_hint",
            "Check that the lookup file or database is reachable and retry",
        )
        super().__init__(message, **kwargs)
        self.backend = backend
        self.source = source
        self.details.update({"backend": backend, "source": source})
