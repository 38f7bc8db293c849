"""
Service layer custom exceptions.

This module defines service-specific exceptions that provide better error handling
and debugging capabilities compared to generic exceptions.
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class ValidationError(ServiceException):
    """Exception raised for request parameter validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        validation_context = context or {}
        if field:
            validation_context["field"] = field
        if value is not None:
            validation_context["value"] = str(value)

        super().__init__(message=message, context=validation_context)
        self.field = field


class NotFoundError(ServiceException):
    """Exception raised when a requested player or resource does not exist."""

    pass


class ExternalServiceError(ServiceException):
    """Exception raised when an upstream answers with a body that cannot be used."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        context = {"body_excerpt": body_excerpt[:200]} if body_excerpt else {}
        super().__init__(
            message=f"Unusable upstream response: {message}",
            service="riot_api",
            operation=operation,
            context=context,
            original_error=original_error,
        )
