"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any


class PortalException(Exception):
    """Base exception for the HR portal"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(PortalException):
    """Authentication related errors"""

    def __init__(self, message: str = "Invalid credentials", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=401, details=details)


class AuthorizationError(PortalException):
    """Authorization/permission errors"""

    def __init__(self, message: str = "Insufficient permissions", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=403, details=details)


class NotFoundError(PortalException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        details = {"resource": resource}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(message, status_code=404, details=details)


class ValidationError(PortalException):
    """Client input errors, raised before any repository work"""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class ConflictError(PortalException):
    """Write collided with a concurrent write"""

    def __init__(self, message: str = "Resource conflict", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=409, details=details)


def error_body(exc: PortalException) -> Dict[str, Any]:
    """JSON body for a PortalException response"""
    return {
        "success": False,
        "message": exc.message,
        "error": {
            "type": exc.__class__.__name__,
            "details": exc.details,
        },
    }
