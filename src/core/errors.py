"""
Error taxonomy for the site recovery backend.

Errors raised below the router are never caught and rewrapped on their way
up; the router is the only place that maps them to HTTP responses.
"""

from typing import Any, Optional


class SiteRecoveryError(Exception):
    """Base class for all site recovery errors"""

    pass


class ValidationError(SiteRecoveryError, ValueError):
    """Raised when required identifiers or names are missing or empty"""

    pass


class MalformedIdentifierError(SiteRecoveryError, ValueError):
    """Raised when an ARM resource identifier lacks an expected segment"""

    def __init__(self, arm_id: str, label: str):
        self.arm_id = arm_id
        self.label = label
        super().__init__(
            f"Resource identifier '{arm_id}' has no value for segment '{label}'"
        )


class CertificateLoadError(SiteRecoveryError, OSError):
    """Raised when certificate material cannot be read"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to load certificate '{path}': {reason}")

    def __str__(self) -> str:
        return f"Unable to load certificate '{self.path}': {self.reason}"


class RemoteOperationError(SiteRecoveryError):
    """
    Raised when a call to the control plane fails or reports a fault.

    The service's diagnostic payload is kept verbatim in ``diagnostics``
    (parsed JSON when the body was JSON, raw text otherwise).
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        diagnostics: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.diagnostics = diagnostics
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "status_code": self.status_code,
            "diagnostics": self.diagnostics,
        }
