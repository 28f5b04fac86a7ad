"""
Error kinds raised by the Domain Records Manager.

Validation errors are raised before any registrar call is made, so a
malformed desired state never results in a partial remote change.
"""

from typing import Optional

NAMESERVER_VALIDATION_FAILURE = "422:FAILED_NAME_SERVER_VALIDATION"


class DomainRecordsError(Exception):
    """Base class for all Domain Records Manager errors."""


class ValidationError(DomainRecordsError, ValueError):
    """Malformed record data, unknown record type or mistyped input field."""


class NotFoundError(DomainRecordsError):
    """The registrar could not resolve a domain or its record set."""

    def __init__(self, domain: str, reason, subject: str = "domain"):
        self.domain = domain
        self.subject = subject
        super().__init__(f"couldn't find {subject} ({domain}): {reason}")


class RegistrarAPIError(DomainRecordsError):
    """Error response (or transport failure) from the registrar API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

    @property
    def error_code(self) -> str:
        """Machine-readable code in the registrar's ``<status>:<CODE>`` form."""
        return f"{self.status_code}:{self.code}"

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.error_code}: {self.message}"


class RemoteWriteError(RegistrarAPIError):
    """The registrar rejected a record set update."""

    @property
    def is_nameserver_validation_failure(self) -> bool:
        return self.error_code == NAMESERVER_VALIDATION_FAILURE
