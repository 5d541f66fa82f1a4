"""Error taxonomy shared by the services and the HTTP layer."""


class EngagementError(Exception):
    """Base class for every failure surfaced to a caller."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(EngagementError):
    status_code = 400


class NotFound(EngagementError):
    status_code = 404


class RemoteRejected(EngagementError):
    """The video platform refused the request (validation, auth, ownership)."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code if 400 <= status_code < 500 else 400


class RemoteUnavailable(EngagementError):
    status_code = 502


class SuggestionEngineUnavailable(EngagementError):
    status_code = 503


class StorageUnavailable(EngagementError):
    status_code = 503


class AuditWriteFailed(EngagementError):
    """Raised inside the audit log only; never reaches a caller."""
