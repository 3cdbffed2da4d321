"""Domain exceptions."""


class StockroomError(Exception):
    """Base exception for Stockroom."""

    pass


class AuthorizationError(StockroomError):
    """Base for every authentication and authorization outcome that stops a request."""

    status = 403
    code = "forbidden"


class Unauthenticated(AuthorizationError):
    """Caller did not present usable credentials."""

    status = 401
    code = "unauthenticated"


class MissingCredentials(Unauthenticated):
    """No Authorization header was sent."""

    code = "missing_credentials"


class ExpiredCredentials(Unauthenticated):
    """Token was well formed but has expired."""

    code = "expired_credentials"


class MalformedCredentials(Unauthenticated):
    """Header or token could not be parsed or verified."""

    code = "malformed_credentials"


class AccountDisabled(AuthorizationError):
    """Principal account is deactivated."""

    code = "account_disabled"

    def __init__(self, message: str = "Account is deactivated") -> None:
        super().__init__(message)


class InsufficientRole(AuthorizationError):
    """Role hierarchy check failed."""

    code = "insufficient_role"

    def __init__(self, required: str, actual: str | None, message: str | None = None) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            message
            or f"Insufficient permissions. Required: {required}, Current: {actual}"
        )


class PermissionDenied(AuthorizationError):
    """Role lacks the resource:action permission."""

    code = "permission_denied"

    def __init__(self, resource: str, action: str, message: str | None = None) -> None:
        self.resource = resource
        self.action = action
        super().__init__(
            message or f"Insufficient permissions. Required: {resource}:{action}"
        )

    @property
    def missing(self) -> str:
        return f"{self.resource}:{self.action}"


class InvalidMethod(AuthorizationError):
    """HTTP verb has no action mapping. A client error, not a denial."""

    status = 400
    code = "invalid_method"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Invalid HTTP method: {method}")


class ScopeViolation(AuthorizationError):
    """Principal is not assigned to the requested store."""

    code = "scope_violation"

    def __init__(self, store_id: str, message: str = "Access denied to this store") -> None:
        self.store_id = store_id
        super().__init__(message)


class LastAdminProtected(AuthorizationError):
    """Operation would remove the last active administrator."""

    code = "last_admin_protected"

    def __init__(self, message: str = "Cannot delete the last admin user") -> None:
        super().__init__(message)


class InternalLookupFailure(AuthorizationError):
    """Catalog read failed. Not attributable to the caller; always fails closed."""

    status = 500
    code = "internal_lookup_failure"


class NotFound(StockroomError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: object) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


class ValidationError(StockroomError):
    """Validation failed for input data."""

    pass


class Conflict(StockroomError):
    """Request conflicts with current catalog state."""

    pass
