"""Unit tests for domain exceptions."""

import pytest

from stockroom.domain.exceptions import (
    AccountDisabled,
    AuthorizationError,
    Conflict,
    ExpiredCredentials,
    InsufficientRole,
    InternalLookupFailure,
    InvalidMethod,
    LastAdminProtected,
    MalformedCredentials,
    MissingCredentials,
    NotFound,
    PermissionDenied,
    ScopeViolation,
    StockroomError,
    Unauthenticated,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc_type",
    [NotFound, ValidationError, Conflict, AuthorizationError],
)
def test_inherits_stockroom_error(exc_type) -> None:
    assert issubclass(exc_type, StockroomError)


def test_credential_errors_are_distinct_kinds() -> None:
    """Missing, expired and malformed credentials each have their own code."""
    kinds = [MissingCredentials, ExpiredCredentials, MalformedCredentials]
    for kind in kinds:
        assert issubclass(kind, Unauthenticated)
        assert kind.status == 401
    assert len({k.code for k in kinds}) == 3


@pytest.mark.parametrize(
    ("error", "status"),
    [
        (AccountDisabled(), 403),
        (InsufficientRole("manager", "staff"), 403),
        (PermissionDenied("products", "update"), 403),
        (ScopeViolation("S1"), 403),
        (LastAdminProtected(), 403),
        (InvalidMethod("OPTIONS"), 400),
        (InternalLookupFailure("boom"), 500),
    ],
)
def test_authorization_error_statuses(error, status) -> None:
    assert error.status == status


def test_every_authorization_error_has_its_own_code() -> None:
    errors = [
        AccountDisabled(),
        InsufficientRole("manager", "staff"),
        PermissionDenied("products", "update"),
        InvalidMethod("OPTIONS"),
        ScopeViolation("S1"),
        LastAdminProtected(),
        InternalLookupFailure("boom"),
    ]
    assert len({e.code for e in errors}) == len(errors)


def test_insufficient_role_message() -> None:
    error = InsufficientRole("manager", "staff")
    assert str(error) == "Insufficient permissions. Required: manager, Current: staff"


def test_permission_denied_carries_missing_pair() -> None:
    error = PermissionDenied("products", "update")
    assert error.missing == "products:update"
    assert "products:update" in str(error)


def test_invalid_method_message() -> None:
    with pytest.raises(AuthorizationError, match="Invalid HTTP method: OPTIONS"):
        raise InvalidMethod("OPTIONS")


def test_not_found_message() -> None:
    with pytest.raises(StockroomError, match="Role not found: 123"):
        raise NotFound("Role", "123")
