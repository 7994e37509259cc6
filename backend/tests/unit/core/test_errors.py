"""Unit tests for the error taxonomy and its HTTP mapping."""

import pytest

from notevault.api.errors import (
    GENERIC_CREDENTIAL_MESSAGE,
    GENERIC_INTERNAL_MESSAGE,
    STATUS_BY_KIND,
    public_message,
)
from notevault.core.errors import CREDENTIAL_KINDS, ErrorKind, NoteVaultError


def test_every_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)


@pytest.mark.parametrize("kind", sorted(CREDENTIAL_KINDS, key=lambda k: k.value))
def test_credential_kinds_map_to_401(kind):
    assert STATUS_BY_KIND[kind] == 401
    assert NoteVaultError(kind, "x").is_credential_error


@pytest.mark.parametrize(
    "kind,status_code",
    [
        (ErrorKind.VALIDATION_ERROR, 400),
        (ErrorKind.NOT_FOUND_OR_FORBIDDEN, 404),
        (ErrorKind.CONFLICT, 409),
        (ErrorKind.INTERNAL, 500),
    ],
)
def test_other_kinds(kind, status_code):
    assert STATUS_BY_KIND[kind] == status_code
    assert not NoteVaultError(kind, "x").is_credential_error


@pytest.mark.parametrize(
    "kind",
    [
        ErrorKind.INVALID_SIGNATURE_OR_MALFORMED,
        ErrorKind.EXPIRED,
        ErrorKind.WRONG_ISSUER,
        ErrorKind.ACCOUNT_NOT_FOUND,
    ],
)
def test_token_failures_share_one_public_message(kind):
    assert public_message(NoteVaultError(kind, "detailed reason")) == GENERIC_CREDENTIAL_MESSAGE


def test_header_failures_keep_their_message():
    exc = NoteVaultError(ErrorKind.MISSING_CREDENTIAL, "Authorization header is missing")
    assert public_message(exc) == "Authorization header is missing"

    exc = NoteVaultError(ErrorKind.MALFORMED_CREDENTIAL, "Invalid authorization header format")
    assert public_message(exc) == "Invalid authorization header format"


def test_internal_message_hidden():
    exc = NoteVaultError(ErrorKind.INTERNAL, "connection pool exhausted")
    assert public_message(exc) == GENERIC_INTERNAL_MESSAGE


def test_constructors():
    exc = NoteVaultError.validation("page must be greater than or equal to 1", "page")
    assert exc.kind is ErrorKind.VALIDATION_ERROR
    assert exc.details == {"field": "page"}

    assert NoteVaultError.not_found_or_forbidden().message == "Note not found"
    assert NoteVaultError.conflict("taken").kind is ErrorKind.CONFLICT
