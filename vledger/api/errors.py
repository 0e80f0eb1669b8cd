"""
Mapping from ledger errors to HTTP responses.
"""

from fastapi import HTTPException

from vledger.exceptions import (
    DuplicateCodeError,
    DuplicateReferenceError,
    InvalidStatusTransitionError,
    LedgerError,
    NotFoundError,
)

# Anything not listed is a 400
STATUS_CODES: dict[type[LedgerError], int] = {
    NotFoundError: 404,
    DuplicateCodeError: 409,
    DuplicateReferenceError: 409,
    InvalidStatusTransitionError: 409,
}


def http_error(exc: LedgerError) -> HTTPException:
    """Build the HTTPException for a ledger error."""
    status_code = 400
    for error_type, code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            status_code = code
            break
    return HTTPException(
        status_code=status_code,
        detail={"code": exc.code, "message": exc.message},
    )
