"""
Error values.

Operations return Result[T, E]; these are the E's. None of them are raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

# ═══════════════════════════════════════════════════════════════════════════════
# Catalog Resolution
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class NetworkError:
    """Transport failure, unexpected status or malformed response body."""

    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class NotFound:
    """No store exists for the identifier."""

    identifier: str

    @property
    def message(self) -> str:
        return f"No store found for {self.identifier!r}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class InvalidIdentifier:
    """Identifier is blank after trimming; rejected before any request."""

    identifier: str
    message: str = "Please enter a valid Barcode ID."

    def __str__(self) -> str:
        return self.message


type CatalogError = NetworkError | NotFound | InvalidIdentifier


# ═══════════════════════════════════════════════════════════════════════════════
# Order Validation
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationErrorKind(Enum):
    """Precondition failures caught before any order request."""

    MISSING_STORE = auto()
    EMPTY_CART = auto()
    INVALID_QUANTITY = auto()
    INVALID_TOTAL = auto()


_VALIDATION_MESSAGES = {
    ValidationErrorKind.MISSING_STORE: "Store information is not available",
    ValidationErrorKind.EMPTY_CART: "Cart is empty",
    ValidationErrorKind.INVALID_QUANTITY: "Invalid item quantity in cart",
    ValidationErrorKind.INVALID_TOTAL: "Invalid order total",
}


@dataclass(frozen=True, slots=True)
class ValidationError:
    kind: ValidationErrorKind

    @property
    def message(self) -> str:
        return _VALIDATION_MESSAGES[self.kind]

    def __str__(self) -> str:
        return self.message


type OrderError = ValidationError | NetworkError


# ═══════════════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class RenderFault:
    """
    Unexpected failure while producing the display tree.

    Note: cause keeps the original exception for logging; the fault itself
    is a value and is never re-raised.
    """

    cause: Exception

    @property
    def message(self) -> str:
        return f"{type(self.cause).__name__}: {self.cause}"

    def __str__(self) -> str:
        return self.message


__all__ = (
    "NetworkError",
    "NotFound",
    "InvalidIdentifier",
    "CatalogError",
    "ValidationErrorKind",
    "ValidationError",
    "OrderError",
    "RenderFault",
)
