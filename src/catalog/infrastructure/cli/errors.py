"""Maps domain exceptions to the messages shown to CLI users.

Entries are keyed by exception class, then by ``code`` for constraint
errors. Lookup walks the exception's MRO, so a subclass without its own
entry uses its parent's. Anything unmapped falls back to the exception
text.
"""

from __future__ import annotations

from catalog.domain.exceptions import (
    CannotUpdateProductError,
    CombinationConstraintError,
    CombinationError,
    CombinationNotFoundError,
    ConstraintViolationError,
    DomainException,
    PackConstraintError,
    ProductConstraintError,
    ProductNotFoundError,
    StockConstraintError,
)

_MESSAGES: dict[type, str | dict[int, str]] = {
    ProductNotFoundError: "The product cannot be found.",
    CombinationNotFoundError: "The combination cannot be found.",
    ProductConstraintError: {
        ProductConstraintError.INVALID_ID: "Invalid product ID.",
        ProductConstraintError.INVALID_NAME: "The product name is invalid.",
        ProductConstraintError.INVALID_TYPE_FOR_OPERATION: (
            "This action is not allowed for this product type."
        ),
    },
    CombinationConstraintError: {
        CombinationConstraintError.INVALID_ID: "Invalid combination ID.",
        CombinationConstraintError.DUPLICATE_DEFAULT: (
            "Only one combination can be the default one."
        ),
        CombinationConstraintError.NOT_IN_PRODUCT: (
            "The combination does not belong to this product."
        ),
        CombinationConstraintError.CANNOT_UNSET_DEFAULT: (
            "The default combination cannot be unset, choose another default instead."
        ),
        CombinationConstraintError.INVALID_PRICE_IMPACT: (
            "The price impact must be a finite amount."
        ),
    },
    StockConstraintError: {
        StockConstraintError.INVALID_QUANTITY: "Stock quantity must be an integer.",
        StockConstraintError.INVALID_SHOP: "Invalid shop ID.",
    },
    PackConstraintError: {
        PackConstraintError.NOT_A_PACK: "Only packs can bundle other products.",
        PackConstraintError.CANNOT_ADD_PACK_INTO_PACK: (
            "A pack cannot contain another pack."
        ),
        PackConstraintError.CANNOT_ADD_ITSELF: "A pack cannot contain itself.",
        PackConstraintError.INVALID_QUANTITY: "Pack quantities must be at least 1.",
    },
    CannotUpdateProductError: {
        CannotUpdateProductError.FAILED_UPDATE_TYPE: (
            "The product type could not be updated."
        ),
        CannotUpdateProductError.FAILED_UPDATE_DEFAULT_COMBINATION: (
            "The default combination could not be updated."
        ),
    },
}


def error_message(exc: DomainException) -> str:
    """Return the user-facing message for *exc*."""
    if isinstance(exc, CombinationError) and exc.__cause__ is not None:
        cause = exc.__cause__
        detail = error_message(cause) if isinstance(cause, DomainException) else str(cause)
        return f"Combination #{exc.combination_id}: {detail}"

    for cls in type(exc).__mro__:
        entry = _MESSAGES.get(cls)
        if entry is None:
            continue
        if isinstance(entry, str):
            return entry
        if isinstance(exc, ConstraintViolationError) and exc.code in entry:
            # Codes name the rule; the exception text names the value.
            return f"{entry[exc.code]} ({exc})"
        break
    return str(exc)
