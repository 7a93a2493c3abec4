"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Constraint errors carry a ``code`` so callers can tell apart failures of the
same class (the CLI keys its message table on ``(class, code)``).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product with the given ID."""


class CombinationNotFoundError(EntityNotFoundError):
    """No combination with the given ID."""


class ConstraintViolationError(ValidationError):
    """A value or a write was rejected; ``code`` tells which rule."""

    def __init__(self, message: str, code: int = 0) -> None:
        super().__init__(message)
        self.code = code


class ProductConstraintError(ConstraintViolationError):
    INVALID_ID = 1
    INVALID_TYPE = 2
    INVALID_NAME = 3
    INVALID_TYPE_FOR_OPERATION = 4


class CombinationConstraintError(ConstraintViolationError):
    INVALID_ID = 1
    INVALID_REFERENCE = 2
    INVALID_ATTRIBUTES = 3
    DUPLICATE_DEFAULT = 4
    NOT_IN_PRODUCT = 5
    CANNOT_UNSET_DEFAULT = 6
    INVALID_PRICE_IMPACT = 7


class StockConstraintError(ConstraintViolationError):
    INVALID_QUANTITY = 1
    INVALID_SHOP = 2


class PackConstraintError(ConstraintViolationError):
    NOT_A_PACK = 1
    CANNOT_ADD_PACK_INTO_PACK = 2
    CANNOT_ADD_ITSELF = 3
    INVALID_QUANTITY = 4


class CannotUpdateProductError(ConstraintViolationError):
    """The product store rejected a partial update."""

    FAILED_UPDATE_TYPE = 1
    FAILED_UPDATE_DEFAULT_COMBINATION = 2


class CombinationError(DomainException):
    """A bulk combination operation failed part way through."""

    def __init__(self, message: str, combination_id: int) -> None:
        super().__init__(message)
        self.combination_id = combination_id
