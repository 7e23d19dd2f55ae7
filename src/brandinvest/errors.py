"""Registry error taxonomy.

Every failure a registry or derivation operation can report is one of the
exceptions below. Each has a stable ``kind`` identifier and a numeric
``code`` so callers outside Python (an HTTP or RPC layer) can map them.
"""

from typing import Optional


class RegistryError(Exception):
    """Base exception for registry errors.

    Attributes:
        kind: Stable error identifier (e.g. "BrandNotFound")
        code: Numeric error code
        message: Error description
    """

    kind = "RegistryError"
    code = 0

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"[{self.kind}] {message}")


class BrandExistsError(RegistryError):
    """Raised when adding a brand whose name is already registered."""

    kind = "BrandExists"
    code = 1

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Brand already exists: {name!r}")


class BrandNotFoundError(RegistryError):
    """Raised when reading, updating or deriving for an unknown brand."""

    kind = "BrandNotFound"
    code = 2

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Brand not found: {name!r}")


class UnauthorizedError(RegistryError):
    """Raised when a caller other than the owner attempts a mutation."""

    kind = "Unauthorized"
    code = 3

    def __init__(self, caller: Optional[str], action: str):
        self.caller = caller
        self.action = action
        super().__init__(f"{caller!r} is not allowed to {action}")


class DivideByZeroError(RegistryError, ZeroDivisionError):
    """Raised when annual appreciation is requested with zero years owned."""

    kind = "DivideByZero"
    code = 4

    def __init__(self, name: Optional[str] = None):
        self.name = name
        if name is None:
            message = "Years owned is zero"
        else:
            message = f"Years owned is zero for brand {name!r}"
        super().__init__(message)


class CapacityExceededError(RegistryError):
    """Raised when adding a brand to a registry that is already full."""

    kind = "CapacityExceeded"
    code = 5

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Registry is full ({capacity} brands)")


__all__ = [
    "RegistryError",
    "BrandExistsError",
    "BrandNotFoundError",
    "UnauthorizedError",
    "DivideByZeroError",
    "CapacityExceededError",
]
