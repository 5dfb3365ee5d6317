"""Custom exceptions for coffee-api."""


class CoffeeApiError(Exception):
    """Base exception for coffee-api."""

    pass


class CoffeeNotFoundError(CoffeeApiError):
    """Raised when an operation targets a coffee id that does not exist."""

    def __init__(self, coffee_id: int):
        self.coffee_id = coffee_id
        super().__init__(f"Coffee {coffee_id} not found")


class InvalidCoffeeIdError(CoffeeApiError):
    """Raised when a coffee id cannot be read as an integer."""

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(f"Invalid coffee id: {raw!r}")
