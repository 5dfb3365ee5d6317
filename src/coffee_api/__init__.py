"""coffee-api: In-memory coffee menu served over GraphQL."""

from coffee_api.exceptions import CoffeeApiError, CoffeeNotFoundError, InvalidCoffeeIdError
from coffee_api.repository import CoffeeRepository
from coffee_api.schema import Coffee, Size

__version__ = "0.1.0"

__all__ = [
    "CoffeeRepository",
    "Coffee",
    "Size",
    "CoffeeApiError",
    "CoffeeNotFoundError",
    "InvalidCoffeeIdError",
    "__version__",
]
