"""GraphQL schema exposing the coffee repository."""

import strawberry
from strawberry.types import Info

from coffee_api.exceptions import CoffeeNotFoundError, InvalidCoffeeIdError
from coffee_api.repository import CoffeeRepository
from coffee_api.schema import Coffee, Size

SizeEnum = strawberry.enum(Size, name="Size")


@strawberry.type(name="Coffee")
class CoffeeType:
    id: strawberry.ID
    name: str
    size: SizeEnum

    @classmethod
    def from_model(cls, coffee: Coffee) -> "CoffeeType":
        return cls(id=strawberry.ID(str(coffee.id)), name=coffee.name, size=coffee.size)


def _repository(info: Info) -> CoffeeRepository:
    return info.context["repository"]


def _parse_id(raw: strawberry.ID) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidCoffeeIdError(raw) from exc


@strawberry.type
class Query:
    @strawberry.field
    def find_all(self, info: Info) -> list[CoffeeType]:
        return [CoffeeType.from_model(coffee) for coffee in _repository(info).find_all()]

    @strawberry.field
    def find_one(self, info: Info, id: strawberry.ID) -> CoffeeType | None:
        coffee = _repository(info).find_one(_parse_id(id))
        return CoffeeType.from_model(coffee) if coffee else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create(self, info: Info, name: str, size: SizeEnum) -> CoffeeType:
        return CoffeeType.from_model(_repository(info).create(name, size))

    @strawberry.mutation
    def update(self, info: Info, id: strawberry.ID, name: str, size: SizeEnum) -> CoffeeType | None:
        coffee_id = _parse_id(id)
        coffee = _repository(info).update(coffee_id, name, size)
        if coffee is None:
            raise CoffeeNotFoundError(coffee_id)
        return CoffeeType.from_model(coffee)

    @strawberry.mutation
    def delete(self, info: Info, id: strawberry.ID) -> CoffeeType | None:
        coffee_id = _parse_id(id)
        coffee = _repository(info).delete(coffee_id)
        if coffee is None:
            raise CoffeeNotFoundError(coffee_id)
        return CoffeeType.from_model(coffee)


schema = strawberry.Schema(query=Query, mutation=Mutation)
