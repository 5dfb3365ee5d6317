"""Data models for coffee-api."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Size(str, Enum):
    """Cup sizes offered on the menu."""

    SHORT = "SHORT"
    TALL = "TALL"
    GRANDE = "GRANDE"
    VENTI = "VENTI"


class Coffee(BaseModel):
    """A single coffee record."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    size: Size
