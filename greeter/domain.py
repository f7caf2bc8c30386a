from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class GreetingKind(str, Enum):
    HELLO = "hello"
    GOODBYE = "goodbye"


class Greeting(BaseModel):
    """A formatted greeting together with the name it was built from."""

    model_config = ConfigDict(frozen=True)

    kind: GreetingKind
    name: str
    message: str
