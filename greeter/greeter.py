from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from greeter.config import Settings
from greeter.domain import Greeting, GreetingKind
from greeter.logging_setup import get_logger
from greeter.names import NameSource, default_name


class Greeter:
    """Formats greetings and farewells around a resolvable name.

    The name comes from ``name_source`` when one is injected, otherwise it is
    the constant "friendly neighbor". Only the farewell delay is configurable,
    and only through ``settings`` passed in by the caller. Every
    greeting resolves the name exactly once. The farewell reads it only after
    its delay has elapsed.
    """

    def __init__(
        self,
        name_source: NameSource | None = None,
        settings: Settings | None = None,
        sleep_fn: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self.settings = settings or Settings.model_construct()
        self._name_source = name_source
        self._sleep = sleep_fn or asyncio.sleep
        self._logger = get_logger(self.__class__.__name__)

    def resolve_name(self) -> str:
        if self._name_source is not None:
            return self._name_source()
        return default_name()

    def say_hello(self) -> str:
        return self.greet().message

    async def say_goodbye(self) -> str:
        farewell = await self.farewell()
        return farewell.message

    def greet(self) -> Greeting:
        name = self.resolve_name()
        self._logger.debug("Greeting %s", name)
        return Greeting(kind=GreetingKind.HELLO, name=name, message=f"Hello, {name}!")

    async def farewell(self) -> Greeting:
        delay = self.settings.goodbye_delay_s
        self._logger.debug("Waiting %.3fs before saying goodbye", delay)
        await self._sleep(delay)
        name = self.resolve_name()
        self._logger.debug("Saying goodbye to %s", name)
        return Greeting(kind=GreetingKind.GOODBYE, name=name, message=f"Goodbye, {name}!")
