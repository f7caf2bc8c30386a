from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

DEFAULT_NAME = "friendly neighbor"


class NameSource(Protocol):
    def __call__(self) -> str:  # pragma: no cover - protocol
        ...


def default_name() -> str:
    return DEFAULT_NAME


def constant(name: str) -> Callable[[], str]:
    """Build a name source that always answers with ``name``."""

    def _source() -> str:
        return name

    return _source
