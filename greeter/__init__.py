"""Greeter - a tiny greeting object with a swappable name source.

The package exists to show how tests replace a collaborator: the greeter asks a
name source for the subject of its messages, and tests hand it a different one.
"""

from greeter.greeter import Greeter

__all__ = [
    "Greeter",
    "__version__",
]

__version__ = "0.1.0"
