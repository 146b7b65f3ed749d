"""Result types for railway-oriented programming.

Domain operations that can fail on business rules return a Result instead of
raising. Callers branch on the variant:

Usage:
    result = page.add_component(ComponentType.TEXT, {"content": "Hello"})
    match result:
        case Success(value=component):
            print(component.id)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value (None for commands without output).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error value (a DomainError in the domain layer, a plain
            message string at the application boundary).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
