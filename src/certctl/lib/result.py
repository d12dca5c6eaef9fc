"""Result type for the setup pipeline.

Every step returns Ok(value) or Err(error) instead of raising, so the
workflow can stop at the first failing step and hand the tagged error to
the CLI:

    match validate_request(request):
        case Err() as e:
            return e
        case Ok(request):
            pass
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Step succeeded with a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Step failed with a tagged error."""

    error: E


Result: TypeAlias = Ok[T] | Err[E]
