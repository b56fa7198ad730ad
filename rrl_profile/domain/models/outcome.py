"""
Typed stage outcomes for the profile pipeline.

Each pipeline stage returns either ``Success`` with its value or ``Failure``
with a typed package error, and stages are chained with ``then``. A failure
short-circuits the rest of the chain, so the error taxonomy survives stage
boundaries without exceptions being used for control flow.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from rrl_profile.domain.exceptions import InternalError, RrlProfileException
from rrl_profile.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def then(self, stage: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        return stage(self.value)

    async def then_async(
        self, stage: Callable[[T], Awaitable["Outcome[U]"]]
    ) -> "Outcome[U]":
        return await stage(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    error: RrlProfileException

    @property
    def ok(self) -> bool:
        return False

    def then(self, stage: Callable[[Any], Any]) -> "Failure":
        return self

    async def then_async(self, stage: Callable[[Any], Any]) -> "Failure":
        return self

    def unwrap(self):
        raise self.error


Outcome = Union[Success[T], Failure]


def _as_failure(stage_name: str, exc: Exception) -> Failure:
    if isinstance(exc, RrlProfileException):
        logger.warning(f"Stage {stage_name} failed: {exc.code}: {exc.message}")
        return Failure(exc)
    logger.exception(f"Unexpected error in stage {stage_name}")
    return Failure(InternalError("Unexpected internal error.", details=repr(exc)))


def capture(stage: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Run a raising function and turn its result into an outcome."""
    try:
        return Success(stage(*args, **kwargs))
    except Exception as exc:
        return _as_failure(getattr(stage, "__name__", repr(stage)), exc)


async def capture_async(
    stage: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
) -> Outcome[T]:
    """Await a raising coroutine function and turn its result into an outcome."""
    try:
        return Success(await stage(*args, **kwargs))
    except Exception as exc:
        return _as_failure(getattr(stage, "__name__", repr(stage)), exc)
