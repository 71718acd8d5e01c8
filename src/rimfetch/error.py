from __future__ import annotations

import typing as t
from dataclasses import dataclass


@dataclass(frozen=True)
class Result:
    """Outcome of one step for one mod: a value, or the reason it failed."""

    value: t.Any
    is_err: bool = False

    def is_error(self) -> bool:
        return self.is_err

    def unwrap(self) -> t.Any:
        if self.is_err:
            raise TypeError(f"Error: {self.value}")
        return self.value

    def unwrap_err(self) -> t.Any:
        if not self.is_err:
            raise TypeError(f"Not an error: {self.value}")
        return self.value

    def unwrap_or(self, default: t.Any) -> t.Any:
        return default if self.is_err else self.value

    def and_then(self, f: t.Callable[[t.Any], Result]) -> Result:
        return self if self.is_err else f(self.value)


def Ok(value: t.Any) -> Result:
    return Result(value)


def Err(reason: t.Any) -> Result:
    return Result(reason, is_err=True)
