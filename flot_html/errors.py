from __future__ import annotations

from typing import Sequence


class FlotError(Exception):
    pass


class PlotDataError(FlotError, ValueError):
    pass


class ConfigPathError(FlotError, KeyError):
    def __str__(self) -> str:
        # KeyError quotes its message by default.
        return str(self.args[0]) if self.args else ""


class KindMismatchError(FlotError, TypeError):
    def __init__(self, operation: str, kind: str, allowed: Sequence[str]) -> None:
        self.operation = operation
        self.kind = kind
        self.allowed = tuple(allowed)
        super().__init__(f"{operation}() only applies to {'/'.join(self.allowed)} series, not {kind}")


class MarkingError(FlotError, IndexError):
    pass


class PageSealedError(FlotError, RuntimeError):
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: page has already been rendered and is sealed")
