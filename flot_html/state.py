from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flot_html.errors import PageSealedError


class PageState(str, Enum):
    OPEN = "open"
    SEALED = "sealed"


@dataclass
class SealGuard:
    """Shared by a page and every handle it hands out.

    Handles call `check()` before each mutation; once the page is rendered the
    guard is sealed and every later mutation raises PageSealedError.
    """

    state: PageState = PageState.OPEN

    @property
    def sealed(self) -> bool:
        return self.state is PageState.SEALED

    def check(self, operation: str) -> None:
        if self.state is PageState.SEALED:
            raise PageSealedError(operation)

    def seal(self, operation: str = "render") -> None:
        self.check(operation)
        self.state = PageState.SEALED
