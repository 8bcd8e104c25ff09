"""Home/away value pairs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class TeamPosition(Enum):
    HOME = "home"
    AWAY = "away"

    @property
    def opposite(self) -> "TeamPosition":
        return TeamPosition.AWAY if self is TeamPosition.HOME else TeamPosition.HOME


@dataclass(frozen=True)
class TeamPair(Generic[T]):
    """Two values of the same type, one per side of a game."""

    home: T
    away: T

    def map(self, func: Callable[[T], U]) -> "TeamPair[U]":
        return TeamPair(home=func(self.home), away=func(self.away))

    def and_then(self, func: Callable[[T], Optional[U]]) -> Optional["TeamPair[U]"]:
        """Apply ``func`` to each side, returning ``None`` if either side does.

        The away side is not evaluated once the home side has failed.
        """

        home = func(self.home)
        if home is None:
            return None
        away = func(self.away)
        if away is None:
            return None
        return TeamPair(home=home, away=away)

    def zip(self, other: "TeamPair[U]") -> "TeamPair[Tuple[T, U]]":
        return TeamPair(home=(self.home, other.home), away=(self.away, other.away))

    def matches(self, value: object) -> "TeamPair[bool]":
        return TeamPair(home=self.home == value, away=self.away == value)

    def any_side(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(side) for side in self)

    def get(self, side: TeamPosition) -> T:
        return self.home if side is TeamPosition.HOME else self.away

    def other(self, side: TeamPosition) -> T:
        return self.get(side.opposite)

    def __iter__(self) -> Iterator[T]:
        yield self.home
        yield self.away

    def __contains__(self, value: object) -> bool:
        return self.home == value or self.away == value
