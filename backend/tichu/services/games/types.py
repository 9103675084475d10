from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple, Union


class Consecutive(str, Enum):
    NONE = 'none'
    US = 'us'
    THEM = 'them'


class BetLevel(str, Enum):
    TICHU = 'tichu'
    GRAND = 'grand'

    @property
    def value_points(self) -> int:
        return 200 if self is BetLevel.GRAND else 100


@dataclass(frozen=True)
class NoBet:
    """A player who made no call this round."""

    @property
    def points(self) -> int:
        return 0


@dataclass(frozen=True)
class CalledBet:
    """A Tichu or Grand Tichu call and whether it was made."""
    level: BetLevel
    successful: bool

    @property
    def points(self) -> int:
        value = self.level.value_points
        return value if self.successful else -value


Bet = Union[NoBet, CalledBet]
BetPair = Tuple[Bet, Bet]

NO_BET = NoBet()
NO_BETS: BetPair = (NO_BET, NO_BET)


class Points(NamedTuple):
    us: int
    them: int


@dataclass(frozen=True)
class Turn:
    taken_points: int
    consecutive: Consecutive = Consecutive.NONE
    our_bets: BetPair = NO_BETS
    their_bets: BetPair = NO_BETS


@dataclass(frozen=True)
class Game:
    our_score: int = 0
    their_score: int = 0
    history: Tuple[Turn, ...] = ()
