"""Pure Tichu scoring.

Every function here takes immutable values and returns new ones; nothing
touches the database, the request or the socket layer.
"""

from functools import reduce
from typing import Iterable

from .types import Bet, Consecutive, Game, Points, Turn


def new_game() -> Game:
    return Game(our_score=0, their_score=0, history=())


def calculate_taken_points(turn) -> Points:
    """Split the round's card points between the teams.

    Only ``taken_points`` and ``consecutive`` are read, so anything exposing
    those two attributes works (the preview endpoint passes a partial form).
    A consecutive round overrides the split: 200 to the team that went out,
    0 to the other. No clamping is applied to ``taken_points``.
    """
    consecutive = turn.consecutive
    if consecutive == Consecutive.NONE:
        return Points(us=turn.taken_points, them=100 - turn.taken_points)
    if consecutive == Consecutive.US:
        return Points(us=200, them=0)
    if consecutive == Consecutive.THEM:
        return Points(us=0, them=200)
    raise ValueError(f"unknown consecutive value: {consecutive!r}")


def points_for_bets(bets: Iterable[Bet]) -> int:
    """Sum of +/-100 per Tichu and +/-200 per Grand Tichu call."""
    return sum(bet.points for bet in bets)


def turn_points(turn: Turn) -> Points:
    taken = calculate_taken_points(turn)
    return Points(
        us=taken.us + points_for_bets(turn.our_bets),
        them=taken.them + points_for_bets(turn.their_bets),
    )


def score(turn: Turn, game: Game) -> Game:
    delta = turn_points(turn)
    return Game(
        our_score=game.our_score + delta.us,
        their_score=game.their_score + delta.them,
        history=game.history + (turn,),
    )


def undo(game: Game) -> Game:
    """Remove the most recent turn and its points. Empty games are returned as-is."""
    if not game.history:
        return game
    delta = turn_points(game.history[-1])
    return Game(
        our_score=game.our_score - delta.us,
        their_score=game.their_score - delta.them,
        history=game.history[:-1],
    )


def game_from_turns(turns: Iterable[Turn]) -> Game:
    """Rebuild a game from its turn history, as if each turn had been scored in order."""
    history = tuple(turns)
    totals = reduce(
        lambda acc, delta: Points(acc.us + delta.us, acc.them + delta.them),
        (turn_points(t) for t in history),
        Points(0, 0),
    )
    return Game(our_score=totals.us, their_score=totals.them, history=history)
