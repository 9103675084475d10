"""Parsing of submitted round forms into scoring values.

The scoring engine trusts its inputs; the range checks on taken points live
here, at the request boundary.
"""

import re
from typing import Any, Mapping, NamedTuple

from .codec import CodecError, decode_bets
from .types import NO_BETS, Consecutive, Turn


_INTEGER = re.compile(r"[-+]?\d+", re.ASCII)


class TurnFormError(ValueError):
    pass


class TakenPointsRange(NamedTuple):
    minimum: int = -25
    maximum: int = 125
    step: int = 5

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'TakenPointsRange':
        return cls(
            minimum=int(config.get('TAKEN_POINTS_MIN', -25)),
            maximum=int(config.get('TAKEN_POINTS_MAX', 125)),
            step=int(config.get('TAKEN_POINTS_STEP', 5)),
        )

    def to_dict(self):
        return {'min': self.minimum, 'max': self.maximum, 'step': self.step}


class TakenPointsForm(NamedTuple):
    taken_points: int
    consecutive: Consecutive


def _parse_taken_points(value: Any) -> int:
    # Form fields arrive as strings ("60"), JSON clients send numbers
    if isinstance(value, bool):
        raise TurnFormError('takenPoints must be an integer')
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
    raise TurnFormError('takenPoints must be an integer')


def _parse_consecutive(value: Any) -> Consecutive:
    if value is None or value == '':
        return Consecutive.NONE
    try:
        return Consecutive(value)
    except ValueError:
        raise TurnFormError("consecutive must be one of 'none', 'us', 'them'")


def parse_taken_points_form(data: Mapping[str, Any], limits: TakenPointsRange = TakenPointsRange()) -> TakenPointsForm:
    """Read ``takenPoints`` and ``consecutive`` from a submitted form.

    When a team went out consecutively the slider value is ignored, so it is
    neither required nor range checked.
    """
    if not isinstance(data, Mapping):
        raise TurnFormError('Request body must be a JSON object')
    consecutive = _parse_consecutive(data.get('consecutive'))
    raw = data.get('takenPoints')
    if consecutive != Consecutive.NONE:
        try:
            kept = _parse_taken_points(raw)
        except TurnFormError:
            kept = 0
        return TakenPointsForm(kept, consecutive)

    if raw is None or raw == '':
        raise TurnFormError('takenPoints is required')
    taken = _parse_taken_points(raw)
    if not limits.minimum <= taken <= limits.maximum:
        raise TurnFormError(f'takenPoints must be between {limits.minimum} and {limits.maximum}')
    if limits.step > 1 and taken % limits.step:
        raise TurnFormError(f'takenPoints must be a multiple of {limits.step}')
    return TakenPointsForm(taken, consecutive)


def parse_turn(data: Any, limits: TakenPointsRange = TakenPointsRange()) -> Turn:
    form = parse_taken_points_form(data, limits)
    try:
        our_bets = decode_bets(data['ourBets'], 'ourBets') if data.get('ourBets') is not None else NO_BETS
        their_bets = decode_bets(data['theirBets'], 'theirBets') if data.get('theirBets') is not None else NO_BETS
    except CodecError as exc:
        raise TurnFormError(str(exc))
    return Turn(
        taken_points=form.taken_points,
        consecutive=form.consecutive,
        our_bets=our_bets,
        their_bets=their_bets,
    )
