import json
import time
from typing import Optional

from flask import current_app

from tichu import db
from tichu.models import Snapshot
from .codec import decode_game, encode_game
from .scoring import new_game
from .types import Game


def _slot(key: Optional[str]) -> str:
    return key or current_app.config.get('STORAGE_KEY', 'tichu:state')


def load_game(key: Optional[str] = None) -> Optional[Game]:
    """Read the stored game, or None if the slot is empty or unreadable."""
    snapshot = db.session.get(Snapshot, _slot(key))
    if snapshot is None:
        return None
    return decode_game(snapshot.payload)


def load_or_new_game(key: Optional[str] = None) -> Game:
    game = load_game(key)
    if game is None:
        current_app.logger.info(f"[snapshot] slot={_slot(key)} empty or unreadable, starting new game")
        return new_game()
    return game


def save_game(game: Game, key: Optional[str] = None) -> Game:
    slot = _slot(key)
    snapshot = db.session.get(Snapshot, slot)
    if snapshot is None:
        snapshot = Snapshot(key=slot)
    snapshot.payload = json.dumps(encode_game(game))
    snapshot.updated_at = time.time()
    db.session.add(snapshot)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(
        f"[snapshot] slot={slot} saved ours={game.our_score} theirs={game.their_score} turns={len(game.history)}"
    )
    return game


def clear_game(key: Optional[str] = None) -> bool:
    snapshot = db.session.get(Snapshot, _slot(key))
    if snapshot is None:
        return False
    db.session.delete(snapshot)
    db.session.commit()
    return True
