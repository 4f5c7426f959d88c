from __future__ import annotations

import random
from typing import Iterable

from ludo_table.engine import GameEngine
from ludo_table.store import GameStore


class ScriptedRandom(random.Random):
    """Random whose die rolls come from a script, then fall back to seeded rolls."""

    def __init__(self, rolls: Iterable[int] = (), seed: int = 0):
        super().__init__(seed)
        self.rolls = list(rolls)

    def randint(self, a: int, b: int) -> int:
        if self.rolls:
            return self.rolls.pop(0)
        return super().randint(a, b)


def new_store() -> GameStore:
    store = GameStore()
    store.start_game()
    return store


def new_engine(rolls: Iterable[int] = ()) -> GameEngine:
    engine = GameEngine(rng=ScriptedRandom(rolls))
    engine.start_game()
    return engine


def place(store: GameStore, **positions: int) -> None:
    """place(store, p0=10, p12=-1) puts piece 0 on 10 and piece 12 in base."""
    for key, position in positions.items():
        store.update_piece_position(int(key.lstrip("p")), position)
