import threading

from flask import current_app

from tictactoe.engine import Game, Snapshot

EXTENSION_KEY = 'shared_game'


class SharedGame:
    """The single game served by one process, guarded by one lock.

    Every operation, reads included, runs under the same mutex so a caller
    never observes a half-applied move. Only snapshots leave this object.
    Change listeners run while the lock is still held, so they see
    snapshots in the order the moves were applied.
    """

    def __init__(self, game: Game | None = None):
        self._game = game or Game()
        self._lock = threading.Lock()
        self._listeners = []

    def init_app(self, app) -> None:
        app.extensions[EXTENSION_KEY] = self

    def on_change(self, callback) -> None:
        """Call ``callback(snapshot)`` after every successful move or reset."""
        self._listeners.append(callback)

    def _notify(self, snapshot: Snapshot) -> Snapshot:
        for callback in self._listeners:
            callback(snapshot)
        return snapshot

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._game.snapshot()

    def apply_move(self, position: int) -> Snapshot:
        with self._lock:
            return self._notify(self._game.apply_move(position))

    def apply_row_col(self, row: int, col: int) -> Snapshot:
        with self._lock:
            return self._notify(self._game.apply_row_col(row, col))

    def reset(self) -> Snapshot:
        with self._lock:
            return self._notify(self._game.reset())


def get_shared_game() -> SharedGame:
    return current_app.extensions[EXTENSION_KEY]
