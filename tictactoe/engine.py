"""Tic-tac-toe rules and state.

The board is a flat list of nine cells, row-major (index = row * 3 + col).
Front ends never touch the board directly: they call ``Game.apply_move``
and read back an immutable ``Snapshot``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from tictactoe.errors import CellOccupied, GameAlreadyOver, InputOutOfRange

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Evaluation order is the tie-break when more than one line matches
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Mark(str, Enum):
    EMPTY = ' '
    X = 'X'
    O = 'O'

    @property
    def opponent(self) -> 'Mark':
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError('EMPTY has no opponent')


class Status(str, Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    DRAWN = 'drawn'


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of a game at one point in time."""

    board: Tuple[Mark, ...]
    current_player: Mark
    winner: Optional[Mark]
    status: Status
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def game_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def to_dict(self):
        return {
            'board': [cell.value for cell in self.board],
            'currentPlayer': self.current_player.value,
            'winner': self.winner.value if self.winner else Mark.EMPTY.value,
            'gameOver': self.game_over,
        }


def find_winner(board: Sequence[Mark]) -> Tuple[Optional[Mark], Optional[Tuple[int, int, int]]]:
    """Return ``(mark, line)`` for the first completed line, or ``(None, None)``."""
    for line in WIN_LINES:
        a, b, c = (board[i] for i in line)
        if a is not Mark.EMPTY and a == b == c:
            return a, line
    return None, None


def position_from_row_col(row: int, col: int) -> int:
    """Translate 1-based row/column input into a board index."""
    if not (1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE):
        raise InputOutOfRange(f'Row and column must be between 1 and {BOARD_SIZE}')
    return (row - 1) * BOARD_SIZE + (col - 1)


class Game:
    def __init__(self):
        self.reset()

    def reset(self) -> Snapshot:
        self._board = [Mark.EMPTY] * CELL_COUNT
        self.current_player = Mark.X
        self.winner: Optional[Mark] = None
        self.winning_line: Optional[Tuple[int, int, int]] = None
        self.status = Status.IN_PROGRESS
        return self.snapshot()

    @property
    def board(self) -> Tuple[Mark, ...]:
        return tuple(self._board)

    @property
    def game_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def is_full(self) -> bool:
        return all(cell is not Mark.EMPTY for cell in self._board)

    def apply_move(self, position: int) -> Snapshot:
        """Place the current player's mark at ``position`` (0-8).

        Raises InputOutOfRange, GameAlreadyOver or CellOccupied, checked in
        that order; the board is untouched whenever an error is raised.
        A finished game reports GameAlreadyOver even for a taken cell.
        """
        if isinstance(position, bool) or not isinstance(position, int) \
           or not 0 <= position < CELL_COUNT:
            raise InputOutOfRange(f'Position must be an integer between 0 and {CELL_COUNT - 1}')
        if self.game_over:
            raise GameAlreadyOver()
        if self._board[position] is not Mark.EMPTY:
            raise CellOccupied(f'Cell {position} is already taken by {self._board[position].value}')

        self._board[position] = self.current_player
        winner, line = find_winner(self._board)
        if winner is not None:
            self.winner = winner
            self.winning_line = line
            self.status = Status.WON
        elif self.is_full():
            self.status = Status.DRAWN
        else:
            self.current_player = self.current_player.opponent
        return self.snapshot()

    def apply_row_col(self, row: int, col: int) -> Snapshot:
        return self.apply_move(position_from_row_col(row, col))

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=self.board,
            current_player=self.current_player,
            winner=self.winner,
            status=self.status,
            winning_line=self.winning_line,
        )

    get_state = snapshot


def new_game() -> Game:
    return Game()
