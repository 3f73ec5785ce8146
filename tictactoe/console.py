"""Console front end: two players share one terminal."""

import re

import click

from tictactoe.engine import BOARD_SIZE, CELL_COUNT, Game, Status, position_from_row_col
from tictactoe.errors import CellOccupied, InputOutOfRange, UnparseableInput

PROMPT = "Enter the row and column #'s (1-3): "
INVALID_INPUT = 'Invalid Input Please Try Again.'
TILE_FULL = 'Tile is full, try again.'
TIE_MESSAGE = 'No winner! The game was a tie!'


def render_board(board) -> str:
    rows = []
    for r in range(BOARD_SIZE):
        cells = board[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
        rows.append('   |   |   ')
        rows.append(' ' + ' | '.join(cell.value for cell in cells) + ' ')
        rows.append('___|___|___' if r < BOARD_SIZE - 1 else '   |   |   ')
    return '\n'.join(rows)


def parse_move(text: str) -> int:
    """Turn "row col" (1-3 each) or a single cell number (1-9) into a board index."""
    parts = [p for p in re.split(r'[\s,]+', text.strip()) if p]
    if not parts:
        raise UnparseableInput()
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        raise UnparseableInput(f'Not a number: {text.strip()!r}') from None
    if len(numbers) == 2:
        return position_from_row_col(*numbers)
    if len(numbers) == 1 and 1 <= numbers[0] <= CELL_COUNT:
        return numbers[0] - 1
    raise InputOutOfRange()


def play(game=None) -> Game:
    game = game or Game()
    click.echo(render_board(game.board))
    while not game.game_over:
        click.echo(f"Player {game.current_player.value}'s Turn.")
        while True:
            text = click.prompt(PROMPT, prompt_suffix='', default='', show_default=False)
            try:
                game.apply_move(parse_move(text))
            except (InputOutOfRange, UnparseableInput):
                click.echo(INVALID_INPUT)
            except CellOccupied:
                click.echo(TILE_FULL)
            else:
                break
        click.echo(render_board(game.board))

    if game.status is Status.WON:
        click.echo(f'Player {game.winner.value} is the winner!')
    else:
        click.echo(TIE_MESSAGE)
    return game


@click.command('play')
def play_command():
    """Play tic-tac-toe in the terminal."""
    play()