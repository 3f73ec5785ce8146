class GameError(Exception):
    """Base for every recoverable game condition reported to a caller."""

    code = 'game_error'
    default_message = 'Game error'

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict:
        return {'code': self.code, 'message': self.message}


class InvalidMove(GameError, ValueError):
    code = 'invalid_move'
    default_message = 'Invalid move'


class InputOutOfRange(InvalidMove):
    code = 'input_out_of_range'
    default_message = 'Position is outside the board'


class CellOccupied(InvalidMove):
    code = 'cell_occupied'
    default_message = 'Cell is already taken'


class GameAlreadyOver(InvalidMove):
    code = 'game_already_over'
    default_message = 'Game is already over'


class MalformedRequest(GameError, ValueError):
    code = 'malformed_request'
    default_message = 'Request body must carry an integer "position" field'


class UnparseableInput(GameError, ValueError):
    code = 'unparseable_input'
    default_message = 'Input must be one or two whole numbers'
