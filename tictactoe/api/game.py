from flask import Blueprint, jsonify, request, current_app
from tictactoe.errors import InvalidMove, MalformedRequest
from tictactoe.services.shared_game import get_shared_game


game = Blueprint('game', __name__)


def _parse_position(data) -> int:
    """Pull an integer ``position`` out of a decoded JSON body."""
    if not isinstance(data, dict) or 'position' not in data:
        raise MalformedRequest()
    raw = data['position']
    # bool is an int subclass but never a board position
    if isinstance(raw, bool):
        raise MalformedRequest()
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            raise MalformedRequest() from None
    raise MalformedRequest()


@game.route('/<path:_subpath>', methods=['OPTIONS'])
def preflight(_subpath):
    return jsonify({'status': 'ok'}), 200


@game.route('/state', methods=['GET'])
def get_state():
    return jsonify(get_shared_game().snapshot().to_dict())


@game.route('/move', methods=['POST'])
def make_move():
    try:
        position = _parse_position(request.get_json(silent=True))
    except MalformedRequest as exc:
        current_app.logger.warning(f"[move-rejected] malformed body={request.get_data(as_text=True)[:200]!r}")
        return jsonify({'error': 'Invalid JSON', **exc.to_dict()}), 400

    try:
        snapshot = get_shared_game().apply_move(position)
    except InvalidMove as exc:
        current_app.logger.warning(f"[move-rejected] position={position} code={exc.code}")
        return jsonify({'error': 'Invalid move', **exc.to_dict()}), 400

    current_app.logger.info(
        f"[move] position={position} status={snapshot.status.value} next={snapshot.current_player.value}"
    )
    return jsonify(snapshot.to_dict())


@game.route('/reset', methods=['POST'])
def reset_game():
    snapshot = get_shared_game().reset()
    current_app.logger.info("[reset] game reset to initial state")
    return jsonify(snapshot.to_dict())
