import socket
import sys

from tictactoe import create_app, socketio
from tictactoe.routes import ENDPOINTS

app = create_app()


def ensure_port_free(host, port) -> None:
    """Bind and release ``(host, port)`` the way the dev server will, raising OSError if taken."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))


def main():
    host = app.config['HOST']
    port = app.config['PORT']
    try:
        ensure_port_free(host, port)
    except OSError as exc:
        app.logger.error(f"[startup] cannot listen on {host}:{port}: {exc}")
        sys.exit(f"Failed to start server on {host}:{port}: {exc}")

    app.logger.info(f"[startup] tic-tac-toe server starting on http://{host}:{port}")
    for endpoint in ENDPOINTS:
        app.logger.info(f"[startup]   {endpoint['method']:<4} {endpoint['path']:<11} - {endpoint['description']}")
    socketio.run(app, host=host, port=port, allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
