"""Game services shared by the HTTP routes and socket handlers.

Keeps the lock-guarded game instance apart from transport concerns so the
engine in ``tictactoe.engine`` stays free of I/O and threading.
"""
