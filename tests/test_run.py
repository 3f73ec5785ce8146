import os
import socket
import subprocess
import sys

import pytest

import run

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture()
def busy_port():
    holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    holder.bind(('127.0.0.1', 0))
    holder.listen(1)
    yield holder.getsockname()[1]
    holder.close()


def test_server_exits_when_port_is_taken(busy_port):
    env = dict(os.environ, HOST='127.0.0.1', PORT=str(busy_port))
    proc = subprocess.run(
        [sys.executable, '-c', 'import run; run.main()'],
        cwd=PROJECT_ROOT, env=env, capture_output=True, text=True, timeout=60,
    )
    assert proc.returncode != 0
    assert f'Failed to start server on 127.0.0.1:{busy_port}' in proc.stderr


def test_main_exits_before_serving_on_taken_port(busy_port, monkeypatch):
    served = []
    monkeypatch.setitem(run.app.config, 'HOST', '127.0.0.1')
    monkeypatch.setitem(run.app.config, 'PORT', busy_port)
    monkeypatch.setattr(run.socketio, 'run', lambda *a, **kw: served.append(kw))
    with pytest.raises(SystemExit) as excinfo:
        run.main()
    assert 'Failed to start server' in str(excinfo.value.code)
    assert served == []


def test_main_serves_on_free_port(monkeypatch):
    scratch = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    scratch.bind(('127.0.0.1', 0))
    free_port = scratch.getsockname()[1]
    scratch.close()

    served = []
    monkeypatch.setitem(run.app.config, 'HOST', '127.0.0.1')
    monkeypatch.setitem(run.app.config, 'PORT', free_port)
    monkeypatch.setattr(run.socketio, 'run', lambda app, **kw: served.append(kw))
    run.main()
    assert served == [{'host': '127.0.0.1', 'port': free_port, 'allow_unsafe_werkzeug': True}]
