"""
Tests for the production gunicorn setup.
A stalled mail send must not hold up other requests.
"""
import runpy
import socket
import subprocess
import sys
import threading
import time
from pathlib import Path
from urllib.error import URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

import pytest

ROOT = Path(__file__).resolve().parents[1]
GUNICORN_CONF = ROOT / "gunicorn.conf.py"


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


class TestGunicornConfig:
    """Tests for gunicorn.conf.py values."""

    def test_threaded_workers(self):
        settings = runpy.run_path(str(GUNICORN_CONF))

        assert settings["worker_class"] == "gthread"
        assert settings["threads"] >= 4

    def test_binds_to_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "8123")

        settings = runpy.run_path(str(GUNICORN_CONF))

        assert settings["bind"] == "0.0.0.0:8123"


@pytest.fixture
def gunicorn_server():
    """Single gunicorn worker serving tests.stalled_mail_app with the project config."""
    pytest.importorskip("gunicorn")
    port = _free_port()
    proc = subprocess.Popen(
        [
            sys.executable, "-m", "gunicorn",
            "-c", str(GUNICORN_CONF),
            "--workers", "1",
            "-b", f"127.0.0.1:{port}",
            "tests.stalled_mail_app:app",
        ],
        cwd=str(ROOT),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    base_url = f"http://127.0.0.1:{port}"

    deadline = time.monotonic() + 20
    while True:
        try:
            with urlopen(f"{base_url}/health", timeout=1):
                break
        except (URLError, OSError):
            if proc.poll() is not None or time.monotonic() > deadline:
                proc.kill()
                pytest.fail("gunicorn did not start")
            time.sleep(0.1)

    yield base_url

    proc.terminate()
    try:
        proc.wait(timeout=10)
    except subprocess.TimeoutExpired:
        proc.kill()


class TestStalledSend:
    """A hung relay only affects the request waiting on it."""

    def test_page_served_while_send_stalls(self, gunicorn_server):
        results = {}

        def post_contact():
            data = urlencode({"name": "Ann", "email": "ann@example.com", "message": "hello"}).encode()
            with urlopen(Request(f"{gunicorn_server}/contact", data=data), timeout=15) as response:
                results["contact"] = response.read().decode("utf-8")

        post = threading.Thread(target=post_contact)
        post.start()
        time.sleep(0.5)

        started = time.monotonic()
        with urlopen(f"{gunicorn_server}/about", timeout=5) as response:
            status = response.status
        elapsed = time.monotonic() - started

        post.join(timeout=15)

        assert status == 200
        assert elapsed < 1.0
        assert "Message Sent!" in results["contact"]
