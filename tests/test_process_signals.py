"""End-to-end tests for process exit statuses under real termination signals."""

from __future__ import annotations

import os
import signal
import socket
import subprocess
import sys
import time
from pathlib import Path

import httpx
import pytest

_PROJECT_ROOT = Path(__file__).resolve().parents[1]

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX termination signals required")


def _find_free_port() -> int:
    """Reserve and release one ephemeral local port.

    Returns:
        int: Port number that was free a moment ago.
    """

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as reserved_socket:
        reserved_socket.bind(("127.0.0.1", 0))
        return reserved_socket.getsockname()[1]


def _start_server_process(port: int, working_directory: Path) -> subprocess.Popen:
    """Launch the entrypoint module in a child process.

    Args:
        port: Listening port passed through `--port`.
        working_directory: Directory without a `.env` file.

    Returns:
        subprocess.Popen: Running child process with merged output.
    """

    environment = {
        key: value
        for key, value in os.environ.items()
        if key not in {"PORT", "HOST", "NODE_ENV", "APP_ENV", "ENVIRONMENT_NAME", "LOG_LEVEL"}
    }
    environment["HOST"] = "127.0.0.1"
    environment["PYTHONPATH"] = os.pathsep.join(filter(None, [str(_PROJECT_ROOT), environment.get("PYTHONPATH")]))
    return subprocess.Popen(
        [sys.executable, "-m", "app.main", "--port", str(port)],
        cwd=working_directory,
        env=environment,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )


def _wait_until_healthy(process: subprocess.Popen, port: int, timeout_seconds: float = 15.0) -> None:
    """Poll `/health` until the child answers.

    Args:
        process: Child process running the server.
        port: Listening port.
        timeout_seconds: Upper bound for the wait.

    Raises:
        AssertionError: Raised when the child exits or never answers.
    """

    deadline = time.monotonic() + timeout_seconds
    while time.monotonic() < deadline:
        assert process.poll() is None, "server process exited before becoming healthy"
        try:
            response = httpx.get(f"http://127.0.0.1:{port}/health", timeout=1.0)
            if response.status_code == 200:
                return
        except httpx.TransportError:
            pass
        time.sleep(0.1)
    raise AssertionError("server did not become healthy in time")


@pytest.mark.parametrize("shutdown_signal", [signal.SIGTERM, signal.SIGINT])
def test_process_exits_zero_after_termination_signal(shutdown_signal: signal.Signals, tmp_path: Path) -> None:
    """Drain and exit with status 0 when the process receives SIGTERM or SIGINT.

    Returns:
        None: Assertions validate exit status and shutdown log lines.

    Raises:
        AssertionError: Raised when the process exits differently.
    """

    port = _find_free_port()
    process = _start_server_process(port, tmp_path)
    try:
        _wait_until_healthy(process, port)
        process.send_signal(shutdown_signal)
        output, _ = process.communicate(timeout=20.0)
    finally:
        if process.poll() is None:
            process.kill()
            process.communicate()

    assert process.returncode == 0, output
    assert f"{shutdown_signal.name} received. Shutting down gracefully..." in output
    assert "Server closed. Process terminating..." in output


def test_process_exits_one_when_port_is_taken(tmp_path: Path) -> None:
    """Exit with status 1 when the requested port is already bound.

    Returns:
        None: Assertions validate exit status.

    Raises:
        AssertionError: Raised when the process exits differently.
    """

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupying_socket:
        occupying_socket.bind(("127.0.0.1", 0))
        occupying_socket.listen(1)
        process = _start_server_process(occupying_socket.getsockname()[1], tmp_path)
        try:
            output, _ = process.communicate(timeout=20.0)
        finally:
            if process.poll() is None:
                process.kill()
                process.communicate()

    assert process.returncode == 1, output
    assert "Server failed to start" in output
