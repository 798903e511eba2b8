"""Tests for fail-fast process fault handling."""

from __future__ import annotations

import asyncio
import logging
import sys
import threading

import pytest

from app.runtime import FAULT_EXIT_CODE, ProcessFaultHandler


class _RecordingTerminator:
    """Terminate callable double that records exit codes."""

    def __init__(self) -> None:
        self.exit_codes: list[int] = []

    def __call__(self, exit_code: int) -> None:
        self.exit_codes.append(exit_code)


def test_fault_report_logs_and_terminates_with_status_one(caplog: pytest.LogCaptureFixture) -> None:
    """Log the fault with traceback and terminate with exit status 1.

    Returns:
        None: Assertions validate fault handling.

    Raises:
        AssertionError: Raised when logging or termination differs.
    """

    terminator = _RecordingTerminator()
    handler = ProcessFaultHandler(terminate=terminator)
    caplog.set_level(logging.CRITICAL, logger="app.runtime.faults")

    try:
        raise ValueError("boom")
    except ValueError as error:
        handler.fault_report("Uncaught Exception", error)

    assert terminator.exit_codes == [FAULT_EXIT_CODE]
    assert caplog.records[-1].getMessage() == "Uncaught Exception: boom"
    assert caplog.records[-1].exc_info is not None


def test_fault_uncaught_hook_terminates_for_regular_exceptions() -> None:
    """Terminate on exceptions delivered to the interpreter hook.

    Returns:
        None: Assertions validate hook behavior.

    Raises:
        AssertionError: Raised when termination is skipped.
    """

    terminator = _RecordingTerminator()
    handler = ProcessFaultHandler(terminate=terminator)
    error = RuntimeError("unexpected")

    handler.fault_handle_uncaught(RuntimeError, error, None)

    assert terminator.exit_codes == [1]


def test_fault_uncaught_hook_leaves_keyboard_interrupt_to_default_hook(monkeypatch: pytest.MonkeyPatch) -> None:
    """Delegate KeyboardInterrupt to the default interpreter hook.

    Returns:
        None: Assertions validate delegation.

    Raises:
        AssertionError: Raised when KeyboardInterrupt terminates via the fault path.
    """

    terminator = _RecordingTerminator()
    delegated: list[type[BaseException]] = []
    monkeypatch.setattr(sys, "__excepthook__", lambda exc_type, _value, _tb: delegated.append(exc_type))
    handler = ProcessFaultHandler(terminate=terminator)

    handler.fault_handle_uncaught(KeyboardInterrupt, KeyboardInterrupt(), None)

    assert terminator.exit_codes == []
    assert delegated == [KeyboardInterrupt]


def test_fault_install_registers_interpreter_and_thread_hooks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register sys and threading exception hooks.

    Returns:
        None: Assertions validate hook registration.

    Raises:
        AssertionError: Raised when hooks are not registered.
    """

    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
    handler = ProcessFaultHandler(terminate=_RecordingTerminator())

    handler.fault_install()

    assert sys.excepthook == handler.fault_handle_uncaught
    assert threading.excepthook == handler.fault_handle_thread_exception


def test_fault_thread_hook_terminates_on_worker_thread_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    """Terminate when a worker thread raises an uncaught exception.

    Returns:
        None: Assertions validate thread fault handling.

    Raises:
        AssertionError: Raised when termination is skipped.
    """

    terminator = _RecordingTerminator()
    handler = ProcessFaultHandler(terminate=terminator)
    monkeypatch.setattr(threading, "excepthook", handler.fault_handle_thread_exception)

    def _fail() -> None:
        raise RuntimeError("worker failed")

    worker = threading.Thread(target=_fail, name="worker-1")
    worker.start()
    worker.join()

    assert terminator.exit_codes == [1]


def test_fault_loop_exception_handler_terminates_on_unhandled_rejection() -> None:
    """Terminate when the event loop reports an unhandled failure.

    Returns:
        None: Assertions validate loop fault handling.

    Raises:
        AssertionError: Raised when termination is skipped.
    """

    terminator = _RecordingTerminator()
    handler = ProcessFaultHandler(terminate=terminator)

    async def _report() -> None:
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(handler.fault_handle_loop_exception)
        loop.call_exception_handler({"message": "Task exception was never retrieved", "exception": ValueError("x")})

    asyncio.run(_report())

    assert terminator.exit_codes == [1]
