"""Server lifecycle state machine for graceful shutdown."""

from enum import Enum


class ServerState(str, Enum):
    """Lifecycle states of the HTTP server."""

    RUNNING = "running"
    DRAINING = "draining"
    STOPPED = "stopped"


class ServerStateError(RuntimeError):
    """Raised when a lifecycle transition is not allowed from the current state."""


_ALLOWED_TRANSITIONS: dict[ServerState, frozenset[ServerState]] = {
    ServerState.RUNNING: frozenset({ServerState.DRAINING}),
    ServerState.DRAINING: frozenset({ServerState.STOPPED}),
    ServerState.STOPPED: frozenset(),
}


class ServerLifecycle:
    """One-way `RUNNING -> DRAINING -> STOPPED` lifecycle tracker."""

    def __init__(self) -> None:
        self._state = ServerState.RUNNING

    @property
    def state(self) -> ServerState:
        return self._state

    def server_begin_drain(self) -> None:
        """Move from RUNNING to DRAINING.

        Raises:
            ServerStateError: Raised when the server is not RUNNING.
        """

        self._server_transition(ServerState.DRAINING)

    def server_mark_stopped(self) -> None:
        """Move from DRAINING to STOPPED.

        Raises:
            ServerStateError: Raised when the server is not DRAINING.
        """

        self._server_transition(ServerState.STOPPED)

    def _server_transition(self, target_state: ServerState) -> None:
        if target_state not in _ALLOWED_TRANSITIONS[self._state]:
            raise ServerStateError(f"cannot move server from {self._state.value} to {target_state.value}")
        self._state = target_state
