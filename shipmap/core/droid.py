"""
Intcode droid agent.

The droid program runs on its own worker thread. Movement commands go in
through one queue and status codes come back through another, so every
attempt_move() consumes exactly one status before the next command is sent.
"""

import logging
import queue
import threading
from typing import Iterable, Optional, Union

from shipmap.config import get_settings

from .agent import AgentError, MoveOutcome, STARTING_POSITION
from .geometry import Direction, Point
from .intcode import IntcodeVm

logger = logging.getLogger(__name__)

# Queue sentinels
_STOP = object()
_HALTED = object()


class _DroidStopped(Exception):
    """Unwinds the VM thread when the droid is released."""


class IntcodeDroid:
    """
    Movable agent driven by an Intcode program.

    Example usage:
        with IntcodeDroid(program_text) as droid:
            outcome = droid.attempt_move(Direction.NORTH)
    """

    def __init__(
        self,
        program: Union[str, Iterable[int]],
        response_timeout: Optional[float] = None,
        shutdown_timeout: Optional[float] = None,
    ):
        """
        Args:
            program: Intcode source text or parsed program.
            response_timeout: Seconds to wait for a status (default from settings).
            shutdown_timeout: Seconds to wait for the worker on release
                (default from settings).

        Raises:
            IntcodeError: If the program cannot be parsed.
        """
        settings = get_settings()
        self._response_timeout = (
            response_timeout
            if response_timeout is not None
            else settings.agent_response_timeout_seconds
        )
        self._shutdown_timeout = (
            shutdown_timeout
            if shutdown_timeout is not None
            else settings.agent_shutdown_timeout_seconds
        )

        self._commands: queue.Queue = queue.Queue()
        self._statuses: queue.Queue = queue.Queue()
        self._vm = IntcodeVm(program, self._next_command, self._statuses.put)
        self._position = STARTING_POSITION
        self._lock = threading.Lock()
        self._released = False

        self._thread = threading.Thread(
            target=self._run_vm, name="intcode-droid", daemon=True
        )
        self._thread.start()

    @property
    def position(self) -> Point:
        return self._position

    @property
    def released(self) -> bool:
        return self._released

    @property
    def worker_alive(self) -> bool:
        return self._thread.is_alive()

    def attempt_move(self, direction: Direction) -> MoveOutcome:
        """
        Send one movement command and wait for its status.

        Raises:
            AgentError: If the droid was released, the program stopped or
                crashed, the wait timed out, or the status is unknown.
        """
        if self._released:
            raise AgentError("Droid has been released")

        self._commands.put(direction.command)
        try:
            status = self._statuses.get(timeout=self._response_timeout)
        except queue.Empty:
            raise AgentError(
                f"No response from droid after {self._response_timeout}s "
                f"(moving {direction.value})"
            ) from None

        if status is _HALTED:
            raise AgentError("Droid program halted")
        if isinstance(status, Exception):
            raise AgentError(f"Droid program failed: {status}") from status

        outcome = MoveOutcome.from_code(status)
        if outcome.moved:
            self._position = direction.move(self._position)
        return outcome

    def release(self) -> None:
        """Stop the worker. Idempotent and safe while the VM is busy."""
        with self._lock:
            if self._released:
                return
            self._released = True

        self._vm.halt()
        self._commands.put(_STOP)
        self._thread.join(timeout=self._shutdown_timeout)
        if self._thread.is_alive():
            logger.warning(
                f"Droid worker still running {self._shutdown_timeout}s after release"
            )
        else:
            logger.debug("Droid worker stopped")

    def __enter__(self) -> "IntcodeDroid":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _next_command(self) -> int:
        command = self._commands.get()
        if command is _STOP:
            raise _DroidStopped()
        return command

    def _run_vm(self) -> None:
        try:
            self._vm.run()
        except _DroidStopped:
            return
        except Exception as e:
            logger.error(f"Droid program crashed: {type(e).__name__}: {e}")
            self._statuses.put(e)
            return
        self._statuses.put(_HALTED)
