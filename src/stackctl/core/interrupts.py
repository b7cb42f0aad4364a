"""Interrupt handling — stop the environment when the operator hits Ctrl+C.

:class:`InterruptHandler` is the only asynchronous piece of stackctl.
On ``SIGINT`` it marks the shared cancellation event, asks the container
engine to stop the running containers, and then hands the signal to
whatever handler was installed before it (Python's default raises
``KeyboardInterrupt``).  It never waits for or cancels the collaborator
call that was in flight when the signal arrived.
"""

from __future__ import annotations

import signal
import threading
from collections.abc import Callable
from types import FrameType, TracebackType
from typing import Any

from stackctl.core.protocols import ContainerEngine
from stackctl.exceptions import StackctlError


ErrorCallback = Callable[[StackctlError], None]


class InterruptHandler:
    """Best-effort graceful stop on ``SIGINT``.

    Usage::

        with InterruptHandler(engine) as interrupts:
            executor = LifecycleExecutor(..., cancelled=interrupts.cancelled)
            executor.execute(actions)
    """

    def __init__(
        self,
        engine: ContainerEngine,
        *,
        on_stop_error: ErrorCallback | None = None,
        signum: int = signal.SIGINT,
    ) -> None:
        self._engine: ContainerEngine = engine
        self._on_stop_error: ErrorCallback | None = on_stop_error
        self._signum: int = signum
        self._previous: Any = None
        self._installed: bool = False
        self.cancelled: threading.Event = threading.Event()
        """Set as soon as the first interrupt is received."""

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def install(self) -> None:
        """Register the handler, remembering the one it replaces."""
        if self._installed:
            return
        self._previous = signal.signal(self._signum, self.handle)
        self._installed = True

    def restore(self) -> None:
        """Reinstate the previously registered handler.  Idempotent."""
        if not self._installed:
            return
        signal.signal(self._signum, self._previous)
        self._installed = False

    def __enter__(self) -> InterruptHandler:
        self.install()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.restore()

    # ------------------------------------------------------------------
    # Signal callback
    # ------------------------------------------------------------------

    def handle(self, signum: int, frame: FrameType | None) -> None:
        """Stop the containers, then defer to the previous disposition."""
        self.cancelled.set()
        try:
            self._engine.stop()
        except StackctlError as exc:
            if self._on_stop_error is not None:
                self._on_stop_error(exc)

        previous = self._previous
        if callable(previous):
            previous(signum, frame)
        elif previous == signal.SIG_DFL:
            raise KeyboardInterrupt
