"""Lifecycle executor — runs resolved phases against the collaborators.

Phases always execute in :class:`~stackctl.core.models.Phase` order,
whatever order the tokens were given in.  Each phase stops at its first
failing step and the failure ends the whole run; nothing is retried and
earlier phases are not rolled back.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no subprocess.
* Only :class:`~stackctl.exceptions.StackctlError` subclasses escape
  :meth:`LifecycleExecutor.execute`.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from stackctl.core.models import ActionSet, Phase
from stackctl.core.protocols import ApplicationServer, ContainerEngine, DependencyInstaller
from stackctl.exceptions import (
    LifecycleInterrupted,
    PhaseFailedError,
    StackctlError,
    rerun_hint,
)


PhaseCallback = Callable[[Phase], None]


class LifecycleExecutor:
    """Drives the container engine, installers and server through phases.

    Parameters
    ----------
    engine, installer, server:
        Objects satisfying the collaborator protocols.
    host, port:
        Where the application server binds during the start phase.
    cancelled:
        Event set by the interrupt handler; checked before each phase.
    on_phase:
        Optional callable invoked with each phase just before it runs.
    """

    def __init__(
        self,
        engine: ContainerEngine,
        installer: DependencyInstaller,
        server: ApplicationServer,
        *,
        host: str,
        port: int,
        cancelled: threading.Event | None = None,
        on_phase: PhaseCallback | None = None,
    ) -> None:
        self._engine: ContainerEngine = engine
        self._installer: DependencyInstaller = installer
        self._server: ApplicationServer = server
        self._host: str = host
        self._port: int = port
        self._cancelled: threading.Event = (
            cancelled if cancelled is not None else threading.Event()
        )
        self._on_phase: PhaseCallback | None = on_phase

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, actions: ActionSet) -> tuple[Phase, ...]:
        """Run every phase requested in *actions*.

        Returns
        -------
        tuple[Phase, ...]
            The phases that completed, in execution order.

        Raises
        ------
        PhaseFailedError
            When a collaborator call fails; chained to the original error.
        LifecycleInterrupted
            When an interrupt arrived before the next phase began.
        """
        completed: list[Phase] = []
        for phase in actions.phases():
            if self._cancelled.is_set():
                raise LifecycleInterrupted(
                    f"Interrupted before the {phase.value} phase.",
                )
            if self._on_phase is not None:
                self._on_phase(phase)
            self._run_phase(phase, actions)
            completed.append(phase)
        return tuple(completed)

    # ------------------------------------------------------------------
    # Phase dispatch
    # ------------------------------------------------------------------

    def _run_phase(self, phase: Phase, actions: ActionSet) -> None:
        handlers: dict[Phase, Callable[[], None]] = {
            Phase.BUILD: self._build,
            Phase.START: lambda: self._start(detached=actions.detached),
            Phase.HALT: self._halt,
            Phase.TIDY: self._tidy,
            Phase.CLEAN: self._clean,
            Phase.ARMAGEDDON: self._armageddon,
        }
        try:
            handlers[phase]()
        except StackctlError as exc:
            raise PhaseFailedError(
                phase.value,
                str(exc),
                hint=exc.hint or rerun_hint(phase.value),
            ) from exc
        except Exception as exc:
            raise PhaseFailedError(
                phase.value,
                f"Unexpected error: {exc}",
                hint=rerun_hint(phase.value),
            ) from exc

    # ------------------------------------------------------------------
    # Phase handlers
    # ------------------------------------------------------------------

    def _build(self) -> None:
        self._engine.build()
        self._installer.install_frontend()
        self._installer.install_backend()
        # The store can only be initialised while the services are up.
        self._engine.up(detached=True)
        self._server.initialize_storage()
        self._engine.stop()

    def _start(self, *, detached: bool) -> None:
        if not self._installer.check_backend():
            self._installer.install_backend()
        self._engine.up(detached=True)
        self._server.run(self._port, self._host, detached=detached)

    def _halt(self) -> None:
        self._engine.stop()

    def _tidy(self) -> None:
        self._engine.stop()
        self._engine.down(remove_volumes=False, remove_orphans=False)

    def _clean(self) -> None:
        self._installer.remove_local_caches()
        self._engine.stop()
        self._engine.down(remove_volumes=True, remove_orphans=True)

    def _armageddon(self) -> None:
        self._clean()
        self._engine.prune_stopped_containers()
        self._installer.clean_backend_cache()
