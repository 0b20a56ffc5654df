"""Run-once cleanup on interpreter exit or termination signals."""

import atexit
import os
import signal
from typing import Callable, Optional


def _termination_signals() -> tuple[signal.Signals, ...]:
    """Signals that end the process by default (SIGQUIT is POSIX only)."""
    names = ("SIGINT", "SIGTERM", "SIGQUIT")
    return tuple(getattr(signal, name) for name in names if hasattr(signal, name))


class ShutdownHook:
    """Callback fired at most once on exit, on a termination signal, or on demand.

    ``register()`` installs an atexit handler and signal handlers.
    ``fire()`` runs the callback, then removes every handler it installed and
    restores the handlers that were there before. On a signal the restored
    handler is then invoked so the process behaves as if the hook had never
    been registered (SIGINT still raises KeyboardInterrupt, SIGTERM still
    terminates).
    """

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.fired = False
        self.registered = False
        self._previous: dict[int, object] = {}

    def register(self) -> "ShutdownHook":
        """Install the signal handlers, then the atexit handler.

        Raises:
            ValueError: If called outside the main thread. Nothing stays
                installed in that case.
        """
        if self.registered or self.fired:
            return self
        try:
            for sig in _termination_signals():
                self._previous[sig] = signal.signal(sig, self._on_signal)
        except ValueError:
            self._restore_signals()
            raise
        atexit.register(self.fire)
        self.registered = True
        return self

    def _restore_signals(self):
        for sig, handler in self._previous.items():
            signal.signal(sig, handler)
        self._previous = {}

    def unregister(self):
        """Remove installed handlers, restoring the previous ones."""
        if not self.registered:
            return
        atexit.unregister(self.fire)
        self._restore_signals()
        self.registered = False

    def fire(self):
        """Run the callback once and deregister."""
        if self.fired:
            return
        self.fired = True
        try:
            self.callback()
        finally:
            self.unregister()

    def _on_signal(self, signum: int, frame) -> None:
        previous: Optional[object] = self._previous.get(signum)
        self.fire()
        if callable(previous):
            previous(signum, frame)
        elif previous == signal.SIG_DFL:
            os.kill(os.getpid(), signum)
