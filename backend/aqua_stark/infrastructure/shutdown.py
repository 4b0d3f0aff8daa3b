"""Graceful Shutdown: stop accepting, drain in-flight requests, then exit regardless.

Invariants:
    - The first SIGTERM/SIGINT starts shutdown; later signals are logged and ignored
    - Draining is bounded by timeout_seconds; on timeout shutdown proceeds anyway
      (in-flight requests may be abandoned)
    - Shutdown state lives on the GracefulShutdown instance, never in module globals

Design Decisions:
    - asyncio.wait_for as the timeout race: the drain coroutine is cancelled when the
      deadline wins
    - ManagedServer disables uvicorn's own signal capture so GracefulShutdown is the
      single owner of SIGTERM/SIGINT
"""

import asyncio
import contextlib
import logging
import signal
from enum import Enum
from typing import Awaitable, Callable

import uvicorn

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)


class ShutdownOutcome(str, Enum):
    CLOSED = "closed"
    TIMED_OUT = "timed_out"
    IGNORED = "ignored"
    FAILED = "failed"


class GracefulShutdown:
    """Shutdown context passed to the server runner."""

    def __init__(self, timeout_ms: int):
        self.timeout_seconds = timeout_ms / 1000
        self.is_shutting_down = False
        self.outcome: ShutdownOutcome | None = None

    async def shutdown(
        self, close: Callable[[], Awaitable[None]], signal_name: str,
    ) -> ShutdownOutcome:
        """Run close() against the timeout. Re-entrant calls return IGNORED."""
        if self.is_shutting_down:
            logger.warning(
                "Shutdown already in progress, ignoring signal",
                extra={"signal": signal_name},
            )
            return ShutdownOutcome.IGNORED

        self.is_shutting_down = True
        logger.info(
            f"Received {signal_name}, shutting down gracefully...",
            extra={"signal": signal_name},
        )
        try:
            await asyncio.wait_for(close(), timeout=self.timeout_seconds)
            logger.info("Server closed successfully")
            self.outcome = ShutdownOutcome.CLOSED
        except asyncio.TimeoutError:
            logger.warning(
                f"Shutdown timeout ({int(self.timeout_seconds * 1000)}ms) reached, "
                "forcing shutdown",
            )
            self.outcome = ShutdownOutcome.TIMED_OUT
        except Exception:
            logger.error("Error during graceful shutdown", exc_info=True)
            self.outcome = ShutdownOutcome.FAILED
        logger.info("Shutdown completed")
        return self.outcome

    @property
    def exit_code(self) -> int:
        return 1 if self.outcome is ShutdownOutcome.FAILED else 0


class ManagedServer(uvicorn.Server):
    """uvicorn.Server whose signal handling is delegated to GracefulShutdown."""

    def install_signal_handlers(self) -> None:
        pass

    @contextlib.contextmanager
    def capture_signals(self):
        yield


async def serve(server: uvicorn.Server, shutdown: GracefulShutdown) -> int:
    """Serve until a shutdown signal arrives and the drain finishes or times out.

    Returns the process exit code.
    """
    loop = asyncio.get_running_loop()
    serve_task = asyncio.create_task(server.serve())
    stop_requested = asyncio.Event()
    shutdown_task: asyncio.Task | None = None

    async def close() -> None:
        server.should_exit = True
        # shield: a timed-out drain must not cancel the server task itself
        await asyncio.shield(serve_task)

    def on_signal(sig: signal.Signals) -> None:
        nonlocal shutdown_task
        task = asyncio.ensure_future(shutdown.shutdown(close, sig.name))
        if shutdown_task is None:
            shutdown_task = task
            stop_requested.set()

    for sig in SHUTDOWN_SIGNALS:
        loop.add_signal_handler(sig, on_signal, sig)
    logger.info("Graceful shutdown handlers registered")

    stop_wait = asyncio.create_task(stop_requested.wait())
    try:
        await asyncio.wait(
            {serve_task, stop_wait}, return_when=asyncio.FIRST_COMPLETED,
        )
        if shutdown_task is not None:
            await shutdown_task
    finally:
        stop_wait.cancel()
        for sig in SHUTDOWN_SIGNALS:
            loop.remove_signal_handler(sig)

    if not serve_task.done():
        server.force_exit = True
        serve_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await serve_task
    elif shutdown_task is None:
        # Server stopped on its own (e.g. startup failure)
        serve_task.result()
        return 0 if server.started else 1
    return shutdown.exit_code
