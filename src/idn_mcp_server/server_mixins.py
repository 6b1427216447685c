"""
Server Lifecycle Mixin classes for IDNMCPServer to separate concerns.
"""

import asyncio
import signal
import sys
from typing import Any


def _shutdown_signals() -> tuple[signal.Signals, ...]:
    if sys.platform == "win32":
        return (signal.SIGINT, signal.SIGBREAK)
    return (signal.SIGINT, signal.SIGTERM)


class ServerLifecycleMixin:
    """Mixin running the FastMCP HTTP transport as a single serve task.

    Shutdown cancels only that task, so other tasks on the event loop are
    left alone.

    Note: This mixin assumes the class has 'server' (FastMCP), 'logger',
    'host' and 'port' attributes available when lifecycle methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    logger: Any  # Logger instance
    host: str
    port: int

    _serve_task: "asyncio.Task[None] | None" = None
    _shutdown_requested: bool = False

    def setup_signal_handlers(self) -> None:
        """Set up signal handlers requesting a graceful shutdown."""
        loop = asyncio.get_running_loop()
        for sig in _shutdown_signals():
            try:
                loop.add_signal_handler(sig, self.request_shutdown, sig)
            except NotImplementedError:
                signal.signal(
                    sig, lambda s, f: loop.call_soon_threadsafe(self.request_shutdown, s)
                )

    def remove_signal_handlers(self) -> None:
        """Remove the handlers installed by setup_signal_handlers()."""
        loop = asyncio.get_running_loop()
        for sig in _shutdown_signals():
            try:
                loop.remove_signal_handler(sig)
            except (NotImplementedError, ValueError):
                pass

    def request_shutdown(self, sig: int) -> None:
        """Cancel the serve task in response to a shutdown signal.

        Args:
            sig: Signal number that triggered the handler
        """
        self.logger.info("Received shutdown signal %s", signal.Signals(sig).name)
        self._shutdown_requested = True
        if self._serve_task is not None:
            self._serve_task.cancel()

    async def start(self, host: str | None = None, port: int | None = None) -> None:
        """Serve MCP over HTTP until a shutdown is requested.

        Args:
            host: The host to bind to. Defaults to the configured server host
            port: The port to listen on. Defaults to the configured server port
        """
        host = host or self.host
        port = port or self.port
        self._shutdown_requested = False
        self.setup_signal_handlers()
        self.logger.info("Starting IDN MCP Server on %s:%d", host, port)
        self._serve_task = asyncio.create_task(
            self.server.run_async(transport="http", host=host, port=port)
        )
        try:
            await self._serve_task
        except asyncio.CancelledError:
            if not self._shutdown_requested:
                raise
        except (OSError, RuntimeError) as e:
            self.logger.error("Error starting server: %s", e)
            raise
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Cancel the serve task, if any, and restore signal handling."""
        self.logger.info("Shutting down IDN MCP Server...")
        self._shutdown_requested = True
        task, self._serve_task = self._serve_task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await asyncio.wait_for(asyncio.gather(task, return_exceptions=True), timeout=5.0)
            except asyncio.TimeoutError:
                self.logger.warning("Timeout waiting for the serve task to stop")
        self.remove_signal_handlers()
        self.logger.info("IDN MCP Server stopped")
