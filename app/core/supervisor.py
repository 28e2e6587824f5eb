from __future__ import annotations

import asyncio
import logging
import os
import sys
import threading
from types import TracebackType
from typing import Any, Callable

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


class ProcessSupervisor:
    """Logs errors that escaped every handler and exits with status 1.

    Covers the main thread, worker threads and asyncio tasks whose exception
    nobody retrieved; an external supervisor restarts the process.
    """

    def __init__(self, exit_func: Callable[[int], Any] = os._exit) -> None:
        # os._exit: sys.exit from a hook or loop callback would be swallowed.
        self._exit = exit_func

    def install(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        sys.excepthook = self.handle_uncaught_exception
        threading.excepthook = self.handle_thread_exception
        if loop is not None:
            loop.set_exception_handler(self.handle_loop_exception)

    def fatal(self, message: str, exc_info: Any = None) -> None:
        logger.critical(message, exc_info=exc_info)
        for handler in logging.getLogger().handlers:
            handler.flush()
        self._exit(EXIT_FAILURE)

    def handle_uncaught_exception(
        self,
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc, tb)
            return
        self.fatal("Uncaught exception", exc_info=(exc_type, exc, tb))

    def handle_thread_exception(self, args: threading.ExceptHookArgs) -> None:
        if args.exc_type is SystemExit:
            return
        name = args.thread.name if args.thread else "unknown"
        self.fatal(
            f"Uncaught exception in thread {name}",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    def handle_loop_exception(
        self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]
    ) -> None:
        exc = context.get("exception")
        message = context.get("message", "Unhandled error in event loop")
        if exc is None:
            # Warnings such as unclosed transports carry no exception.
            loop.default_exception_handler(context)
            return
        self.fatal(
            f"Unhandled task exception: {message}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
