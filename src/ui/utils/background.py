"""Task runners that execute service calls for UI components.

A runner takes a zero-argument ``work`` callable plus success and error
callbacks. The callbacks always run on the thread that owns the UI state:

- BackgroundTaskRunner runs ``work`` on a daemon thread and hands the outcome
  back to the Tk main loop with ``widget.after(0, ...)``, keeping the window
  responsive while a request is in flight.
- ImmediateTaskRunner runs everything inline. Tests and headless callers
  use it.
"""

import logging
import threading
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class TaskRunner(Protocol):
    """Interface shared by all task runners."""

    def submit(
        self,
        work: Callable[[], Any],
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        ...


class ImmediateTaskRunner:
    """Run work synchronously on the calling thread."""

    def submit(
        self,
        work: Callable[[], Any],
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        try:
            result = work()
        except Exception as e:
            on_error(e)
            return
        on_success(result)


class BackgroundTaskRunner:
    """
    Run work on a daemon thread and deliver results on the Tk main loop.

    Args:
        widget: Any Tk widget; its ``after`` schedules callbacks on the UI thread
    """

    def __init__(self, widget):
        self.widget = widget

    def submit(
        self,
        work: Callable[[], Any],
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        thread = threading.Thread(
            target=self._execute,
            args=(work, on_success, on_error),
            daemon=True,
        )
        thread.start()

    def _execute(
        self,
        work: Callable[[], Any],
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        """Execute work in the background thread."""
        try:
            result = work()
        except Exception as e:
            self._deliver(on_error, e)
            return
        self._deliver(on_success, result)

    def _deliver(self, callback: Callable[[Any], None], value: Any) -> None:
        try:
            self.widget.after(0, callback, value)
        except RuntimeError:
            # Main loop already gone (window closed mid-request)
            logger.debug("Dropping task result: UI main loop is not running")
