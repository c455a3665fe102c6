"""Register cleanup actions that run when an object is garbage-collected.

A thin wrapper around `weakref.finalize`. The action runs at most once:
either explicitly through `Cleanable.clean`, or when the monitored object is
collected (or at interpreter exit). Failures inside the action are logged
and swallowed.

The action must not hold a reference to the monitored object, otherwise the
object can never be collected.

Example:
    ```py
    cleanable = register(writer, functools.partial(os.remove, temp_path))
    ...
    cleanable.cancel()  # the temp file was published; nothing to clean
    ```
"""

import logging
import weakref
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Cleanable:
    """Handle to a registered cleanup action."""

    def __init__(self, finalizer: weakref.finalize) -> None:
        self._finalizer = finalizer

    @property
    def alive(self) -> bool:
        """Return True while the action is still pending."""
        return self._finalizer.alive

    def clean(self) -> None:
        """Run the action now and unregister it. No effect if already run."""
        self._finalizer()

    def cancel(self) -> None:
        """Unregister the action without running it."""
        self._finalizer.detach()


def register(o: object, action: Callable[[], None]) -> Cleanable:
    """Run ``action`` when ``o`` becomes unreachable.

    Args:
        o: The object to monitor. Must support weak references.
        action: Zero-argument callable; must not reference ``o``.

    Returns:
        Cleanable: Handle that can run the action early or cancel it.

    Raises:
        TypeError: If ``o`` does not support weak references.
    """
    return Cleanable(weakref.finalize(o, _run_quietly, action))


def _run_quietly(action: Callable[[], None]) -> None:
    try:
        action()
    except Exception:  # pylint: disable=broad-except
        logger.warning("Cleanup action %r failed", action, exc_info=True)
