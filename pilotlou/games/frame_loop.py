"""
Frame Scheduler - callback-on-next-display-refresh for pygame games.

Games request a callback for the next frame and re-request from inside it
to keep a loop going; cancelling the pending handle stops the loop. The
main loop calls dispatch() once per display refresh, after clock.tick().

Usage:
    scheduler = FrameScheduler()

    def frame():
        simulate()
        draw()
        if still_running:
            scheduler.request_frame(frame)

    handle = scheduler.request_frame(frame)
    ...
    scheduler.cancel_frame(handle)
"""
from typing import Callable, Dict, Optional

from pilotlou.logging import get_logger

log = get_logger('frame_loop')

FrameCallback = Callable[[], None]


class FrameScheduler:
    """Queue of callbacks to run on the next frame.

    Callbacks requested while dispatch() is running are queued for the
    following dispatch, never the current one.
    """

    def __init__(self):
        self._callbacks: Dict[int, FrameCallback] = {}
        self._next_handle = 1
        self._frame_count = 0

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next dispatch."""
        return len(self._callbacks)

    @property
    def frame_count(self) -> int:
        """Number of dispatches that ran at least one callback."""
        return self._frame_count

    def request_frame(self, callback: FrameCallback) -> int:
        """Schedule callback for the next dispatch.

        Returns:
            Handle that can be passed to cancel_frame()
        """
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        log.trace("requested frame %d", handle)
        return handle

    def cancel_frame(self, handle: Optional[int]) -> None:
        """Withdraw a pending callback. Unknown or spent handles are ignored."""
        if handle is not None and self._callbacks.pop(handle, None) is not None:
            log.trace("cancelled frame %d", handle)

    def dispatch(self) -> int:
        """Run every callback queued before this call.

        Returns:
            Number of callbacks run
        """
        if not self._callbacks:
            return 0

        callbacks, self._callbacks = self._callbacks, {}
        self._frame_count += 1
        for callback in callbacks.values():
            callback()
        return len(callbacks)
