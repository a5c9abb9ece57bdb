"""Cancellation token shared by the reader, the workers, and the coordinator."""

import threading
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class CancellationToken:
    """
    Per-run, thread-safe cancellation flag.
    
    One token is created for each match run and handed to every task of
    that run:
    - the coordinator calls `cancel()` on the first match or on failure
    - the reader checks `is_cancelled()` between queue puts
    - workers check `is_cancelled()` between queue gets
    
    Cancelling is idempotent: calling `cancel()` again has no additional
    effect, and the first reason is kept.
    
    Example:
        token = CancellationToken()
        token.cancel("match found")
        assert token.is_cancelled()
    """
    
    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: Optional[str] = None
        self._lock = threading.Lock()
    
    def cancel(self, reason: str = "cancelled") -> None:
        """Mark the run as cancelled."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()
        logger.debug(f"Run cancelled: {reason}")
    
    def is_cancelled(self) -> bool:
        """
        Check if the run is cancelled.
        
        Returns:
            True if cancelled, False otherwise.
        """
        return self._event.is_set()
    
    @property
    def reason(self) -> Optional[str]:
        """Reason given to the first `cancel()` call, if any."""
        return self._reason
    
    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or timeout; returns the cancelled state."""
        return self._event.wait(timeout)
