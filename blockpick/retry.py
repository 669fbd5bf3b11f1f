"""
Retry Controller
================
Decides whether a failed pick or place attempt is repeated.

Auto mode waits a fixed delay and always retries. Manual mode blocks on an
operator response. Both waits end early only on process shutdown.
"""

import sys
import threading
from typing import Callable, Optional


AUTO = "auto"
MANUAL = "manual"


def _read_stdin_line() -> str:
    return sys.stdin.readline()


class RetryController:
    """
    Two-mode retry policy.

    Auto mode has no attempt cap unless max_attempts is set; the loop is
    expected to be stopped by an operator or watchdog.
    """

    def __init__(self, mode: str = AUTO, auto_delay_sec: int = 4,
                 max_attempts: Optional[int] = None,
                 shutdown_event: Optional[threading.Event] = None,
                 read_response: Optional[Callable[[], str]] = None):
        """
        Args:
            mode: "auto" or "manual"
            auto_delay_sec: Seconds to wait before an automatic retry
            max_attempts: Failures allowed before giving up (None = unbounded)
            shutdown_event: Process shutdown flag; cancels waits
            read_response: Returns one operator response line ('' on EOF)
        """
        if mode not in (AUTO, MANUAL):
            raise ValueError(f"Invalid retry mode: {mode}")
        if int(auto_delay_sec) < 0:
            raise ValueError(f"auto_delay_sec must be >= 0, got {auto_delay_sec}")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

        self.mode = mode
        self.auto_delay_sec = int(auto_delay_sec)
        self.max_attempts = max_attempts
        self.shutdown_event = shutdown_event or threading.Event()
        self.read_response = read_response or _read_stdin_line
        self.failures = 0

    def reset(self) -> None:
        """Start counting failures for a new retry loop."""
        self.failures = 0

    def should_retry(self) -> bool:
        """
        Called after a failed attempt.

        Returns:
            True to repeat the attempt, False to give up
        """
        if self.shutdown_event.is_set():
            return False

        self.failures += 1
        if self.max_attempts is not None and self.failures >= self.max_attempts:
            print(f"[RETRY] Giving up after {self.failures} failed attempts")
            return False

        if self.mode == AUTO:
            print(f"[RETRY] Auto-retrying in {self.auto_delay_sec} seconds")
            # wait() returns True only if shutdown was requested meanwhile
            if self.shutdown_event.wait(self.auto_delay_sec):
                return False
            return True

        print("[RETRY] Retry? (y/n)")
        response = self.read_response() or ""
        if self.shutdown_event.is_set():
            return False
        return response.strip()[:1] != "n"
