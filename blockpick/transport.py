"""
Signal Transport
================
Payload-free topic signals that trigger a cycle and report its completion.

PickPlaceNode admits one cycle at a time: a trigger that arrives while a
cycle is running is rejected rather than queued.
"""

import threading
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from .context import OrchestrationContext
from .orchestrator import CycleResult, PickPlaceOrchestrator


class SignalBus:
    """In-process publish/subscribe for empty signals."""

    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[], None]]] = defaultdict(list)
        self._lock = threading.Lock()
        self.publish_counts: Dict[str, int] = defaultdict(int)

    def subscribe(self, topic: str, callback: Callable[[], None]) -> None:
        with self._lock:
            self._subscribers[topic].append(callback)

    def publish(self, topic: str) -> None:
        """Deliver the signal to every subscriber, in the caller's thread."""
        with self._lock:
            callbacks = list(self._subscribers[topic])
            self.publish_counts[topic] += 1
        for callback in callbacks:
            callback()


class PickPlaceNode:
    """
    Runs one pick-place cycle per trigger signal.

    Subscribes to config.trigger_topic and publishes config.done_topic when
    each cycle completes.
    """

    def __init__(self, context: OrchestrationContext, bus: SignalBus):
        self.ctx = context
        self.bus = bus
        self.orchestrator = PickPlaceOrchestrator(context, on_complete=self._publish_done)

        self._admission = threading.Lock()
        self.results: List[CycleResult] = []
        self.rejected_triggers = 0

        bus.subscribe(context.config.trigger_topic, self.on_trigger)

    def on_trigger(self) -> Optional[CycleResult]:
        """
        Handle a trigger signal.

        Returns:
            The cycle result, or None if a cycle was already running
        """
        if not self._admission.acquire(blocking=False):
            self.rejected_triggers += 1
            print("[NODE] Trigger ignored: a pick-place cycle is already running")
            self.ctx.log_event('trigger_rejected', {'rejected_total': self.rejected_triggers})
            return None
        try:
            result = self.orchestrator.run()
            self.results.append(result)
            return result
        finally:
            self._admission.release()

    @property
    def busy(self) -> bool:
        return self._admission.locked()

    def spin(self, timeout: Optional[float] = None) -> None:
        """Block until shutdown is requested (or timeout elapses)."""
        print(f"[NODE] Waiting for triggers on {self.ctx.config.trigger_topic}")
        self.ctx.shutdown_event.wait(timeout)

    def shutdown(self) -> None:
        """Request shutdown; pending retry waits return immediately."""
        self.ctx.shutdown_event.set()

    def _publish_done(self) -> None:
        self.bus.publish(self.ctx.config.done_topic)
