import threading
from typing import Optional, Tuple

from signal_controller.domain.models import Phase, Snapshot
from signal_controller.domain import phases

class ControllerState:
    """
    Shared state between the timing authority and the request source.

    Every read or write of phase and pedestrian_pending happens under one
    lock. The shutdown condition shares that lock so waiters wake as soon as
    running goes false.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._shutdown = threading.Condition(self._lock)

        self.phase: Phase = Phase.NS_GREEN
        self.pedestrian_pending: bool = False
        self.running: bool = True
        self.elapsed_tick: int = 0

    def is_running(self) -> bool:
        with self._lock:
            return self.running

    def request_pedestrian(self) -> bool:
        """Set the single-slot request flag. Returns False if it was already set."""
        with self._lock:
            if self.pedestrian_pending:
                return False
            self.pedestrian_pending = True
            return True

    def request_shutdown(self):
        with self._shutdown:
            self.running = False
            self._shutdown.notify_all()

    def wait_for_shutdown(self, timeout: Optional[float] = None) -> bool:
        with self._shutdown:
            return self._shutdown.wait_for(lambda: not self.running, timeout)

    def capture(self, elapsed_tick: int) -> Snapshot:
        with self._lock:
            if elapsed_tick > self.elapsed_tick:
                self.elapsed_tick = elapsed_tick
            return Snapshot(
                phase=self.phase,
                pedestrianPending=self.pedestrian_pending,
                elapsedTick=self.elapsed_tick,
            )

    def advance(self) -> Tuple[Phase, bool]:
        # Gate check and request consumption are one atomic step
        with self._lock:
            nxt, consumed = phases.next_phase(self.phase, self.pedestrian_pending)
            if consumed:
                self.pedestrian_pending = False
            self.phase = nxt
            return nxt, consumed
