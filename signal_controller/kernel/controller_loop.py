import math
import time
from typing import Callable, Optional

from signal_controller.domain.models import ControllerConfig, Phase, Snapshot
from signal_controller.domain.state import ControllerState
from signal_controller.domain import config, phases
from signal_controller.io.logging_utils import logger

class ControllerLoop:
    """
    Timing authority: the only writer of ``state.phase``.

    Each cycle snapshots the state, reports it, holds the phase in
    ``tick_seconds`` slices and then applies the transition rule.
    """

    def __init__(
        self,
        state: ControllerState,
        cfg: Optional[ControllerConfig] = None,
        reporter=None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Optional[Callable[[float], object]] = None,
        tick_seconds: float = config.TICK_SECONDS,
    ):
        self.state = state
        self.config = cfg or ControllerConfig()
        self.reporter = reporter
        self.clock = clock
        # Default slice waits on the shutdown condition so a quit wakes us early
        self.sleep = sleep or self.state.wait_for_shutdown
        self.tick_seconds = tick_seconds
        self.cycles = 0
        self._start: Optional[float] = None

    def run(self):
        self._start = self.clock()
        logger.info("Controller loop started")
        try:
            while self.state.is_running():
                if not self.run_cycle():
                    break
        finally:
            self.state.request_shutdown()
            logger.info(f"Controller loop stopped after {self.cycles} cycles")

    def run_cycle(self) -> bool:
        if self._start is None:
            self._start = self.clock()

        # 1. Snapshot
        snapshot = self.state.capture(self._elapsed())

        # 2. Report (outside the lock)
        self._publish(snapshot)

        # 3. Hold
        if not self._hold(phases.duration_for(snapshot.phase, self.config)):
            return False

        # 4. Transition
        phase, consumed = self.state.advance()
        self.cycles += 1
        if consumed:
            logger.info(f"Pedestrian request granted from {snapshot.phase.value}")
        elif phase == Phase.NS_GREEN and snapshot.phase == Phase.PED_WALK:
            logger.debug("Walk finished, restarting cycle")
        return True

    def _elapsed(self) -> int:
        return max(0, int(self.clock() - self._start))

    def _publish(self, snapshot: Snapshot):
        if self.reporter is not None:
            self.reporter.report(snapshot)

    def _hold(self, seconds: int) -> bool:
        slices = max(1, math.ceil(seconds / self.tick_seconds))
        for _ in range(slices):
            self.sleep(self.tick_seconds)
            if not self.state.is_running():
                return False
        return True
