from typing import Any, Dict
from signal_controller.domain.models import Snapshot
from signal_controller.domain import phases

class SnapshotBuilder:
    def build(self, snapshot: Snapshot) -> Dict[str, Any]:
        lights = phases.lights_for(snapshot.phase)
        return {
            "tick": snapshot.elapsedTick,
            "phase": phases.display_name(snapshot.phase),
            "ns": lights.nsSignal.value,
            "ew": lights.ewSignal.value,
            "walk": lights.walk,
            "pedestrianPending": snapshot.pedestrianPending,
        }
