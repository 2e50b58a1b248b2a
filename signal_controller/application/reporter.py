import sys
from typing import Optional, TextIO

from signal_controller.domain.models import Snapshot
from signal_controller.kernel.snapshot_builder import SnapshotBuilder

_builder = SnapshotBuilder()

def format_status(snapshot: Snapshot) -> str:
    view = _builder.build(snapshot)
    return (
        f"[t={view['tick']}s] "
        f"Phase={view['phase']}"
        f" | NS={view['ns']}"
        f" | EW={view['ew']}"
        f" | WALK={'ON' if view['walk'] else 'OFF'}"
        f" | PedReq={'YES' if view['pedestrianPending'] else 'NO'}"
    )

class StatusReporter:
    def __init__(self, out: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout

    def report(self, snapshot: Snapshot):
        print(format_status(snapshot), file=self.out, flush=True)
