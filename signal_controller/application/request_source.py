import sys
from typing import Iterable, Optional, TextIO

from signal_controller.application.commands import parse_command
from signal_controller.domain.state import ControllerState

CONTROLS = (
    "\nControls:\n"
    "  p + Enter : request pedestrian WALK\n"
    "  q + Enter : quit\n"
)

class RequestSource:
    """Console input loop. Turns lines into commands against the shared state."""

    def __init__(self, state: ControllerState, stream: Optional[Iterable[str]] = None, out: Optional[TextIO] = None):
        self.state = state
        self.stream = stream if stream is not None else sys.stdin
        self.out = out if out is not None else sys.stdout

    def run(self):
        print(CONTROLS, file=self.out, flush=True)
        try:
            for line in self.stream:
                if not self.state.is_running():
                    break
                parse_command(line).execute(self.state)
                if not self.state.is_running():
                    break
        finally:
            # End of input means nobody can ask us to stop any more
            self.state.request_shutdown()
