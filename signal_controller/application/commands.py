from abc import ABC, abstractmethod
from typing import Any

from signal_controller.io.logging_utils import logger

QUIT_WORDS = ("q", "quit", "exit")

class Command(ABC):
    @abstractmethod
    def execute(self, state: Any):
        pass

class PedestrianRequestCommand(Command):
    def execute(self, state: Any):
        if state.request_pedestrian():
            logger.info("[input] Pedestrian request queued.")
        else:
            logger.info("[input] Pedestrian request already pending.")

class ShutdownCommand(Command):
    def execute(self, state: Any):
        state.request_shutdown()
        logger.info("[input] Shutdown requested.")

class IgnoredCommand(Command):
    def __init__(self, line: str):
        self.line = line

    def execute(self, state: Any):
        # Empty lines are dropped silently
        if self.line:
            logger.warning(f"[input] Unknown command '{self.line}'. Use 'p' or 'q'.")

def parse_command(line: str) -> Command:
    text = line.strip()
    word = text.lower()
    if word == "p":
        return PedestrianRequestCommand()
    if word in QUIT_WORDS:
        return ShutdownCommand()
    return IgnoredCommand(text)
