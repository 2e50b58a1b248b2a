from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from signal_controller.domain import config

class Light(str, Enum):
    RED = "RED"
    YELLOW = "YELLOW"
    GREEN = "GREEN"

class Phase(str, Enum):
    NS_GREEN = "NS_GREEN"
    NS_YELLOW = "NS_YELLOW"
    ALL_RED_1 = "ALL_RED_1"  # before EW service
    EW_GREEN = "EW_GREEN"
    EW_YELLOW = "EW_YELLOW"
    ALL_RED_2 = "ALL_RED_2"  # before NS service
    PED_WALK = "PED_WALK"

class LightState(BaseModel):
    model_config = ConfigDict(frozen=True)

    nsSignal: Light
    ewSignal: Light
    walk: bool = False

class ControllerConfig(BaseModel):
    """Hold durations in whole seconds. No other options are recognized."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    nsGreenTime: int = Field(default=config.NS_GREEN_TIME, gt=0, strict=True)
    nsYellowTime: int = Field(default=config.NS_YELLOW_TIME, gt=0, strict=True)
    allRedTime: int = Field(default=config.ALL_RED_TIME, gt=0, strict=True)
    ewGreenTime: int = Field(default=config.EW_GREEN_TIME, gt=0, strict=True)
    ewYellowTime: int = Field(default=config.EW_YELLOW_TIME, gt=0, strict=True)
    pedWalkTime: int = Field(default=config.PED_WALK_TIME, gt=0, strict=True)

class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: Phase
    pedestrianPending: bool
    elapsedTick: int = Field(default=0, ge=0)
