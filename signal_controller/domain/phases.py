"""Phase table: light outputs, hold durations and successors for every phase.

Each table below must cover the whole ``Phase`` enumeration. This is checked
when the module is imported so a new phase cannot fall through to a default.
"""
from typing import Dict, FrozenSet, Tuple

from signal_controller.domain.models import ControllerConfig, Light, LightState, Phase

ALL_RED_PHASES: FrozenSet[Phase] = frozenset({Phase.ALL_RED_1, Phase.ALL_RED_2})

NORMAL_CYCLE: Tuple[Phase, ...] = (
    Phase.NS_GREEN,
    Phase.NS_YELLOW,
    Phase.ALL_RED_1,
    Phase.EW_GREEN,
    Phase.EW_YELLOW,
    Phase.ALL_RED_2,
)

_LIGHTS: Dict[Phase, LightState] = {
    Phase.NS_GREEN: LightState(nsSignal=Light.GREEN, ewSignal=Light.RED),
    Phase.NS_YELLOW: LightState(nsSignal=Light.YELLOW, ewSignal=Light.RED),
    Phase.ALL_RED_1: LightState(nsSignal=Light.RED, ewSignal=Light.RED),
    Phase.EW_GREEN: LightState(nsSignal=Light.RED, ewSignal=Light.GREEN),
    Phase.EW_YELLOW: LightState(nsSignal=Light.RED, ewSignal=Light.YELLOW),
    Phase.ALL_RED_2: LightState(nsSignal=Light.RED, ewSignal=Light.RED),
    Phase.PED_WALK: LightState(nsSignal=Light.RED, ewSignal=Light.RED, walk=True),
}

# Name of the ControllerConfig field holding each phase's duration
_DURATION_FIELDS: Dict[Phase, str] = {
    Phase.NS_GREEN: "nsGreenTime",
    Phase.NS_YELLOW: "nsYellowTime",
    Phase.ALL_RED_1: "allRedTime",
    Phase.EW_GREEN: "ewGreenTime",
    Phase.EW_YELLOW: "ewYellowTime",
    Phase.ALL_RED_2: "allRedTime",
    Phase.PED_WALK: "pedWalkTime",
}

# PED_WALK never appears as a value here; only next_phase() can produce it
_SUCCESSORS: Dict[Phase, Phase] = {
    Phase.NS_GREEN: Phase.NS_YELLOW,
    Phase.NS_YELLOW: Phase.ALL_RED_1,
    Phase.ALL_RED_1: Phase.EW_GREEN,
    Phase.EW_GREEN: Phase.EW_YELLOW,
    Phase.EW_YELLOW: Phase.ALL_RED_2,
    Phase.ALL_RED_2: Phase.NS_GREEN,
    Phase.PED_WALK: Phase.NS_GREEN,  # restart the cycle after a walk
}

_DISPLAY_NAMES: Dict[Phase, str] = {
    Phase.NS_GREEN: "NS_GREEN",
    Phase.NS_YELLOW: "NS_YELLOW",
    Phase.ALL_RED_1: "ALL_RED",
    Phase.EW_GREEN: "EW_GREEN",
    Phase.EW_YELLOW: "EW_YELLOW",
    Phase.ALL_RED_2: "ALL_RED",
    Phase.PED_WALK: "PED_WALK",
}

def _check_exhaustive():
    tables = {
        "lights": _LIGHTS,
        "durations": _DURATION_FIELDS,
        "successors": _SUCCESSORS,
        "display names": _DISPLAY_NAMES,
    }
    for name, table in tables.items():
        missing = [p.value for p in Phase if p not in table]
        if missing:
            raise RuntimeError(f"Phase table '{name}' is missing: {', '.join(missing)}")
    if Phase.PED_WALK in _SUCCESSORS.values():
        raise RuntimeError("PED_WALK must only be entered through the all-red gate")

_check_exhaustive()

def lights_for(phase: Phase) -> LightState:
    return _LIGHTS[phase]

def duration_for(phase: Phase, cfg: ControllerConfig) -> int:
    return getattr(cfg, _DURATION_FIELDS[phase])

def next_normal_phase(phase: Phase) -> Phase:
    return _SUCCESSORS[phase]

def display_name(phase: Phase) -> str:
    return _DISPLAY_NAMES[phase]

def next_phase(phase: Phase, pedestrian_pending: bool) -> Tuple[Phase, bool]:
    """
    Transition rule applied at the end of a phase hold.

    A pending pedestrian request is only granted from an all-red phase.
    Returns the next phase and whether the request was consumed.
    """
    if phase in ALL_RED_PHASES and pedestrian_pending:
        return Phase.PED_WALK, True
    return next_normal_phase(phase), False
