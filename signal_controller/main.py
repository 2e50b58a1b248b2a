import argparse
import logging
import sys
import threading
from typing import List, Optional

from pydantic import ValidationError

from signal_controller.application.reporter import StatusReporter
from signal_controller.application.request_source import RequestSource
from signal_controller.domain.graph import build_phase_graph
from signal_controller.domain.models import ControllerConfig, Phase
from signal_controller.domain.state import ControllerState
from signal_controller.domain import config, phases
from signal_controller.io.logging_utils import setup_logging, logger
from signal_controller.kernel.controller_loop import ControllerLoop

# CLI flag -> ControllerConfig field
TIMING_FLAGS = {
    "ns_green": "nsGreenTime",
    "ns_yellow": "nsYellowTime",
    "all_red": "allRedTime",
    "ew_green": "ewGreenTime",
    "ew_yellow": "ewYellowTime",
    "ped_walk": "pedWalkTime",
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signal-controller",
        description="Two-direction traffic signal controller with pedestrian WALK requests.",
    )
    parser.add_argument("--ns-green", type=int, default=config.NS_GREEN_TIME, help="NS green hold [s]")
    parser.add_argument("--ns-yellow", type=int, default=config.NS_YELLOW_TIME, help="NS yellow hold [s]")
    parser.add_argument("--all-red", type=int, default=config.ALL_RED_TIME, help="all-red clearance hold [s]")
    parser.add_argument("--ew-green", type=int, default=config.EW_GREEN_TIME, help="EW green hold [s]")
    parser.add_argument("--ew-yellow", type=int, default=config.EW_YELLOW_TIME, help="EW yellow hold [s]")
    parser.add_argument("--ped-walk", type=int, default=config.PED_WALK_TIME, help="pedestrian WALK hold [s]")
    parser.add_argument("--describe", action="store_true", help="print the phase cycle and exit")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="diagnostic log level",
    )
    return parser

def config_from_args(args: argparse.Namespace) -> ControllerConfig:
    return ControllerConfig(**{field: getattr(args, flag) for flag, field in TIMING_FLAGS.items()})

def describe(cfg: ControllerConfig, out=None):
    out = out if out is not None else sys.stdout
    pg = build_phase_graph(cfg)
    for phase in pg.normal_cycle():
        print(f"{phase.value:<10} {phases.duration_for(phase, cfg):>3}s -> {phases.next_normal_phase(phase).value}", file=out)
    walk_from = ", ".join(sorted(p.value for p in pg.predecessors(Phase.PED_WALK)))
    print(f"PED_WALK   {cfg.pedWalkTime:>3}s (from {walk_from}) -> NS_GREEN", file=out)
    print(f"Cycle length: {pg.cycle_length()}s", file=out)

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        cfg = config_from_args(args)
    except ValidationError as e:
        parser.error(str(e))

    if args.describe:
        describe(cfg)
        return 0

    state = ControllerState()
    controller = ControllerLoop(state, cfg, reporter=StatusReporter())
    source = RequestSource(state)

    controller_thread = threading.Thread(target=controller.run, name="controller")
    # Input blocks on stdin; it must not keep the process alive
    input_thread = threading.Thread(target=source.run, name="input", daemon=True)

    controller_thread.start()
    input_thread.start()

    try:
        state.wait_for_shutdown()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        state.request_shutdown()
        controller_thread.join(timeout=config.JOIN_TIMEOUT)

    print("Shutting down cleanly.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
