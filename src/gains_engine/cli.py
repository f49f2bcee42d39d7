"""Command-line entry point for workout generation and character progression.

Usage:
    python -m gains_engine.cli generate --day upper_push --level advanced --equipment Barbell,Dumbbells
    python -m gains_engine.cli status
    python -m gains_engine.cli log --weight 1200 --exercises 4
    python -m gains_engine.cli grant --strength 5
    python -m gains_engine.cli reset
"""

from __future__ import annotations

import argparse
import logging
import sys

from gains_engine import config
from gains_engine.event_bus import EventBus
from gains_engine.exceptions import GainsEngineError
from gains_engine.models.enums import TIER_DISPLAY_NAMES, WorkoutDay
from gains_engine.models.events import Event
from gains_engine.persistence import JsonCharacterStore
from gains_engine.progression import ProgressionEngine
from gains_engine.serialization import character_to_dict, to_json_string, workout_to_dict
from gains_engine.workout_builder import WorkoutGenerator

logger = logging.getLogger(__name__)


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def _print_event(event: Event) -> None:
    print(f"* {event.name}: {event.payload()}")


def _cmd_generate(args: argparse.Namespace) -> int:
    workout = WorkoutGenerator().generate_workout(args.day, args.equipment, args.level)
    print(to_json_string(workout_to_dict(workout)))
    return 0


def _cmd_status(args: argparse.Namespace, engine: ProgressionEngine) -> int:
    data = character_to_dict(engine.state)
    data["experience_to_next_level"] = engine.state.experience_to_next_level
    print(to_json_string(data))
    return 0


def _cmd_log(args: argparse.Namespace, engine: ProgressionEngine) -> int:
    result = engine.record_workout(args.weight, args.exercises)
    print(f"+{result.experience_gained} XP")
    return 0 if engine.save() else 1


def _cmd_grant(args: argparse.Namespace, engine: ProgressionEngine) -> int:
    if args.xp is not None:
        result = engine.add_experience(args.xp)
    elif args.strength is not None:
        result = engine.add_strength(args.strength)
    else:
        result = engine.add_endurance(args.endurance)
    print(f"+{result.experience_gained} XP")
    return 0 if engine.save() else 1


def _cmd_reset(args: argparse.Namespace, engine: ProgressionEngine) -> int:
    engine.reset()
    return 0 if engine.save() else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gains engine workout generator")
    parser.add_argument(
        "--character-file",
        default=str(config.CHARACTER_FILE),
        help="Path of the saved character JSON",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print a workout for a day as JSON")
    gen.add_argument(
        "--day", required=True, choices=[d.name.lower() for d in WorkoutDay],
    )
    gen.add_argument("--level", default=config.FITNESS_LEVEL, help="Fitness level")
    gen.add_argument(
        "--equipment",
        type=_split_names,
        default=config.EQUIPMENT,
        help="Comma-separated available equipment names",
    )

    sub.add_parser("status", help="Show character level, tier and XP")

    log = sub.add_parser("log", help="Record a completed workout")
    log.add_argument("--weight", type=float, required=True, help="Total weight lifted")
    log.add_argument("--exercises", type=int, required=True, help="Exercises completed")

    grant = sub.add_parser("grant", help="Grant experience or stats")
    group = grant.add_mutually_exclusive_group(required=True)
    group.add_argument("--xp", type=int)
    group.add_argument("--strength", type=int)
    group.add_argument("--endurance", type=int)

    sub.add_parser("reset", help="Reset the character to first use")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        if args.command == "generate":
            return _cmd_generate(args)

        commands = {
            "status": _cmd_status,
            "log": _cmd_log,
            "grant": _cmd_grant,
            "reset": _cmd_reset,
        }
        with EventBus() as bus:
            bus.subscribe_all(_print_event)
            engine = ProgressionEngine(store=JsonCharacterStore(args.character_file), bus=bus)
            engine.load()
            code = commands[args.command](args, engine)
            logger.info(
                "Character at level %d (%s)",
                engine.level, TIER_DISPLAY_NAMES[engine.tier],
            )
            return code
    except GainsEngineError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
