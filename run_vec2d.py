from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys

from vec2d import *


def parse_config_overrides(overrides: list[str]) -> dict[str, str]:
    parsed = {}

    for override in overrides:
        if "=" not in override:
            raise ValueError(f"Invalid config override {override!r}. "
                             f"Use the form option=value, e.g. angles.unit=degrees")

        option, value = override.split("=", maxsplit=1)

        parsed[option.strip()] = value.strip()

    return parsed


def load_config(filepath: str, overrides: list[str]) -> Config:
    if os.path.exists(filepath):
        config = Config.from_filepath(filepath)
    else:
        logging.info(f"Config file {filepath!r} not found, using defaults.")
        config = Config()

    for option, value in parse_config_overrides(overrides).items():
        if "." not in option:
            raise ValueError(f"Invalid config option {option!r}. Use the form section.key, e.g. angles.unit")

        section, key = option.split(".", maxsplit=1)

        try:
            config.import_option(section, key, value)
        except KeyError as e:
            raise ValueError(f"Invalid config option {e.args[0]!r}.") from e

    config.validate()

    for field in dataclasses.fields(config):
        section, key = Config.get_section_and_key(field.name)
        logging.debug(f"{section}.{key} = {Config.value_to_str(getattr(config, field.name))}")

    return config


def print_vector(config: Config, label: str, vector: Vector2D):
    if config.output_show_repr:
        print(f"{label}: {vector} {vector!r}")
    else:
        print(f"{label}: {vector}")


def print_angle(config: Config, label: str, angle: float):
    print(f"{label}: {config.from_radians(angle):g}")


def run_command(args: argparse.Namespace, config: Config):
    if args.command == "info":
        vector = Vector2D(args.x, args.y)
        print_vector(config, "vector", vector)
        print(f"magnitude: {vector.magnitude():g}")
        print_angle(config, "angle", vector.angle())

    elif args.command == "polar":
        vector = Vector2D.from_polar(config.to_radians(args.angle), args.magnitude)
        print_vector(config, "vector", vector)

    elif args.command == "rotate":
        angle = config.to_radians(args.angle)
        vector = Vector2D(args.x, args.y)
        if args.cw:
            vector >>= angle
        else:
            vector <<= angle
        print_vector(config, "vector", vector)

    elif args.command == "normalize":
        vector = Vector2D(args.x, args.y)
        if vector.magnitude() == 0:
            raise ValueError("Cannot normalize the zero vector.")
        print_vector(config, "vector", vector.normalize())

    elif args.command == "dot":
        print(f"dot: {dot(Vector2D(args.x1, args.y1), Vector2D(args.x2, args.y2)):g}")

    elif args.command == "between":
        legacy_grouping = args.legacy_grouping or config.angles_legacy_grouping
        angle = angle_between(Vector2D(args.x1, args.y1), Vector2D(args.x2, args.y2),
                              legacy_grouping=legacy_grouping)
        print_angle(config, "angle", angle)

    else:
        raise ValueError(f"Unknown command {args.command!r}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate 2D vector operations.")
    parser.add_argument("--config", "-c", type=str, default="config.ini",
                        help="Path to the config file. (default: config.ini)")
    parser.add_argument("--config-override", "--override", "-o", action="append",
                        help="Override a config option. Use the form option=value, e.g. angles.unit=degrees.")
    parser.add_argument("--loglevel", "--log", "-l", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])

    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="Show magnitude and angle of a vector.")
    info.add_argument("x", type=float)
    info.add_argument("y", type=float)

    polar = commands.add_parser("polar", help="Build a vector from polar coordinates.")
    polar.add_argument("angle", type=float)
    polar.add_argument("magnitude", type=float)

    rotate = commands.add_parser("rotate", help="Rotate a vector, counter-clockwise unless --cw is given.")
    rotate.add_argument("x", type=float)
    rotate.add_argument("y", type=float)
    rotate.add_argument("angle", type=float)
    rotate.add_argument("--cw", action="store_true", help="Rotate clockwise.")

    normalize = commands.add_parser("normalize", help="Scale a vector to unit length.")
    normalize.add_argument("x", type=float)
    normalize.add_argument("y", type=float)

    for name, help_ in ("dot", "Dot product of two vectors."), ("between", "Angle between two vectors."):
        pair = commands.add_parser(name, help=help_)
        pair.add_argument("x1", type=float)
        pair.add_argument("y1", type=float)
        pair.add_argument("x2", type=float)
        pair.add_argument("y2", type=float)

        if name == "between":
            pair.add_argument("--legacy-grouping", action="store_true",
                              help="Evaluate the cosine as (dot / m1) * m2.")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.loglevel, style="{", format=f"[{{name}}] {{levelname}}: {{message}}",
                        stream=sys.stdout)

    config = load_config(args.config, args.config_override or [])

    run_command(args, config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
