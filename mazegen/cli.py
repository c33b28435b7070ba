"""Command-line interface for the arcade maze generator.

Generates one left-right symmetric maze and prints it. The random source is
picked from CLI flags or environment variables, with optional .env loading.

Run `mazegen --help` (or `python run.py --help` from a checkout) for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from mazegen import __version__
from mazegen.logging_utils import log
from mazegen.maze import MazeConfig, TemplateError, generate_from_config, render_color, render_text
from mazegen.maze.config import parse_seed
from mazegen.maze.tiles import FLOOR_GLYPH, WALL_GLYPH


def _color_enabled() -> bool:
    # Disable colors if output is not a real terminal (e.g., during pytest capture)
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - closed or replaced stdout
        return False


def seed_value(text: str) -> int:
    try:
        return parse_seed(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"seed must be an integer, got {text!r}") from None


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Arcade Maze Generator

    Carve a random wall layout into the left half of a board template and
    mirror it into a full, left-right symmetric maze. Configuration can be
    provided via CLI flags or environment variables. If both are present, CLI
    flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_SEED            Integer seed for the deterministic PCG source
          MAZE_STAMP           HH:MM:SS stamp folded into a seed when no seed is given
          MAZE_USE_ENTROPY     1 to use the system entropy source (not reproducible)
          MAZE_ENABLE_METRICS  0 to skip generation metrics
          MAZE_TEMPLATE        Path to a board template file
          MAZEGEN_LOG_LEVEL    debug|info|warn|error (default: warn)
          MAZEGEN_LOG_JSON     1 to emit JSON log records

        Examples:
          # Reproducible maze
          python run.py --seed 42

          # Same maze the 12:34:56 stamp would build
          python run.py --stamp 12:34:56

          # Fresh maze every time, colored cells
          python run.py --entropy --color

          # Custom half-board template (| wall, . floor)
          python run.py --template board.txt --width 14 --height 27
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazegen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Arcade Maze Generator {__version__}",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seed", type=seed_value, default=None, help="Seed for the PCG source (decimal or 0x...)")
    source.add_argument("--stamp", default=None, help="HH:MM:SS stamp folded into a PCG seed")
    source.add_argument(
        "--entropy",
        action="store_true",
        default=None,
        help="Use the system entropy source (output is not reproducible)",
    )

    parser.add_argument("--template", default=None, help="Path to a half-board template file")
    parser.add_argument("--width", type=int, default=None, help="Template width in tiles (default: 16)")
    parser.add_argument("--height", type=int, default=None, help="Template height in tiles (default: 31)")
    parser.add_argument(
        "--color",
        action="store_true",
        help="Paint tiles with terminal colors (cannot be combined with glyph flags)",
    )
    parser.add_argument("--wall-glyph", dest="wall_glyph", default=None, help="Glyph for wall tiles (plain output)")
    parser.add_argument("--floor-glyph", dest="floor_glyph", default=None, help="Glyph for floor tiles (plain output)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Print the maze only, no banner")

    args = parser.parse_args(argv)
    if args.color and (args.wall_glyph is not None or args.floor_glyph is not None):
        parser.error("--color paints cells and cannot be combined with --wall-glyph/--floor-glyph")
    return args


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    color = _color_enabled()
    if color:
        _color_init()

    try:
        config = MazeConfig.from_env(
            seed=args.seed,
            stamp=args.stamp,
            entropy=args.entropy,
            width=args.width,
            height=args.height,
        )
        # An explicit source flag beats whatever the environment selected
        if args.stamp:
            config.seed = None
            config.entropy = False
        elif args.seed is not None:
            config.entropy = False
        if args.template:
            if not os.path.exists(args.template):
                print(f"[ERROR] File not found: {args.template}")
                return 1
            with open(args.template, "r", encoding="utf-8") as f:
                config.template = f.read()
        full, metrics = generate_from_config(config)
    except (TemplateError, ValueError, OSError) as exc:
        log.error(event="generate_failed", error=str(exc))
        print(f"[ERROR] {exc}")
        return 1

    if not args.quiet:
        if config.entropy:
            source_desc = "entropy"
        elif config.seed is not None:
            source_desc = f"seed {config.seed}"
        else:
            source_desc = f"stamp {config.stamp or 'build'}"
        title = f"{Fore.CYAN}{Style.BRIGHT}Arcade Maze Generator{Style.RESET_ALL}" if color else "Arcade Maze Generator"

        def label(text: str) -> str:
            return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

        def value(val: str | int | float) -> str:
            return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

        divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
        lines = [
            divider,
            f"  {title}",
            divider,
            f"  {label('Source:'):12} {value(source_desc)}",
            f"  {label('Size:'):12} {value(f'{full.width}x{full.height}')}",
        ]
        if metrics:
            lines.append(f"  {label('Runs:'):12} {value(metrics['runs'])}")
            lines.append(f"  {label('Runtime:'):12} {value(str(metrics['runtime_ms']) + ' ms')}")
        lines.extend([divider, ""])
        print("\n".join(lines))

    if args.color and color:
        sys.stdout.write(render_color(full))
    else:
        sys.stdout.write(render_text(full, wall=args.wall_glyph or WALL_GLYPH, floor=args.floor_glyph or FLOOR_GLYPH))
    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
