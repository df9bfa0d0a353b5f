"""MazeCraft CLI entry point.

Provides subcommands for printing a freshly generated maze and for running the
HTTP API. Accepts configuration via flags and environment variables, with
optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
_COLOR_ENABLED = True

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    if not sys.stdout.isatty():  # pragma: no cover - environment dependent
        _COLOR_ENABLED = False
except Exception:  # pragma: no cover
    _COLOR_ENABLED = False


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    MazeCraft perfect maze generator

    Print a randomly carved maze to the terminal or serve mazes over a small
    JSON HTTP API. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_WIDTH      Default maze width for `generate` (2-20, default: 10)
          MAZE_HEIGHT     Default maze height for `generate` (2-20, default: 10)
          MAZE_SEED       Default seed for `generate` (default: random)
          HOST            Bind address for the web server (default: 0.0.0.0)
          PORT            Port for the web server (default: 5000)

        Examples:
          # Print a 10x10 maze
          python run.py generate

          # Reproducible 20x8 maze
          python run.py generate --width 20 --height 8 --seed 42

          # Dump the maze as JSON
          python run.py generate --json

          # Load variables from .env then run the server
          python run.py --env-file .env server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="MazeCraft",
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
        version=f"MazeCraft {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Carve a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Carve a perfect maze and print its ASCII rendering",
    )
    gen_parser.add_argument("--width", type=int, default=None, help="Maze width in cells (default: env MAZE_WIDTH or 10)")
    gen_parser.add_argument(
        "--height", type=int, default=None, help="Maze height in cells (default: env MAZE_HEIGHT or 10)"
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed (default: env MAZE_SEED or random)")
    gen_parser.add_argument("--json", action="store_true", help="Print the maze as JSON instead of text")
    gen_parser.add_argument("--no-color", dest="no_color", action="store_true", help="Disable colored output")
    gen_parser.set_defaults(command="generate")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the maze HTTP API",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask JSON API serving generated mazes",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def _colorize(line: str) -> str:
    from mazecraft.maze import FINISH_GLYPH, START_GLYPH, WALL_GLYPH

    out = []
    for ch in line:
        if ch == WALL_GLYPH:
            out.append(f"{Fore.BLUE}{ch}{Style.RESET_ALL}")
        elif ch == START_GLYPH:
            out.append(f"{Fore.GREEN}{Style.BRIGHT}{ch}{Style.RESET_ALL}")
        elif ch == FINISH_GLYPH:
            out.append(f"{Fore.RED}{Style.BRIGHT}{ch}{Style.RESET_ALL}")
        else:
            out.append(ch)
    return "".join(out)


def run_generate(args: argparse.Namespace) -> int:
    from mazecraft.logging_utils import log
    from mazecraft.maze import Maze, MazeConfig, MazeContractError

    try:
        config = MazeConfig.from_env(width=args.width, height=args.height, seed=args.seed)
    except ValueError as exc:
        print(f"[ERROR] Invalid MAZE_* environment value: {exc}", file=sys.stderr)
        return 2
    try:
        maze = Maze(config)
    except MazeContractError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps(maze.to_dict(), indent=2))
        return 0
    color = _COLOR_ENABLED and not args.no_color
    for line in maze.rows():
        print(_colorize(line) if color else line)
    log.debug(event="printed", seed=maze.seed, width=maze.width, height=maze.height)
    return 0


def run_server(args: argparse.Namespace) -> int:
    from mazecraft.logging_utils import log
    from mazecraft.server import start_server

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", "5000"))
    debug = bool(args.debug or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}MazeCraft API Bootup{Style.RESET_ALL}" if _COLOR_ENABLED else "MazeCraft API Bootup"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "server":
        return run_server(args)
    return run_generate(args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
