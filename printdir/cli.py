"""Command-line front door for printdir.

Parses CLI options, merges them over user config defaults, and renders the
current working directory. ``--use-prev-cmd`` re-parses the command stored in
the tree artifact and runs it in-process.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from . import __version__
from .config import UserDefaults, load_user_defaults
from .console import configure_logging
from .errors import PrintdirError
from .journal import REPLAY_FLAG, build_command_line, journal_path, load_replay_args
from .output import TreeOutput
from .tree import ASCII_GLYPHS, SIBLING_ORDERS, UNICODE_GLYPHS, IgnorePolicy, RenderConfig, render_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="printdir",
        description="Print a tree of the current working directory.",
    )
    parser.add_argument("--no-ignore", action="store_true", help="Don't ignore files.")
    parser.add_argument(
        "--to-file",
        action="store_true",
        help="Also write the tree to dir_tree.txt under the working directory.",
    )
    parser.add_argument(
        REPLAY_FLAG,
        dest="use_prev_cmd",
        action="store_true",
        help=(
            "Run the command stored in dir_tree.txt by a previous --to-file run. "
            "All other flags and options are ignored."
        ),
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        default=-1,
        help="Set recursion depth. A negative value means infinite depth.",
    )
    parser.add_argument("-n", "--name", default=None, help="Label for the root row. Only affects the output.")
    parser.add_argument(
        "--ignore",
        nargs="+",
        action="extend",
        default=[],
        metavar="NAME",
        help="File or directory names to leave out entirely.",
    )
    parser.add_argument(
        "--no-content",
        dest="no_content",
        nargs="+",
        action="extend",
        default=[],
        metavar="NAME",
        help="Directory names to list without their contents.",
    )
    parser.add_argument("--ascii", action="store_true", default=None, help="Use ASCII connector glyphs.")
    parser.add_argument(
        "--no-hidden",
        dest="show_hidden",
        action="store_false",
        default=None,
        help="Hide entries whose names start with a dot.",
    )
    parser.add_argument(
        "--order",
        choices=SIBLING_ORDERS,
        default=None,
        help="Sibling order: 'name' (default) or 'native' (directory scan order, directories reversed).",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        default=None,
        help="Treat links to directories as directories and expand them.",
    )
    parser.add_argument("--strict", action="store_true", help="Abort on the first unreadable directory.")
    parser.add_argument("--time", action="store_true", help="Report how long rendering took.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Also print debug messages.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored message prefixes.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_render_config(args: argparse.Namespace, defaults: UserDefaults) -> RenderConfig:
    """Resolve parsed flags on top of config defaults into one immutable config."""
    policy = IgnorePolicy(
        ignore=frozenset(defaults.ignore) | frozenset(args.ignore),
        no_content=frozenset(defaults.no_content) | frozenset(args.no_content),
        no_ignore=bool(args.no_ignore),
    )
    use_ascii = defaults.ascii if args.ascii is None else bool(args.ascii)
    return RenderConfig(
        policy=policy,
        max_depth=args.depth,
        display_name=args.name or None,
        show_hidden=defaults.show_hidden if args.show_hidden is None else bool(args.show_hidden),
        glyphs=ASCII_GLYPHS if use_ascii else UNICODE_GLYPHS,
        order=args.order or defaults.order,
        follow_symlinks=defaults.follow_symlinks if args.follow_symlinks is None else bool(args.follow_symlinks),
        strict=bool(args.strict),
    )


def run_render(
    args: argparse.Namespace,
    argv: Sequence[str],
    cwd: Path,
    stdout: TextIO | None = None,
) -> int:
    """Render ``cwd`` for already-parsed ``args`` and return the exit status."""
    config = build_render_config(args, load_user_defaults())
    file_path = journal_path(cwd) if args.to_file else None

    logger.debug(
        "Rendering %s (depth=%s, order=%s, follow_symlinks=%s)",
        cwd,
        config.max_depth,
        config.order,
        config.follow_symlinks,
    )
    started = time.perf_counter()
    with TreeOutput(console=stdout, file_path=file_path) as out:
        out.write_file_only(build_command_line(argv))
        written = out.emit_all(render_tree(cwd, config))
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    if args.time:
        logger.info("Finished in %.2f ms (%d entries)", elapsed_ms, max(0, written - 1))
    return 0


def _dispatch(argv: Sequence[str], cwd: Path, stdout: TextIO | None, replaying: bool) -> int:
    args = build_parser().parse_args(list(argv))
    configure_logging(
        no_color=bool(args.no_color),
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    if args.use_prev_cmd and not replaying:
        line, replay_argv = load_replay_args(cwd)
        logger.info("Executing previous command: %s", line)
        return _dispatch(replay_argv, cwd, stdout, replaying=True)

    return run_render(args, argv, cwd, stdout=stdout)


def main(argv: Sequence[str] | None = None, cwd: Path | None = None, stdout: TextIO | None = None) -> int:
    """Parse CLI arguments and print the tree of ``cwd``.

    ``cwd`` and ``stdout`` exist for tests; when omitted the process working
    directory and ``sys.stdout`` are used.
    """
    if argv is None:
        argv = sys.argv[1:]
    if cwd is None:
        cwd = Path.cwd()

    try:
        return _dispatch(argv, cwd, stdout, replaying=False)
    except PrintdirError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
