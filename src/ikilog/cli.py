"""Command line entry point for ikilog.

Emits one tagged message through the same pipeline the library uses,
which makes it handy from shell scripts and for checking what a
.ikilog.json does to output:

  ikilog --tag critical -d 2017-May-01 "disk full"
  ikilog -t yellow -d 2017-May-01 --color "cache warmed"
  ikilog --list-tags

Settings come from CLI flags, then .ikilog.json, then
~/.ikilog/config.json (see ikilog.config).
"""

import argparse
import sys

from ikilog._version import BASE_VERSION, PIP_VERSION
from ikilog.config import resolve_config
from ikilog.logger import TaggedLogger
from ikilog.tags import Tag, format_tag_list, parse_tag

# Call site reported for messages emitted from the command line
CLI_FILE = "ikilog"
CLI_FUNCTION = "cli"


def _build_parser():
    """Build the argparse parser."""
    parser = argparse.ArgumentParser(
        prog="ikilog",
        description="ikilog — tagged debug logging",
        epilog="Run 'ikilog --list-tags' to see the available tags.",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"ikilog {BASE_VERSION} ({PIP_VERSION})",
    )
    parser.add_argument("message", nargs="*",
                        help="Message text (a literal \\n starts a new line)")
    parser.add_argument("--tag", "-t", type=parse_tag, default=Tag.NONE,
                        metavar="NAME",
                        help="Tag name or color (default: none)")
    parser.add_argument("--date", "-d", metavar="YYYY-MMM-DD",
                        help="Date the message was written, e.g. 2016-Jul-28")
    parser.add_argument("--prefix", metavar="TEXT",
                        help="Record prefix (default: ikiApps)")
    parser.add_argument("--color", dest="use_color", action="store_const",
                        const=True, default=None,
                        help="Include the tag glyph")
    parser.add_argument("--no-color", dest="use_color", action="store_const",
                        const=False,
                        help="Omit the tag glyph")
    parser.add_argument("--suppress-before", dest="suppress_before_date",
                        metavar="YYYY-MMM-DD",
                        help="Drop non-critical messages dated on or before this")
    parser.add_argument("--disable", dest="enabled", action="store_const",
                        const=False, default=None,
                        help="Turn logging off")
    parser.add_argument("--log-undated", action="store_const", const=True,
                        default=None,
                        help="Emit messages that have no --date")
    parser.add_argument("--crash-reporting", dest="crash_reporting_active",
                        action="store_const", const=True, default=None,
                        help="Also send records to the crash-reporting logger")
    parser.add_argument("--repo-dir", metavar="PATH",
                        help="Directory to search for .ikilog.json")
    parser.add_argument("--list-tags", action="store_true", default=False,
                        help="List tags and exit")
    return parser


def _overrides_from_args(args):
    keys = ("enabled", "suppress_before_date", "prefix", "use_color",
            "log_undated", "crash_reporting_active")
    return {key: getattr(args, key) for key in keys}


def _expand_message(words):
    return " ".join(words).replace("\\n", "\n")


def main(argv=None):
    """Main entry point for the ikilog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 2 = usage error).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    if args.list_tags:
        print(format_tag_list())
        return 0

    if not args.message:
        parser.print_help()
        return 0

    config = resolve_config(_overrides_from_args(args), start_dir=args.repo_dir)
    logger = TaggedLogger(config)
    try:
        logger.emit(args.tag, _expand_message(args.message), args.date,
                    CLI_FILE, CLI_FUNCTION, 0)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
