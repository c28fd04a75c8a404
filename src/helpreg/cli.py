"""Main CLI entry point for helpreg.

Two-pass argument parsing:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: dispatch to a subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  helpreg -v show json          # works
  helpreg show json -v          # also works

Subcommands self-register via the register(subparsers, parents) convention.
"""

import argparse
import sys

from helpreg._version import BASE_VERSION, VERSION


# ---------------------------------------------------------------------------
# Global flags (can precede or follow the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.helpreg/config.json)"},
}


def _global_kwargs(kwargs):
    return {k: v for k, v in kwargs.items() if k != "aliases"}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        global_parser.add_argument(flag, *kwargs.get("aliases", []),
                                   **_global_kwargs(kwargs))
    return global_parser.parse_known_args(argv)


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for import and provider flags."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--path", metavar="DIR", action="append", default=None,
                        help="Prepend DIR to the import path (repeatable)")
    common.add_argument("--extension", dest="extensions", metavar="MODULE",
                        action="append", default=None,
                        help="Enable a reflection backend help provider (repeatable)")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in helpreg.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command, return an exit code
    """
    from helpreg.commands import html, show
    return [show, html]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="helpreg",
        description="helpreg — runtime documentation registry",
        epilog=(
            "Run 'helpreg <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"helpreg {BASE_VERSION} ({VERSION})",
    )

    # Global flags on the main parser too, for --help display
    for flag, kwargs in GLOBAL_FLAGS.items():
        parser.add_argument(flag, *kwargs.get("aliases", []), **_global_kwargs(kwargs))

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


def _prepare_environment(args):
    """Apply --path entries and enable configured help providers."""
    from helpreg import help as helper
    from helpreg.config import resolve_config
    from helpreg.lib.help_lib import HelpConfigError
    from helpreg.output import print_warn

    for entry in reversed(args.path or []):
        if entry not in sys.path:
            sys.path.insert(0, entry)

    cfg = resolve_config(args)
    for module in cfg["extensions"] or []:
        try:
            helper.enable_type_info(module)
        except HelpConfigError as e:
            print_warn(str(e))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the helpreg CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    from helpreg.channels import configure_helpreg_channels
    from helpreg.lib.log_lib import format_channel_list, init_output
    configure_helpreg_channels()

    # Bare --show lists channels and exits
    if global_args.show and None in global_args.show:
        print(format_channel_list())
        return 0

    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print(f"  ERROR: bad --show spec: {e}", file=sys.stderr)
        return 2
    import helpreg.hints  # noqa: F401 — register helpreg hints

    # Pass 2: subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if getattr(args, key, None) is None:
            setattr(args, key, value)

    _prepare_environment(args)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
