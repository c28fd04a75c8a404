"""helpreg show — print help for importable objects.

Each TARGET is imported and passed to the help facade, exactly as if
``help(obj)`` had been called in an interactive session::

    helpreg show json json:dumps
    helpreg show mypkg.handlers:Router.dispatch
"""

import argparse

from helpreg.lib.log_lib import get_output
from helpreg.output import print_error
from helpreg.targets import TargetError, resolve_target


def register(subparsers, parents):
    """Register the 'show' subcommand."""
    p = subparsers.add_parser(
        "show",
        parents=parents,
        help="Print help for one or more objects",
        description=(
            "Import each TARGET (package.module[:attr.path]) and print the\n"
            "help registered for it, falling back to enabled providers."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("targets", nargs="*", metavar="TARGET",
                   help="Object to document, e.g. package.module:Class")
    p.set_defaults(func=run)


def run(args, helper=None):
    """Execute the show command.

    Args:
        args: Parsed namespace (targets, plus shared flags)
        helper: Help facade to use (default: helpreg.help)

    Returns:
        Exit code
    """
    if helper is None:
        from helpreg import help as helper

    subjects = []
    for target in args.targets:
        try:
            subjects.append(resolve_target(target))
        except TargetError as e:
            print_error(str(e))
            get_output().hint('import.target_syntax', 'error')
            return 1

    helper(*subjects)

    out = get_output()
    if subjects and all(helper.lookup(s) is None for s in subjects):
        out.hint('lookup.attach_docs', 'result')
    providers = len(helper.registry.extensions)
    if providers:
        out.hint('lookup.providers', 'verbose', count=providers)
    return 0
