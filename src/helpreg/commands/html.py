"""helpreg html — export documentation trees as an HTML file.

Each TARGET is rendered recursively: the object itself, then every
public member, labelled with a dotted path and nested one heading level
deeper per step. All trees are written into a single document::

    helpreg html mypkg -o docs.html
    helpreg html mypkg.api mypkg.models --level 2 --title "API"
"""

import argparse

from helpreg.config import resolve_config
from helpreg.lib.help_lib import HelpError
from helpreg.lib.log_lib import get_output
from helpreg.output import print_error, print_ok
from helpreg.targets import TargetError, resolve_target


def register(subparsers, parents):
    """Register the 'html' subcommand."""
    p = subparsers.add_parser(
        "html",
        parents=parents,
        help="Write an HTML documentation tree for one or more objects",
        description=(
            "Recursively document each TARGET and write the result as a\n"
            "single HTML document."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("targets", nargs="+", metavar="TARGET",
                   help="Object to document, e.g. package.module")
    p.add_argument("-o", "--output", metavar="FILE", default="help.html",
                   help="Output file (default: help.html)")
    p.add_argument("--level", dest="heading_level", type=int, default=None,
                   metavar="N", help="Heading level of each tree root (1-6)")
    p.add_argument("--title", default=None,
                   help="Document title")
    p.add_argument("--no-escape", dest="escape", action="store_const",
                   const=False, default=None,
                   help="Emit documentation text as raw HTML")
    p.set_defaults(func=run)


def run(args, helper=None):
    """Execute the html command.

    Args:
        args: Parsed namespace (targets, output, heading_level, title, escape)
        helper: Help facade to use (default: helpreg.help)

    Returns:
        Exit code
    """
    if helper is None:
        from helpreg import help as helper

    cfg = resolve_config(args)
    helper.html_formatter.escape = cfg["escape"]

    sections = []
    for target in args.targets:
        try:
            subject = resolve_target(target)
        except TargetError as e:
            print_error(str(e))
            get_output().hint('import.target_syntax', 'error')
            return 1
        try:
            sections.append(helper.html_tree(target, subject, cfg["heading_level"]))
        except HelpError as e:
            print_error(f"{target}: {e}")
            return 1

    try:
        path = helper.write_html(args.output, *sections,
                                 title=cfg["title"], encoding=cfg["encoding"])
    except HelpError as e:
        print_error(str(e))
        return 1

    print_ok(f"Wrote {len(sections)} documentation tree(s) to {path}")
    get_output().hint('html.open_output', 'result', path=path)
    return 0
