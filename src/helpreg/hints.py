"""helpreg hints for the THAC0 verbosity system.

Hints are contextual tips shown after commands complete, at most once
per session. Import this module to register them.
"""

from helpreg.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='lookup.attach_docs',
        message=('  Tip: attach documentation with '
                 'helpreg.docstring("...").apply_to(obj) or @docstring("...").'),
        context={'result'},
        min_level=0,
        category='lookup',
    ),
    Hint(
        id='lookup.providers',
        message=('  Note: {count} help provider(s) were consulted; '
                 'use --show extension:2 to see which ones answered.'),
        context={'verbose'},
        min_level=1,
        category='lookup',
    ),
    Hint(
        id='html.open_output',
        message='  Tip: open {path} in a browser to read the documentation tree.',
        context={'result'},
        min_level=0,
        category='html',
    ),
    Hint(
        id='import.target_syntax',
        message='  Tip: targets look like package.module or package.module:Class.method',
        context={'error'},
        min_level=-1,
        category='import',
    ),
)
