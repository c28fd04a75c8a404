"""helpreg — runtime documentation registry.

Attach help to live Python values, merge it as you go, and print it or
export it as HTML. The package-level ``help`` object is a process-wide
default facade::

    from helpreg import help, docstring

    @docstring("Adds two numbers.", args=["a", "b"])
    def add(a, b):
        return a + b

    help(add)
"""

from helpreg._version import __version__, __app_name__
from helpreg.lib.help_lib import Help, Registry, document_help

help = document_help(Help(Registry()))
help.enable_available_backends()

docstring = help.docstring
lookup = help.lookup
format_help = help.format_help
add_help_extension = help.add_help_extension
write_html = help.write_html

__all__ = [
    "__version__", "__app_name__",
    "help", "docstring", "lookup", "format_help", "add_help_extension",
    "write_html",
]
