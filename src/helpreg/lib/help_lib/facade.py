"""
The callable ``help`` facade.

Ties the registry, extension chain and formatters together behind one
object that can be called like the interactive ``help()`` builtin:

    help(obj)                         # print help for obj
    help(a, b)                        # several at once
    docstring("Does a thing.")(obj)   # attach help
"""

import importlib
import sys
from typing import Any, List, TextIO

from ..log_lib import get_output
from .content_registry import Registry
from .core import Content, HelpContent, make_content, to_content
from .errors import HelpConfigError
from .formatters import HtmlFormatter, TextFormatter, write_html
from .providers import ClassInfoProvider, TypeInfoProvider


USAGE = "help(obj) - call to learn information about a particular object or value."

# Reflection backends enabled automatically when importable
DEFAULT_BACKENDS = ("osgLua",)


class DocstringBuilder:
    """
    Attaches one piece of documentation to any number of subjects.

    Each application merges a private copy of the content into the
    subject's existing help, so later changes to one subject's help
    never leak into another's. Three equivalent forms::

        docstring("...").apply_to(a).apply_to(b)   # chainable
        @docstring("...")                          # decorator, returns subject
        handler = docstring("...") >> some_func    # inline, returns subject
    """

    def __init__(self, registry: Registry, content: Content):
        self._registry = registry
        self.content = content

    def _fresh(self) -> Content:
        if isinstance(self.content, HelpContent):
            return self.content.copy()
        return self.content

    def apply_to(self, *subjects) -> 'DocstringBuilder':
        for subject in subjects:
            self._registry.attach(subject, self._fresh())
        return self

    def __call__(self, subject):
        self._registry.attach(subject, self._fresh())
        return subject

    def __rshift__(self, subject):
        return self(subject)

    def __repr__(self):
        return f"DocstringBuilder({self.content!r})"


class Help:
    """
    Callable help facade over an explicit ``Registry``.

    Args:
        registry: Backing registry (a fresh one by default)
        file: Stream for printed help (default: stdout at call time)
        escape: HTML-escape text in HTML output
    """

    def __init__(self, registry: Registry = None, file: TextIO = None,
                 escape: bool = True):
        self.registry = registry if registry is not None else Registry()
        self.text = TextFormatter()
        self.html_formatter = HtmlFormatter(escape=escape)
        self.file = file
        self._enabled = set()

    def _print(self, text: str = "") -> None:
        print(text, file=self.file if self.file is not None else sys.stdout)

    def __call__(self, *subjects) -> None:
        if not subjects:
            self._print(USAGE)
            return

        for i, subject in enumerate(subjects, 1):
            if i == 1:
                header = "Help:"
            else:
                self._print()
                header = f"Help (#{i}):"

            content = self.lookup(subject)
            if content is None:
                self._print(f"{header}\ttype(obj) = {type(subject).__name__}")
                self._print("No further help available!")
            elif isinstance(content, HelpContent):
                self._print(header)
                self._print(self.format_help(content))
            else:
                self._print(f"{header}\t{self.format_help(content)}")

    # -----------------------------------------------------------------
    # Registry access
    # -----------------------------------------------------------------
    def docstring(self, *ordered, **named) -> DocstringBuilder:
        return DocstringBuilder(self.registry, make_content(*ordered, **named))

    def lookup(self, subject: Any) -> Content:
        return self.registry.lookup(subject)

    def format_help(self, content):
        return self.text.format(to_content(content))

    def add_help_extension(self, provider, allow_duplicate: bool = False) -> bool:
        return self.registry.extensions.register(provider, allow_duplicate=allow_duplicate)

    # -----------------------------------------------------------------
    # HTML output
    # -----------------------------------------------------------------
    def html(self, content: Content, level: int = 2) -> str:
        return self.html_formatter.format(content, level)

    def html_tree(self, name: str, subject: Any, level: int = 1) -> str:
        return self.html_formatter.render_tree(name, subject, level, lookup=self.lookup)

    def write_html(self, path, *sections: str, title: str = None, encoding: str = "utf-8"):
        return write_html(path, *sections, title=title, encoding=encoding)

    # -----------------------------------------------------------------
    # Foreign introspection support
    # -----------------------------------------------------------------
    def _already_enabled(self, key: str) -> bool:
        if key in self._enabled:
            self._print(f"{key} help support already enabled!")
            return True
        return False

    def enable_class_info(self, class_info=None) -> bool:
        """
        Enable class introspection through a binding layer's ``class_info``.

        Raises:
            HelpConfigError: If no ``class_info`` callable was supplied
        """
        if self._already_enabled('class_info'):
            return False
        if not callable(class_info):
            raise HelpConfigError(
                'class_info',
                "Cannot load class_info help support: a class_info callable "
                "must be registered by the binding layer",
            )
        self.add_help_extension(ClassInfoProvider(class_info))
        self._enabled.add('class_info')
        return True

    def enable_type_info(self, module: str = 'osgLua') -> bool:
        """
        Enable introspection through a reflection backend module.

        Raises:
            HelpConfigError: If the backend module cannot be imported or
                has no type info getter
        """
        if self._already_enabled(module):
            return False
        try:
            backend = importlib.import_module(module)
        except ImportError as e:
            raise HelpConfigError(
                module, f"Cannot load {module} help support: {module} not found."
            ) from e
        try:
            provider = TypeInfoProvider(backend)
        except TypeError as e:
            raise HelpConfigError(
                module, f"Cannot load {module} help support: {module} has no "
                "getTypeInfo() or get_type_info()."
            ) from e
        get_output().emit(2, "extension: loaded type info backend {module}",
                          channel='extension', module=module)
        self.add_help_extension(provider)
        self._enabled.add(module)
        return True

    def enable_available_backends(self, modules=DEFAULT_BACKENDS) -> List[str]:
        """
        Enable every reflection backend in ``modules`` that can be loaded.

        Backends that are missing or unusable are skipped; the reason is
        logged on the 'extension' channel.

        Returns:
            Names of the backends enabled by this call
        """
        enabled = []
        for module in modules:
            if module in self._enabled:
                continue
            try:
                self.enable_type_info(module)
            except HelpConfigError as e:
                get_output().emit(2, "extension: skipped {module}: {reason}",
                                  channel='extension', module=module, reason=e)
                continue
            enabled.append(module)
        return enabled


def document_help(h: Help) -> Help:
    """Attach usage documentation to a ``Help`` instance and its methods."""
    doc = h.docstring
    doc(
        "Display as much helpful information as possible about the argument.\n"
        "There will be more information if you define docstrings for\n"
        "your objects. Try help(help.docstring) for info.",
        functions=["docstring", "lookup", "add_help_extension", "format_help",
                   "html", "html_tree", "write_html",
                   "enable_class_info", "enable_type_info",
                   "enable_available_backends"],
    ).apply_to(h)

    doc(
        "Define documentation for an object.\n"
        "\n"
        "Pass a string, or positional text plus named sections:\n"
        "    help.docstring(\"Help goes here.\", args=[\"this\", \"that\"])\n"
        "\n"
        "Apply it after the fact, to several objects if needed:\n"
        "    help.docstring(\"your docs\").apply_to(a).apply_to(b)\n"
        "as a decorator:\n"
        "    @help.docstring(\"your docs\")\n"
        "or inline:\n"
        "    handler = help.docstring(\"your docs\") >> (lambda: None)\n"
        "\n"
        "Documenting an object twice merges the new docs into the old."
    ).apply_to(type(h).docstring)

    doc(
        "Perform a documentation lookup and return the raw documentation.\n"
        "This may be structured content rather than a string - help() handles\n"
        "this with a call to help.format_help."
    ).apply_to(type(h).lookup)

    doc(
        "Convert a value, such as that returned by help.lookup, into a\n"
        "formatted string. The default implementation, used by help(),\n"
        "is optimized for on-screen display."
    ).apply_to(type(h).format_help)

    doc(
        "Add a provider to look up help in other systems.\n"
        "\n"
        "Accepts a function that, given an object, returns content like that\n"
        "passed to help.docstring, or None if it knows nothing special about it."
    ).apply_to(type(h).add_help_extension)

    doc(
        "Enable class introspection through a binding layer. Pass the\n"
        "binding's class_info callable."
    ).apply_to(type(h).enable_class_info)

    doc(
        "Enable introspection of objects wrapped by a reflection backend\n"
        "module (osgLua by default)."
    ).apply_to(type(h).enable_type_info)

    doc(
        "Enable every known reflection backend that can be imported.\n"
        "helpreg calls this once for its default instance at import time."
    ).apply_to(type(h).enable_available_backends)

    doc(
        "Render a documentation tree for an object and all its public\n"
        "members as HTML, one heading level per nesting step."
    ).apply_to(type(h).html_tree)
    return h
