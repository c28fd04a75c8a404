"""
Formatters for different help output targets.

TextFormatter is tuned for on-screen display; HtmlFormatter renders
documents, including recursive documentation trees of composite values.
"""

import html as html_module
import inspect
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..log_lib import get_output
from .core import Content, HelpContent
from .errors import HelpFormatError, HtmlWriteError


NO_DOCUMENTATION_HTML = "<p>No documentation available.</p>"

# HTML only defines h1..h6
MAX_HEADING_LEVEL = 6


class TextFormatter:
    """Formats help content as plain text for the console."""

    @staticmethod
    def format(content: Content, indent: str = "\t") -> Optional[str]:
        """
        Format content as newline-separated text.

        Args:
            content: Text or structured content, or None
            indent: Prefix for elements of a named list

        Returns:
            The formatted string, or None when there is no content
        """
        if content is None:
            return None
        return TextFormatter._entry(content, indent)

    @staticmethod
    def _entry(content, indent: str) -> str:
        if not isinstance(content, HelpContent):
            return str(content)

        lines = [TextFormatter._entry(value, indent) for value in content.ordered]

        for key, value in content.named.items():
            if isinstance(value, HelpContent):
                lines.append(f"{key} = {{")
                for item in value.ordered:
                    text = TextFormatter._entry(item, indent)
                    lines.extend(f"{indent}{line}" for line in text.split("\n"))
                for sub_key, item in value.named.items():
                    text = TextFormatter._entry(item, indent)
                    lines.extend(f"{indent}{line}"
                                 for line in f"{sub_key} = {text}".split("\n"))
                lines.append("}")
            else:
                lines.append(f"{key} = {value}")

        return "\n".join(lines)


class HtmlFormatter:
    """
    Formats help content as HTML fragments.

    Named parts made only of scalars render as a definition list; as soon
    as one named value is structured, each name gets its own heading and
    nested values render one heading level deeper.
    """

    def __init__(self, escape: bool = True):
        self.escape = escape

    # -----------------------------------------------------------------
    # Primitives
    # -----------------------------------------------------------------
    def _text(self, value) -> str:
        if isinstance(value, HelpContent):
            value = TextFormatter.format(value)
        text = str(value)
        return html_module.escape(text) if self.escape else text

    def paragraph(self, value) -> str:
        return f"<p>{self._text(value)}</p>"

    def definition_list(self, items: Dict[Any, Any]) -> str:
        lines = ["<dl>"]
        for key, value in items.items():
            lines.append(f"<dt>{self._text(key)}</dt><dd>{self._text(value)}</dd>")
        lines.append("</dl>")
        return "\n".join(lines)

    def unordered_list(self, items: Iterable[Any]) -> str:
        lines = ["<ul>"]
        for value in items:
            lines.append(f"<li>{self._text(value)}</li>")
        lines.append("</ul>")
        return "\n".join(lines)

    @staticmethod
    def heading(level: int, text: str) -> str:
        level = min(max(level, 1), MAX_HEADING_LEVEL)
        return f"<h{level}>{text}</h{level}>"

    # -----------------------------------------------------------------
    # Content rendering
    # -----------------------------------------------------------------
    def headings(self, level: int, named: Dict[Any, Any]) -> str:
        """Render each named entry under its own heading.

        Raises:
            HelpFormatError: If a value is a structured node with neither
                an ordered nor a named part
        """
        lines = []
        for key, value in named.items():
            lines.append(self.heading(level, self._text(key)))
            if not isinstance(value, HelpContent):
                lines.append(self.paragraph(value))
            elif value.is_empty():
                raise HelpFormatError(value)
            elif value.is_list_like():
                lines.append(self.unordered_list(value.ordered))
            else:
                lines.append(self.format(value, level + 1))
        return "\n".join(lines)

    def format(self, content: Content, level: int = 2) -> str:
        """
        Format content as an HTML fragment.

        Args:
            content: Text, structured content, or None
            level: Heading level used for named entries

        Returns:
            HTML string
        """
        if content is None:
            return NO_DOCUMENTATION_HTML
        if not isinstance(content, HelpContent):
            return self.paragraph(content)

        lines = [self.paragraph(value) for value in content.ordered]

        if content.named:
            if any(isinstance(v, HelpContent) for v in content.named.values()):
                lines.append(self.headings(level, content.named))
            else:
                lines.append(self.definition_list(content.named))

        return "\n".join(lines)

    # -----------------------------------------------------------------
    # Recursive documentation trees
    # -----------------------------------------------------------------
    def render_tree(self, name: str, subject: Any, level: int = 1,
                    lookup: Callable[[Any], Content] = None,
                    _visited: Dict[int, str] = None) -> str:
        """
        Document ``subject`` and, recursively, every public member of it.

        Members are labelled with a dotted path (``parent.child``) and
        rendered one heading level deeper per step. A composite already
        documented under another path is not descended into again; a
        pointer to the first path is emitted instead.

        Args:
            name: Label for the subject
            subject: The value to document
            level: Heading level for the subject
            lookup: Content lookup function (the facade's lookup)
            _visited: id -> path of composites already rendered

        Returns:
            HTML string
        """
        if lookup is None:
            raise TypeError("render_tree() requires a lookup function")
        if _visited is None:
            _visited = {}

        get_output().emit(1, "Documenting {name} at level {level}",
                          channel='html', name=name, level=level)

        lines = [self.heading(level, self._text(name))]
        members = composite_members(subject)

        if members is not None and id(subject) in _visited:
            lines.append(self.paragraph(f"See {_visited[id(subject)]}."))
            return "\n".join(lines)

        lines.append(self.format(lookup(subject), level + 1))

        if members is not None:
            _visited[id(subject)] = name
            for key, value in members:
                lines.append(self.render_tree(f"{name}.{key}", value, level + 1,
                                              lookup=lookup, _visited=_visited))
        return "\n".join(lines)


def composite_members(subject: Any) -> Optional[List[Tuple[str, Any]]]:
    """
    Enumerate the public members of a container-like value.

    Mappings yield their items; modules yield ``__all__`` or their public
    attributes (skipping modules they merely import); classes and plain
    objects yield the public entries of their ``__dict__``. Functions and
    other leaf values return None.
    """
    if isinstance(subject, dict):
        return [(str(k), v) for k, v in subject.items()]
    if inspect.ismodule(subject):
        names = getattr(subject, '__all__', None)
        if names is not None:
            return [(n, getattr(subject, n)) for n in names if hasattr(subject, n)]
        # Imported modules are not members; submodules are
        prefix = f"{subject.__name__}."
        return [(n, v) for n, v in vars(subject).items()
                if not n.startswith('_')
                and (not inspect.ismodule(v) or v.__name__.startswith(prefix))]
    if inspect.isclass(subject):
        return [(k, v) for k, v in vars(subject).items() if not k.startswith('_')]
    if inspect.isroutine(subject) or isinstance(subject, (str, bytes, int, float, complex, bool)):
        return None
    namespace = getattr(subject, '__dict__', None)
    if isinstance(namespace, dict):
        return [(k, v) for k, v in namespace.items() if not k.startswith('_')]
    return None


def write_html(path, *sections: str, title: str = None, encoding: str = "utf-8") -> Path:
    """
    Wrap pre-rendered sections in an HTML document and write it.

    Args:
        path: Destination file
        *sections: HTML fragments, written in order
        title: Optional document title
        encoding: File encoding

    Returns:
        The path written

    Raises:
        HtmlWriteError: If the file cannot be opened for writing
    """
    if title:
        head = f"<head><title>{html_module.escape(title)}</title></head>"
        parts = [f"<html>{head}<body>"]
    else:
        parts = ["<html><body>"]
    parts.extend(sections)
    parts.append("</body></html>")

    target = Path(path)
    try:
        with open(target, "w", encoding=encoding) as f:
            f.write("\n".join(parts))
    except OSError as e:
        raise HtmlWriteError(target, e.strerror) from e
    return target
