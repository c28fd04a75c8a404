"""
Runtime documentation registry.

Attach help content to arbitrary live values, merge it incrementally,
look it up (falling back to pluggable providers), and render it as
console text or HTML.
"""

from .core import (
    HelpContent, Content, to_content, make_content,
    is_text, is_structured, has_ordered_part, has_named_part, is_list_like,
)
from .merge import merge
from .extensions import HelpProvider, FunctionProvider, ExtensionChain
from .content_registry import Registry
from .providers import ClassInfoProvider, TypeInfoProvider
from .formatters import (
    TextFormatter, HtmlFormatter, NO_DOCUMENTATION_HTML,
    composite_members, write_html,
)
from .facade import Help, DocstringBuilder, USAGE, DEFAULT_BACKENDS, document_help
from .errors import HelpError, HelpFormatError, HelpConfigError, HtmlWriteError

__all__ = [
    'HelpContent', 'Content', 'to_content', 'make_content',
    'is_text', 'is_structured', 'has_ordered_part', 'has_named_part', 'is_list_like',
    'merge',
    'HelpProvider', 'FunctionProvider', 'ExtensionChain',
    'Registry',
    'ClassInfoProvider', 'TypeInfoProvider',
    'TextFormatter', 'HtmlFormatter', 'NO_DOCUMENTATION_HTML',
    'composite_members', 'write_html',
    'Help', 'DocstringBuilder', 'USAGE', 'DEFAULT_BACKENDS', 'document_help',
    'HelpError', 'HelpFormatError', 'HelpConfigError', 'HtmlWriteError',
]
