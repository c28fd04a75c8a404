"""
Help providers backed by foreign introspection systems.

Both adapters are thin: they ask a backend for type information about a
subject and reshape it into help content. They are called with arbitrary
values and answer None for anything the backend does not describe.
"""

from typing import Any, Callable, List

from .extensions import HelpProvider


# Type names that describe built-in values rather than bound classes
BASIC_TYPE_NAMES = {
    'object', 'type', 'str', 'int', 'float', 'bool', 'NoneType',
    'function', 'builtin_function_or_method', 'list', 'dict', 'tuple',
    'module',
    # Names reported by Lua-style binding layers
    'userdata', 'table', 'string', 'number', 'thread', 'nil',
}


def _as_list(values) -> List[Any]:
    if values is None:
        return []
    if isinstance(values, (str, bytes)):
        return [values]
    return list(values)


def _field(info, name, default=None):
    """Read ``name`` from an attribute-style or mapping-style info record."""
    if isinstance(info, dict):
        return info.get(name, default)
    return getattr(info, name, default)


class ClassInfoProvider(HelpProvider):
    """
    Describes objects of classes exported through a binding layer.

    ``class_info(obj)`` must return a record with ``name``, ``methods``
    and ``attributes``. Records naming a basic type are not claimed.
    """

    name = 'class_info'

    def __init__(self, class_info: Callable[[Any], Any]):
        self.class_info = class_info

    def resolve(self, subject: Any):
        try:
            info = self.class_info(subject)
        except (TypeError, ValueError, LookupError):
            return None
        if info is None:
            return None
        class_name = _field(info, 'name')
        if not class_name or class_name in BASIC_TYPE_NAMES:
            return None
        return {
            'class': class_name,
            'methods': _as_list(_field(info, 'methods')),
            'attributes': _as_list(_field(info, 'attributes')),
        }


class TypeInfoProvider(HelpProvider):
    """
    Describes objects known to a reflection backend (scene-graph style).

    The backend exposes ``getTypeInfo(obj)`` (or ``get_type_info``),
    returning a record with ``name``, ``constructors`` and ``methods``,
    or None for objects it does not wrap.
    """

    name = 'type_info'

    def __init__(self, backend: Any):
        self.backend = backend
        getter = getattr(backend, 'getTypeInfo', None) or getattr(backend, 'get_type_info', None)
        if getter is None:
            raise TypeError(f"{backend!r} has no getTypeInfo()/get_type_info()")
        self._get_type_info = getter

    def resolve(self, subject: Any):
        try:
            info = self._get_type_info(subject)
        except (TypeError, ValueError, LookupError):
            return None
        if not info:
            return None

        result = {'class': _field(info, 'name')}
        constructors = _as_list(_field(info, 'constructors'))
        if constructors:
            result['constructors'] = constructors
        methods = _as_list(_field(info, 'methods'))
        if methods:
            result['methods'] = methods
        return result
