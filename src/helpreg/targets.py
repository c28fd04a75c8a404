"""Resolve command-line targets to live Python objects.

A target is ``package.module`` or ``package.module:attr.path``. Without
a colon, the longest importable dotted prefix is imported and the rest
is treated as an attribute path.
"""

import importlib


class TargetError(Exception):
    """Raised when a target cannot be imported or resolved."""


def _import_longest_prefix(dotted):
    parts = dotted.split(".")
    for cut in range(len(parts), 0, -1):
        module_name = ".".join(parts[:cut])
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Only swallow "this prefix is not a module", not broken imports inside it
            if e.name and module_name.startswith(e.name):
                continue
            raise
        return module, parts[cut:]
    raise TargetError(f"No importable module in '{dotted}'")


def resolve_target(target):
    """Import and return the object named by target.

    Raises:
        TargetError: If the module or an attribute along the path is missing
    """
    if ":" in target:
        module_name, _, attr_path = target.partition(":")
        try:
            obj = importlib.import_module(module_name)
        except ImportError as e:
            raise TargetError(f"Cannot import '{module_name}': {e}") from e
        attrs = [a for a in attr_path.split(".") if a]
    else:
        obj, attrs = _import_longest_prefix(target)

    for attr in attrs:
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise TargetError(f"'{target}': no attribute '{attr}'") from e
    return obj
