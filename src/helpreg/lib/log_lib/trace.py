"""
Function tracing decorator.

Routes entry/exit lines through the OutputManager singleton at level 3
on the 'trace' channel.
"""

import functools
import inspect
from pathlib import Path

MAX_REPR = 50


def _short_repr(value) -> str:
    """Compact repr for trace lines."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    text = repr(value)
    if len(text) > MAX_REPR:
        return f"{text[:MAX_REPR - 3]}..."
    return text


def trace(func):
    """Trace calls to ``func`` when the 'trace' channel is at level 3.

    Shows arguments, the return value (when not None) and any exception,
    which is re-raised unchanged.
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import avoids a cycle with manager
        from .manager import get_output

        out = get_output()
        if not out.channel_active('trace', 3):
            return func(*args, **kwargs)

        shown = [_short_repr(a) for a in args]
        shown.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
        out.emit(3, "[TRACE] >> {mod}.{fn}({args})", channel='trace',
                 mod=module_name, fn=func.__name__, args=', '.join(shown))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {mod}.{fn} raised: {exc}: {msg}", channel='trace',
                     mod=module_name, fn=func.__name__,
                     exc=type(e).__name__, msg=str(e))
            raise
        if result is not None:
            out.emit(3, "[TRACE] << {mod}.{fn} returned: {val}", channel='trace',
                     mod=module_name, fn=func.__name__, val=_short_repr(result))
        return result

    return wrapper
