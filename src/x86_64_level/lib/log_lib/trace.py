"""
Function tracing decorator.

Writes entry/exit lines through the OutputManager singleton at level 3
on the 'trace' channel.
"""

import functools
import inspect

from .levels import DEBUG


def _short_repr(value):
    if isinstance(value, str) and len(value) > 50:
        return repr(value[:47] + '...')
    if isinstance(value, (list, tuple, set, frozenset)) and len(value) > 3:
        return f"<{type(value).__name__} of {len(value)} items>"
    return repr(value)


def trace(func):
    """Trace calls to `func` when the 'trace' channel threshold is >= 3.

    Long strings (such as a whole cpuinfo dump) and large collections
    (such as a flag set) are abbreviated.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid a circular dependency
        from .manager import get_output

        out = get_output()
        if out.threshold('trace') < DEBUG:
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        mod = module.__name__ if module else "unknown"
        fn = func.__name__

        shown = [_short_repr(a) for a in args]
        shown += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        out.emit(DEBUG, "[TRACE] >> {mod}.{fn}({args})", channel='trace',
                 mod=mod, fn=fn, args=', '.join(shown))

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(DEBUG, "[TRACE] !! {mod}.{fn} raised: {exc}: {msg}",
                     channel='trace', mod=mod, fn=fn,
                     exc=type(e).__name__, msg=str(e))
            raise

        if result is not None:
            out.emit(DEBUG, "[TRACE] << {mod}.{fn} returned: {val}",
                     channel='trace', mod=mod, fn=fn, val=_short_repr(result))
        return result

    return wrapper
