"""
OutputManager — the THAC0 verbosity system core.

A message is shown when its level is <= the threshold of its channel.
The threshold is the channel's override if one was given with --show,
otherwise the global verbosity:

    -v increments, -Q decrements; they compose (-vv -Q == 1)
    threshold -4 is a hard wall: nothing is written at all

All output goes to one file handle (stderr by default) so that stdout
carries only the result.
"""

import sys
from typing import Any, Dict, List, Optional, Set, TextIO

from . import channels as _channels
from .levels import ERROR, NOTHING
from .hints import get_hint


class OutputManager:
    """Verbosity-gated diagnostic output with per-channel overrides.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "Read {n} bytes from {path}", channel='cpuinfo', n=5120,
                 path='/proc/cpuinfo')
        out.hint('cpuinfo.stdin', 'error')
        out.error("Input data is empty")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Optional[Dict[str, int]] = None,
        file: Optional[TextIO] = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Write `message` if `level` <= the channel threshold.

        Args:
            level: Message level (higher = more verbose)
            message: Format string, filled with str.format(**kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= NOTHING or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint once per session, if the context matches.

        The hint's min_level is checked against the 'hint' channel
        threshold.
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= NOTHING or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def error(self, message: str) -> None:
        """Emit an error (level -3): shown unless at the hard wall."""
        self.emit(ERROR, message, channel='error')

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on `channel` would be shown."""
        threshold = self.threshold(channel)
        return threshold > NOTHING and threshold >= 0

    @property
    def quiet(self) -> bool:
        return self.verbosity < 0

    @property
    def shown_hints(self) -> Set[str]:
        """Hint ids displayed this session."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: Optional[List[str]] = None,
                file: Optional[TextIO] = None) -> OutputManager:
    """Initialize the module-level OutputManager.

    Call once at startup, after parsing CLI arguments.

    Args:
        verbosity: THAC0 verbosity (0=default, positive=verbose, negative=quiet)
        channels: Channel spec strings from --show (e.g., ['classify:1'])
        file: Output stream (default: stderr)

    Returns:
        The new OutputManager
    """
    global _manager

    # Opt-in channels are off until named explicitly
    channel_overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Return the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
