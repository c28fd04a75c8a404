"""
OutputManager: THAC0 verbosity-gated output with named channels.

A message shows when ``message.level <= threshold``, where the threshold
is the channel's override if one is set, otherwise the global verbosity.

    <-- quieter ---------- default ---------- louder -->
    -4    -3     -2       -1      0       1      2       3

-v raises the global verbosity, -Q lowers it; they compose (-vv -Q = 1).
``--show CHANNEL:LEVEL`` pins one channel's threshold. At -4 nothing is
emitted at all.

The help registry logs through the module-level singleton returned by
get_output(), on the 'registry', 'merge', 'extension' and 'html'
channels.
"""

import sys
from typing import Any, Dict, List, Optional, Set, TextIO

from .hints import get_hint
from . import channels as _channels

HARD_WALL = -4


class OutputManager:
    """Central coordinator for THAC0 verbosity-gated output.

    Output goes to ``file`` (default: stderr, resolved at write time so
    test capture works). Hints are shown at most once per manager.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "Documenting {name}", channel='html', name='pkg.mod')
        out.hint('lookup.attach_docs', 'result')
        out.warning("No members to document")
        out.error("Could not open file")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file
        self._shown_hints: Set[str] = set()

    def _write(self, text: str) -> None:
        print(text, file=self.file if self.file is not None else sys.stderr)

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, /, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= the channel's threshold.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= HARD_WALL or level > threshold:
            return
        self._write(message.format(**kwargs) if kwargs else message)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint if the context matches, its level passes
        and it has not been shown yet.

        Args:
            hint_id: Registry key for the hint
            context: Current context ('error', 'result', 'verbose')
            **kwargs: Values for template placeholders in the hint message
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= HARD_WALL or h.min_level > threshold:
            return

        self._write(h.message.format(**kwargs) if kwargs else h.message)
        self._shown_hints.add(hint_id)

    def warning(self, message: str) -> None:
        """Emit a warning (level -2, general channel)."""
        self.emit(-2, message, channel='general')

    def error(self, message: str) -> None:
        """Emit an error (level -3). Shown everywhere except the hard wall."""
        self.emit(-3, message, channel='error')

    def channel_active(self, channel: str, level: int = 0) -> bool:
        """Check whether a message at ``level`` on ``channel`` would show.

        Lets callers skip building expensive messages.
        """
        threshold = self.threshold(channel)
        return threshold > HARD_WALL and level <= threshold

    @property
    def quiet(self) -> bool:
        return self.verbosity < 0

    @property
    def shown_hints(self) -> Set[str]:
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: List[str] = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after parsing CLI arguments.

    Args:
        verbosity: THAC0 verbosity (0=default, positive=verbose, negative=quiet)
        channels: Channel spec strings (e.g., ['registry:2', 'trace'])
        file: Output stream (default: stderr)

    Returns:
        The initialized OutputManager
    """
    global _manager

    # Opt-in channels stay off unless explicitly enabled
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
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
