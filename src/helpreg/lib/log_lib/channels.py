"""
Channel configuration and parsing for the THAC0 verbosity system.

Channels are named output categories. Each channel can carry its own
verbosity threshold that overrides the global level.

Channel spec syntax (compact, positional):
    CHANNEL:LEVEL:DEST:LOCATION:FORMAT

    Examples:
        registry                # Default level (0)
        registry:2              # Level 2
        html::file:tree.log     # Default level, file destination
"""

from dataclasses import dataclass
from typing import Optional


# Default channel set; applications may replace these module globals
KNOWN_CHANNELS = {
    'config',       # Configuration loading and overrides
    'general',      # Default channel
    'hint',         # Hint messages
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'config':   'Configuration loading and overrides',
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing',
}

# Channels that stay silent unless enabled with --show
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Configuration for a single output channel.

    Only ``name`` and ``level`` are acted on; destination, location and
    format are parsed and carried for callers that route output.
    """
    name: str
    level: int = 0
    destination: Optional[str] = None    # 'stderr', 'stdout', 'file'
    location: Optional[str] = None       # File path for file destination
    format: Optional[str] = None         # 'text', 'json'


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    Empty slots use ``::``. A Windows drive letter in the LOCATION slot
    (``C:\\logs\\out.log``) is rejoined with the path that follows it.

    Args:
        spec: Channel spec like "registry:2" or "html::file:C:\\logs\\tree.log"

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: If the LEVEL slot is not an integer
    """
    raw = spec.split(':')

    parts = []
    i = 0
    while i < len(raw):
        is_drive = (len(raw[i]) == 1 and raw[i].isalpha()
                    and i + 1 < len(raw) and i >= 3)
        if is_drive:
            parts.append(f"{raw[i]}:{raw[i + 1]}")
            i += 2
        else:
            parts.append(raw[i])
            i += 1

    def slot(n):
        return parts[n] if len(parts) > n and parts[n] else None

    level = slot(1)
    return ChannelConfig(
        name=parts[0],
        level=int(level) if level is not None else 0,
        destination=slot(2),
        location=slot(3),
        format=slot(4),
    )


def format_channel_list() -> str:
    """Format the known channels for display, marking opt-in ones."""
    lines = ["Available channels:"]
    width = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{width}}  {desc}{opt_in}")
    return "\n".join(lines)
