"""helpreg channel definitions for the THAC0 verbosity system.

Configures the generic log_lib channel infrastructure with the channels
the help registry and CLI actually emit on, keeping log_lib itself
project-agnostic.

Usage:
    from helpreg.channels import configure_helpreg_channels
"""

from helpreg.lib.log_lib import channels as _ch


HELPREG_CHANNELS = {
    'registry',     # Attaching and forgetting help
    'merge',        # Merge internals (scalar promotion)
    'extension',    # Provider registration and answers
    'html',         # HTML tree traversal
    'config',       # Configuration loading and resolution
    'general',      # Default channel
    'hint',         # Contextual tips and suggestions
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

HELPREG_CHANNEL_DESCRIPTIONS = {
    'registry':  'Help attached to or dropped from the registry',
    'merge':     'Merge details (scalar-to-list promotion)',
    'extension': 'Help provider registration and answers',
    'html':      'HTML documentation tree traversal',
    'config':    'Configuration loading and resolution',
    'general':   'General output',
    'hint':      'Contextual tips and suggestions',
    'error':     'Error messages',
    'trace':     'Function call tracing',
}

HELPREG_OPT_IN_CHANNELS = {
    'trace',
}


def configure_helpreg_channels():
    """Replace log_lib's default channels with the helpreg set.

    Call once at startup before init_output().
    """
    _ch.KNOWN_CHANNELS = HELPREG_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = HELPREG_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = HELPREG_OPT_IN_CHANNELS
