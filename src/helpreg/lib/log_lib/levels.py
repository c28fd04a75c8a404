"""
THAC0 verbosity levels used by helpreg output.

The emit rule is one comparison:

    message.level <= threshold  ->  message is shown

where the threshold is the global verbosity or a per-channel override.
The system works on raw integers; these names are for readability.

    <-- quieter ---------- default ---------- louder -->
    -4    -3     -2       -1      0       1      2       3
    wall  errors warnings minimal default detail config  debug
"""

# Louder than default (-v, -vv, -vvv)
DEBUG = 3          # Merge internals, function tracing
CONFIG = 2         # Registry mutations, provider registration, config loading
TIMING = 1         # Tree traversal progress, per-file summaries
DEFAULT = 0        # Normal output, result-context hints

# Quieter than default (-Q .. -QQQQ)
MINIMAL = -1       # Suppress hints
WARNING = -2       # Warnings only
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall: exit code only
