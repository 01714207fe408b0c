"""
THAC0 verbosity level constants.

The emit rule uses plain integers; these names are for readability:

    message.level <= threshold  →  message is shown

    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2     -1     0     1       2      3
    wall  errors warnings minimal default reason config trace
"""

# Positive levels (shown with -v/-vv/-vvv)
DEBUG = 3          # Function tracing, raw token sets
CONFIG = 2         # Config file discovery and resolved values
REASON = 1         # Why a level was (not) reached
DEFAULT = 0        # Level number, result-context hints

# Negative levels (suppressed with -Q/-QQ/-QQQ/-QQQQ)
MINIMAL = -1       # Suppress hints
WARNING = -2       # Suppress warnings
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall: exit code only
