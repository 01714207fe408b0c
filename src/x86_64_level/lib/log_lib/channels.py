"""
Named output channels for the THAC0 verbosity system.

A channel is an output category with an optional threshold of its own.
On the command line a channel is selected with ``--show CHANNEL[:LEVEL]``:

    --show classify        # classify channel at level 0
    --show config:2        # config channel pinned to threshold 2
    --show trace:3         # enable function tracing
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'cpuinfo',      # Reading and parsing CPU information
    'classify',     # Level classification and its reason
    'config',       # Configuration discovery and resolution
    'general',      # Default channel
    'hint',         # Hint messages
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'cpuinfo':  'CPU information source and parsed flags',
    'classify': 'Identified level and the missing feature',
    'config':   'Configuration file discovery and values',
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing',
}

# Channels that stay silent unless named with --show
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Threshold override for a single channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse ``CHANNEL[:LEVEL]`` into a ChannelConfig.

    An empty or missing level means 0.

    Raises:
        ValueError: LEVEL is not an integer.
    """
    name, _, level = spec.partition(':')
    return ChannelConfig(name=name, level=int(level) if level else 0)


def format_channel_list() -> str:
    """Format the known channels for ``--show`` with no argument."""
    lines = ["Available channels:"]
    width = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{width}}  {desc}{opt_in}")
    return "\n".join(lines)
