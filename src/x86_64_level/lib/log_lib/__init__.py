"""
log_lib — THAC0 verbosity system with named channels.

Public API:
    OutputManager      — verbosity-gated output
    init_output        — singleton initialization
    get_output         — access singleton
    Hint               — hint dataclass
    register_hint      — register a hint
    register_hints     — register multiple hints
    get_hint           — look up hint by id
    ChannelConfig      — channel threshold override
    parse_channel_spec — parse a --show spec
    format_channel_list — listing for bare --show
    trace              — function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
    'trace',
]
