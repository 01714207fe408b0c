"""
Help system for CLI usage examples.

Keeps example content separate from how it is laid out in --help.
"""

from .core import HelpContent, HelpSection

__all__ = [
    'HelpContent',
    'HelpSection',
]
