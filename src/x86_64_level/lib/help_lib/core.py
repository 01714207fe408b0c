"""
Help content and sections for CLI usage examples.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class HelpContent:
    """
    One usage example: a command template and what it does.
    """
    id: str                          # Unique identifier like "assert.v3"
    command: str                     # Command template like "{prog} --assert 3"
    description: str                 # What the command does
    priority: int = 50               # Lower = shown first
    variables: Dict[str, str] = field(default_factory=dict)

    def get_command(self, prog: str = 'app', **kwargs) -> str:
        """Render the command with {prog} and variable substitutions."""
        values = dict(self.variables)
        values.update(kwargs)
        values['prog'] = prog

        result = self.command
        for key, value in values.items():
            result = result.replace(f'{{{key}}}', str(value))
        return result

    def format_as_example(self, prog: str = 'app', comment_column: int = 50,
                          **kwargs) -> str:
        """
        Format as an example line with an aligned comment.

        Returns:
            e.g. "x86-64-level --assert 3    # Fail unless v3 is supported"
        """
        cmd = self.get_command(prog, **kwargs)
        comment = f"# {self.description}"

        padding = comment_column - len(cmd)
        if padding > 2:
            return f"{cmd}{' ' * padding}{comment}"
        # Command too long for the column, fall back to two spaces
        return f"{cmd}  {comment}"


class HelpSection:
    """
    A titled group of usage examples.
    """

    def __init__(self, id: str, title: str):
        self.id = id
        self.title = title
        self.items: List[HelpContent] = []

    def add_items(self, *items: HelpContent):
        self.items.extend(items)

    def format_section(self, prog: str = 'app',
                       max_items: Optional[int] = None) -> str:
        """
        Format the section with comments aligned on a shared column.

        Args:
            prog: Program name
            max_items: Maximum number of examples to show

        Returns:
            Title line followed by indented examples, or "" if empty
        """
        items = sorted(self.items, key=lambda x: x.priority)
        if max_items:
            items = items[:max_items]
        if not items:
            return ""

        longest = max(len(item.get_command(prog)) for item in items)
        comment_column = min(longest + 2, 48)  # Cap before the indent

        lines = [f"{self.title}:"]
        for item in items:
            lines.append(f"  {item.format_as_example(prog, comment_column)}")
        return "\n".join(lines)
