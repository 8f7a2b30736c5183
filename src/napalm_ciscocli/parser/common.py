"""Shared helpers for CLI output parsers."""

from __future__ import annotations


def content_lines(output: str | None, header_lines: int = 1) -> list[str]:
    """Split command output into content lines.

    Drops the first *header_lines* lines (the echoed command, plus any table
    headers) and the last line (the next prompt).

    Args:
        output: Raw output of one command, or ``None`` at end of stream.
        header_lines: Number of leading lines to discard.

    Returns:
        The remaining lines; empty when nothing but echo and prompt came back.
    """
    if not output:
        return []
    lines = output.split("\n")
    return lines[header_lines:-1]
