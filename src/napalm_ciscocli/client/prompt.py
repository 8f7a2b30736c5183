"""Prompt patterns and the prompt-boundary test used by the SSH channel."""

from __future__ import annotations

import re

# Privileged ("router#") or user ("router>") exec prompt at the very end.
DEFAULT_PROMPT: re.Pattern[str] = re.compile(r"[#>]\s?\Z")

# User exec prompt only; seen after login when enable is still required.
UNPRIVILEGED_PROMPT: re.Pattern[str] = re.compile(r">\s?\Z")

PASSWORD_PROMPT: re.Pattern[str] = re.compile(r"^Password:", re.MULTILINE)

# Credentials asked for again after a failed login.
LOGIN_PROMPT: re.Pattern[str] = re.compile(r"^(?:Username|Password): ?\Z", re.MULTILINE)

# Whatever follows the login password: an exec prompt or another login prompt.
LOGIN_RESULT_PROMPT: re.Pattern[str] = re.compile(
    rf"{DEFAULT_PROMPT.pattern}|{LOGIN_PROMPT.pattern}", re.MULTILINE
)


def prompt_matched(output: str, prompt: re.Pattern[str], pending: bool = False) -> bool:
    """Return ``True`` when *output* ends a command.

    A match only counts at a quiescent point: if more bytes are already
    waiting on the channel (*pending*), the prompt-looking text may be the
    middle of a longer line, so the command is not finished yet.

    Args:
        output: Text accumulated since the command was sent.
        prompt: Pattern that identifies the device prompt.
        pending: Whether unread data is still available.
    """
    if pending:
        return False
    return prompt.search(output) is not None
