"""Command parameter parsing shared by the gvt commands.

Commands receive raw positional tokens. File commands take
`<file> [-m <message>]`, history takes `[-last <n>]` and checkout/version
take a version id.
"""

from __future__ import annotations

import re

from ..errors import InvalidVersionError


MESSAGE_FLAG = "-m"
LAST_FLAG = "-last"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_target_file(params: list[str]) -> str | None:
    """First parameter as a file name, unless absent or the message flag."""
    if not params or params[0] == MESSAGE_FLAG:
        return None
    return params[0]


def parse_user_message(params: list[str]) -> str | None:
    """Message from a trailing `-m <message>` pair, or None.

    A message wrapped in double quotes loses exactly one quote on each
    side; inner quotes are kept as-is.
    """
    if len(params) >= 2 and params[-2] == MESSAGE_FLAG:
        message = params[-1]
        if len(message) >= 2 and message.startswith('"') and message.endswith('"'):
            return message[1:-1]
        return message
    return None


def parse_version_id(raw: str | None) -> int:
    """Parse a version id token.

    Range checks against the repository are left to the caller; only the
    syntax is checked here.

    Raises:
        InvalidVersionError: If the token is missing or not an integer
    """
    if raw is None:
        raise InvalidVersionError("")
    if not _INT_RE.fullmatch(raw):
        raise InvalidVersionError(raw)
    return int(raw)


def parse_history_limit(params: list[str]) -> int | None:
    """Count from `-last <n>`, or None for all versions.

    Anything other than exactly `-last <positive int>` falls back to None
    rather than failing.
    """
    if len(params) == 2 and params[0] == LAST_FLAG and _INT_RE.fullmatch(params[1]):
        limit = int(params[1])
        if limit > 0:
            return limit
    return None
