"""Duration parsing for regulation time limits."""

import re

DEFAULT_DURATION_MINUTES = 10

_DIGITS_RE = re.compile(r"[0-9]+")


def parse_duration(max_time: str | None, default: int = DEFAULT_DURATION_MINUTES) -> int:
    """Return the minute count in a free-text limit such as ``"15 min"``.

    The first run of digits is taken as minutes with no unit conversion.
    Missing limits and text without digits fall back to ``default``.
    """
    if not max_time:
        return default
    match = _DIGITS_RE.search(max_time)
    if match is None:
        return default
    try:
        return int(match.group())
    except ValueError:
        # digit run longer than the interpreter's int conversion limit
        return default
