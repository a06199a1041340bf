"""Terminal presentation helpers for suggestions."""

from __future__ import annotations

import enum
import logging
import os
import sys
from typing import Sequence

log = logging.getLogger(__name__)

DEFAULT_TERMINAL_SIZE = 80

_MAX_MISTAKE_LEN = 20
_HEAD_DISPLAY_LEN = 4
_TAIL_DISPLAY_LEN = 4
_CENTER_DOTS = "..."
_LEFT_DOTS = ".."
_RIGHT_DOTS = _LEFT_DOTS
_NO_DOTS = ""
# Worst case estimate of the characters used around the excerpt.
_TOTAL_CONTEXT_CHAR_COUNT = 6

_warned_terminal_size = False


class Detector(enum.Enum):
    """The checker that produced a suggestion."""

    HUNSPELL = "Hunspell"
    NLP_RULES = "NlpRules"
    REFLOW = "Reflow"

    def __str__(self) -> str:
        return self.value


def get_terminal_size() -> int:
    """Terminal width in characters, or 80 if it cannot be determined."""
    global _warned_terminal_size
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError, AttributeError):
        if not _warned_terminal_size:
            _warned_terminal_size = True
            log.warning(
                "Unable to get terminal size. Using default: %d", DEFAULT_TERMINAL_SIZE
            )
        return DEFAULT_TERMINAL_SIZE


def _take(s: str, start: int, count: int) -> str:
    count = max(count, 0)
    return s[start:start + count]


def condition_display_content(
    terminal_size: int,
    indent: int,
    stripped_line: str,
    mistake_range: range,
    terminal_print_offset_left: int,
    marker_size: int,
) -> tuple[str, int, int]:
    """Fit a line into one terminal line around the mistake.

    Returns `(line, marker offset, marker size)`. Long lines are trimmed with
    dots on either side, and mistakes longer than 20 characters are shortened
    to their first and last four characters.
    """
    line_len = len(stripped_line)
    if line_len + terminal_print_offset_left <= terminal_size:
        return stripped_line, mistake_range.start, marker_size

    mistake_start, mistake_end = mistake_range.start, mistake_range.stop

    if len(mistake_range) > _MAX_MISTAKE_LEN:
        head = range(mistake_start, mistake_start + _HEAD_DISPLAY_LEN)
        tail = range(max(mistake_end - _TAIL_DISPLAY_LEN, 0), mistake_end)
        head_sub = _take(stripped_line, head.start, _HEAD_DISPLAY_LEN)
        tail_sub = _take(stripped_line, tail.start, _TAIL_DISPLAY_LEN)
        shortened = f"{head_sub}{_CENTER_DOTS}{tail_sub}"
        marker_size = len(head) + len(_CENTER_DOTS) + len(tail)
    else:
        shortened = _take(stripped_line, mistake_start, len(mistake_range))

    left = range(0, mistake_start)
    right = range(mistake_end, line_len)

    avail_space = max(
        terminal_size
        - (terminal_print_offset_left + marker_size + _TOTAL_CONTEXT_CHAR_COUNT),
        0,
    )
    half = avail_space // 2

    left_fits = half > len(left)
    right_fits = half > len(right)

    if left_fits and not right_fits:
        right_avail = avail_space - len(left)
        right_dots = _NO_DOTS if mistake_end + right_avail < line_len else _RIGHT_DOTS
        right = range(right.stop, min(mistake_end + right_avail, line_len))
        left_dots = _NO_DOTS
    elif right_fits and not left_fits:
        left_avail = avail_space - len(right)
        left_dots = _NO_DOTS if left_avail > left.stop else _LEFT_DOTS
        left = range(max(left.stop - left_avail, 0), left.stop)
        right_dots = _NO_DOTS
    elif not left_fits and not right_fits:
        left = range(max(left.stop - half, 0), left.stop)
        right = range(right.start, right.start + half)
        left_dots, right_dots = _LEFT_DOTS, _RIGHT_DOTS
    else:
        left_dots, right_dots = _NO_DOTS, _NO_DOTS

    assert left.stop == mistake_start
    assert right.stop <= line_len
    assert len(left) + len(mistake_range) + len(right) <= line_len

    offset = len(left)
    conditioned = "".join(
        (
            left_dots,
            _take(stripped_line, left.start + len(left_dots), len(left) - len(left_dots)),
            shortened,
            _take(stripped_line, right.start, len(right) - len(right_dots)),
            right_dots,
        )
    )
    return conditioned, offset, marker_size


def format_replacements(replacements: Sequence[str]) -> str:
    """Render replacement proposals as a ` - a, b, or c` style list."""
    n = len(replacements)
    if n == 0:
        return ""
    if n == 1:
        return f" - {replacements[0]}"
    if n == 2:
        return f" - {replacements[0]} or {replacements[1]}"
    if n < 7:
        joined = ", ".join(replacements[:-1])
        return f" - {joined}, or {replacements[-1]}"
    joined = ", ".join(replacements[:7])
    return f" - {joined}, or one of {n - 6} others"