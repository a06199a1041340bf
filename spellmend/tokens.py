"""Split text into unbreakable tokens and glue them back into width-limited lines."""

from __future__ import annotations

import logging
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

log = logging.getLogger(__name__)

# Characters Python treats as whitespace that are not whitespace in the
# Unicode White_Space sense (file, group, record and unit separators).
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(c: str) -> bool:
    return c.isspace() and c not in _NOT_WHITESPACE


@dataclass(frozen=True)
class Indentation:
    """Indentation of a single line, either a column offset or a literal prefix."""

    offset: int = 0
    s: Optional[str] = None

    @classmethod
    def with_str(cls, offset: int, s: str) -> "Indentation":
        return cls(offset, s)

    def __str__(self) -> str:
        if self.s is not None:
            return self.s
        return " " * self.offset

    def to_string_skipping(self, n: int) -> str:
        """Render the indentation with `n` columns taken away."""
        if self.s is not None:
            return self.s[:n]
        return " " * max(self.offset - n, 0)


Token = tuple[range, range, str]


class Tokeneer:
    """Iterate over the words of a string, keeping unbreakable ranges intact.

    Yields `(char range, byte range, text)` tuples. Unbreakable ranges are
    given in characters and must be sorted by their start.
    """

    def __init__(self, s: str, unbreakable_ranges: Iterable[range] = ()) -> None:
        self._s = s
        self._data = s.encode("utf-8")
        self._unbreakable_ranges: list[range] = list(unbreakable_ranges)
        self._unbreakable_idx = 0
        chars = []
        byte_offset = 0
        for char_idx, c in enumerate(s):
            chars.append((char_idx, byte_offset, c))
            byte_offset += len(c.encode("utf-8"))
        self._chars = chars
        self._pos = 0
        self._previous_byte_offset = 0
        self._previous_char_offset = 0

    def add_unbreakables(self, unbreakable_ranges: Iterable[range]) -> None:
        self._unbreakable_ranges.extend(unbreakable_ranges)

    def _peek(self):
        if self._pos < len(self._chars):
            return self._chars[self._pos]
        return None

    def _craft_token(self, char_idx: int, byte_offset: int) -> Optional[Token]:
        peeked = self._peek()
        if peeked is not None:
            byte_range = range(self._previous_byte_offset, peeked[1])
        elif self._previous_byte_offset <= byte_offset:
            byte_range = range(self._previous_byte_offset, len(self._data))
        else:
            log.error(
                "Inconsistent token offsets (byte_offset=%d, previous=%d)",
                byte_offset,
                self._previous_byte_offset,
            )
            return None
        char_range = range(self._previous_char_offset, char_idx + 1)
        text = self._data[byte_range.start:byte_range.stop].decode("utf-8")
        return char_range, byte_range, text

    def _inside_unbreakable(self, char_idx: int) -> bool:
        """Whether the token must continue past `char_idx`."""
        ranges = self._unbreakable_ranges
        while self._unbreakable_idx < len(ranges):
            unbreakable = ranges[self._unbreakable_idx]
            if char_idx < unbreakable.start:
                return False
            if char_idx in unbreakable:
                return (char_idx + 1) in unbreakable
            following = self._unbreakable_idx + 1
            if following < len(ranges) and char_idx in ranges[following]:
                self._unbreakable_idx = following
                continue
            return False
        return False

    def __iter__(self) -> "Tokeneer":
        return self

    def __next__(self) -> Token:
        while self._pos < len(self._chars):
            char_idx, byte_offset, c = self._chars[self._pos]
            self._pos += 1

            if self._inside_unbreakable(char_idx):
                continue

            if _is_whitespace(c):
                self._previous_byte_offset = byte_offset + len(c.encode("utf-8"))
                self._previous_char_offset = char_idx + 1
                continue

            peeked = self._peek()
            if peeked is not None and not _is_whitespace(peeked[2]):
                continue

            item = self._craft_token(char_idx, byte_offset)
            if item is not None:
                return item
        raise StopIteration


Line = tuple[int, str, range]


class Gluon:
    """Glue tokens back together into lines no wider than `max_line_width`.

    Yields `(line number, line content, char range)` with line numbers from 1.
    """

    def __init__(
        self, s: str, max_line_width: int, indentations: Sequence[Indentation]
    ) -> None:
        self._queue: deque[tuple[range, str]] = deque()
        self._max_line_width = max_line_width
        self._line_counter = 0
        self._indentations = tuple(indentations)
        self._inner = Tokeneer(s)

    def add_unbreakables(self, unbreakable_ranges: Iterable[range]) -> None:
        self._inner.add_unbreakables(unbreakable_ranges)

    def _craft_line(self) -> Line:
        self._line_counter += 1
        start, end = sys.maxsize, 0
        parts = []
        while self._queue:
            char_range, text = self._queue.popleft()
            start = min(start, char_range.start)
            end = max(end, char_range.stop)
            parts.append(text)
        return self._line_counter, " ".join(parts), range(start, end)

    def _current_indentation(self) -> Indentation:
        index = self._line_counter + 1
        if index < len(self._indentations):
            return self._indentations[index]
        if self._indentations:
            return self._indentations[-1]
        return Indentation()

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        offset = self._current_indentation().offset
        width = self._max_line_width

        for char_range, _byte_range, text in self._inner:
            if self._queue:
                acc_len = sum(len(r) for r, _ in self._queue) + len(self._queue) - 1
            else:
                acc_len = 0
            item_len = len(char_range)
            item = (char_range, text)

            if offset + acc_len <= width:
                if offset + acc_len + 1 + item_len > width:
                    line = self._craft_line()
                    self._queue.append(item)
                    return line
                self._queue.append(item)
                continue
            if item_len > width:
                log.warning(
                    "An unbreakable chunk is larger than the max line width %d vs %d",
                    item_len,
                    width,
                )
                if acc_len > 0:
                    line = self._craft_line()
                    self._queue.append(item)
                    return line
                self._queue.append(item)
                continue
            line = self._craft_line()
            self._queue.append(item)
            return line

        if not self._queue:
            raise StopIteration
        return self._craft_line()