"""Rewrap documentation paragraphs to a maximum line width."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from spellmend.tokens import Gluon, Indentation

log = logging.getLogger(__name__)


class _Kind(enum.Enum):
    COMMON_MARK = "CommonMark"
    TRIPLE_SLASH = "TripleSlash"
    DOUBLE_SLASH_EM = "DoubleSlashEM"
    MACRO_DOC_EQ_STR = "MacroDocEqStr"


@dataclass(frozen=True)
class CommentStyle:
    """How a documentation comment is written in its source file.

    `macro_prefix` and `hashes` are only meaningful for `#[doc = "..."]`
    style comments: the text up to the string literal and the number of
    hashes plus one for raw strings (0 is a plain string, 1 is `r"..."`).
    """

    kind: _Kind
    macro_prefix: str = ""
    hashes: int = 0

    @classmethod
    def common_mark(cls) -> "CommentStyle":
        return cls(_Kind.COMMON_MARK)

    @classmethod
    def triple_slash(cls) -> "CommentStyle":
        return cls(_Kind.TRIPLE_SLASH)

    @classmethod
    def double_slash_em(cls) -> "CommentStyle":
        return cls(_Kind.DOUBLE_SLASH_EM)

    @classmethod
    def macro_doc_eq_str(cls, prefix: str, hashes: int) -> "CommentStyle":
        return cls(_Kind.MACRO_DOC_EQ_STR, prefix, hashes)

    @property
    def is_line_comment(self) -> bool:
        """Whether every line starts with `///` or `//!`."""
        return self.kind in (_Kind.TRIPLE_SLASH, _Kind.DOUBLE_SLASH_EM)

    def prefix_string(self) -> str:
        if self.kind is _Kind.TRIPLE_SLASH:
            return "///"
        if self.kind is _Kind.DOUBLE_SLASH_EM:
            return "//!"
        if self.kind is _Kind.MACRO_DOC_EQ_STR:
            if self.hashes == 0:
                return self.macro_prefix + '"'
            return self.macro_prefix + "r" + "#" * (self.hashes - 1) + '"'
        return ""

    def suffix_string(self) -> str:
        if self.kind is _Kind.MACRO_DOC_EQ_STR:
            return '"' + "#" * max(self.hashes - 1, 0) + "]"
        return ""

    def prefix_len(self) -> int:
        """Length of the prefix in characters."""
        return len(self.prefix_string())

    def suffix_len(self) -> int:
        """Length of the suffix in characters."""
        return len(self.suffix_string())


def detect_line_delimiter(s: str) -> Optional[str]:
    """Return the dominant line delimiter of `s`, or None if it has no newline."""
    lf = s.count("\n")
    if lf == 0:
        return None
    crlf = s.count("\r\n")
    lfcr = s.count("\n\r")
    lone = lf - max(crlf, lfcr)
    if lfcr > 0 and lfcr >= crlf and lfcr >= lone:
        return "\n\r"
    if crlf > lone:
        return "\r\n"
    return "\n"


def _lines(s: str) -> list[str]:
    """Split on `\\n`, dropping a `\\r` before it and a trailing empty line."""
    if not s:
        return []
    parts = s.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def reflow_paragraph(
    s: str,
    range: range,
    unbreakable_ranges: Sequence[range],
    indentations: Sequence[Indentation],
    max_line_width: int,
    style: CommentStyle,
) -> Optional[str]:
    """Rewrap the paragraph at char `range` of `s`.

    Returns the replacement text, or None if no reflow is needed. Raises
    ValueError if `indentations` is empty.
    """
    line_delimiter = detect_line_delimiter(s)
    if line_delimiter is None:
        log.warning("Could not determine a line delimiter, falling back to \\n")
        line_delimiter = "\n"

    s_absolute = s[range.start:range.stop]
    last_char_is_newline = len(s) >= 2 and s[-1] == "\n"

    shift = range.start
    unbreakables = [
        type(range)(max(r.start - shift, 0), max(r.stop - shift, 0))
        for r in unbreakable_ranges
    ]

    gluon = Gluon(s_absolute, max_line_width, indentations)
    gluon.add_unbreakables(unbreakables)

    lines = iter(_lines(s_absolute))
    indents = iter(indentations)
    if not indentations:
        raise ValueError("No line indentation present.")
    last_indent = indentations[-1]

    first = next(gluon, None)
    if first is None:
        return None
    _lineno, content, _range = first
    reflow_applied = next(lines, None) != content

    suffix = style.suffix_string()
    prefix = style.prefix_string()
    acc = content + suffix
    if acc:
        acc += line_delimiter

    if style.is_line_comment:
        skip_n, extra_space = style.prefix_len() + 1, " "
    else:
        skip_n, extra_space = style.prefix_len(), ""

    parts = [acc]
    for _lineno, content, _range in gluon:
        if next(lines, None) == content:
            reflow_applied = True
        pre = next(indents, last_indent).to_string_skipping(skip_n)
        parts.append(pre + prefix + extra_space + content + suffix + line_delimiter)
    joined = "".join(parts)

    if not joined.endswith(line_delimiter):
        return None
    result = joined[: -len(line_delimiter)]

    if not reflow_applied:
        return None
    if suffix and result.endswith(suffix):
        result = result[: -len(suffix)]
    if style.kind is _Kind.COMMON_MARK and last_char_is_newline and result:
        result += line_delimiter
    if result == s_absolute:
        log.debug("Constraints of unbreakable sequences could not resolve too long lines")
        return None
    return result