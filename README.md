# spellmend

A library for keeping documentation comments tidy. It reflows paragraphs to a
maximum line width and keeps ranges you mark as unbreakable, such as code
spans, links and emphasis, whole. It also renders spelling suggestions as
compact reports that fit a terminal.

The package has no runtime dependencies.

## Installation

```
pip install spellmend
```

The test suite needs the `test` extra:

```
pip install "spellmend[test]"
pytest
```

## Modules

### `spellmend.tokens`

- `Tokeneer(s, unbreakable_ranges=())` iterates over the words of `s` and
  yields `(char range, byte range, text)` tuples. Unbreakable ranges are
  character ranges sorted by start. A word that touches one of them is
  extended to the end of that range. More ranges can be added with
  `add_unbreakables`.
- `Gluon(s, max_line_width, indentations)` joins those words into lines. It
  yields `(line number, line content, char range)`, with line numbers starting
  at 1. Each line's `Indentation.offset` counts against the width. If there
  are fewer indentations than lines, the last one is used again.
- `Indentation(offset, s=None)` is the indentation of a single line. It is
  either a column offset or a literal prefix string.
  `to_string_skipping(n)` renders it with `n` columns removed.

```python
from spellmend.tokens import Gluon, Indentation

text = "something kinda too long for a single line"
for line_no, line, _range in Gluon(text, 30, [Indentation(0)]):
    print(line_no, line)
# 1 something kinda too long for a
# 2 single line
```

### `spellmend.reflow`

- `reflow_paragraph(s, range, unbreakable_ranges, indentations,
  max_line_width, style)` rewraps the paragraph at character `range` of `s`.
  - It returns the replacement text, or `None` when no reflow is needed or
    the unbreakable ranges leave the text unchanged.
  - Lines after the first are prefixed with their indentation and the comment
    style's prefix.
  - An empty `indentations` raises `ValueError`.
- `detect_line_delimiter(s)` returns the line ending that `s` mostly uses:
  `"\n"`, `"\r\n"` or `"\n\r"`. It returns `None` when `s` has no newline.
- `CommentStyle` describes how a comment is written. Create one with:
  - `CommentStyle.triple_slash()` for `///`
  - `CommentStyle.double_slash_em()` for `//!`
  - `CommentStyle.common_mark()` for plain Markdown
  - `CommentStyle.macro_doc_eq_str(prefix, hashes)` for `#[doc = "..."]`
    attributes, where `hashes` is 0 for a plain string, 1 for `r"..."` and so
    on.

  `prefix_string()`, `suffix_string()`, `prefix_len()` and `suffix_len()`
  give the text that surrounds each line.

### `spellmend.display`

- `condition_display_content(terminal_size, indent, stripped_line,
  mistake_range, terminal_print_offset_left, marker_size)` fits a line onto
  one terminal line around the mistake.
  - The context is trimmed with `..` on either side.
  - A mistake longer than 20 characters is shortened to its first and last
    four characters joined by `...`.
  - It returns `(line, marker offset, marker size)`.
- `format_replacements(replacements)` builds the ` - a, b, or c` list. Seven
  or more proposals end in `or one of N others`.
- `get_terminal_size()` returns the width of standard output, or 80 when it
  cannot be determined.
- `Detector` names the checker that produced a suggestion: `HUNSPELL`,
  `NLP_RULES` or `REFLOW`.

### `spellmend.suggestion`

- `Suggestion(detector, origin, chunk, span, range, replacements=(),
  description=None)` is one correctable item.
  - `chunk` is the text of the chunk.
  - `range` is a character range inside the chunk.
  - `span` is `((line, column), (line, column))` in the file, with lines
    counted from 1 and an inclusive end.
  - Suggestions order by span.
  - `str(suggestion)` renders an `error: spellcheck(...)` report for the
    current terminal width. `format(suggestion, "80")` renders it for a given
    width.
- `SuggestionSet` groups suggestions by file, keeping the order in which files
  were first added.
  - Add to it with `add`, `append` and `extend`, and merge another set or any
    iterable of `(origin, suggestions)` pairs with `join`.
  - `files()`, `suggestions(origin)` and iteration give the contents.
    `suggestions` raises `KeyError` for an unknown file.
  - `sort()` orders the files by path and each file's suggestions by span.
  - `len()` counts files. `total_count()` counts suggestions.

### `spellmend.tinhat`

- `TinHat` is a context manager that holds back the shutdown started by a
  termination signal while a write is in progress. `writes_in_progress()`
  reports how many `TinHat` sections are active.
- `signal_handler(fx)` installs handlers for SIGTERM, SIGINT and SIGQUIT where
  the platform has them. On a signal it waits for active `TinHat` sections to
  finish, runs `fx` and exits with status 130. It must be called from the
  main thread.

```python
from pathlib import Path
from spellmend.tinhat import TinHat

with TinHat():
    Path("notes.txt").write_text("updated\n")
```

## What it does not do

- `spellmend` has no command-line tool.
- It does not check spelling or grammar itself, and has no dictionary.
- It does not extract comments from source files or parse Markdown. Callers
  provide:
  - the paragraph ranges
  - the unbreakable ranges
  - the per-line indentations for `reflow_paragraph`
  - the chunk text and spans for `Suggestion`
- It does not apply replacements back to files.