import pytest

from spellmend.tokens import Gluon, Indentation, Tokeneer


def tokens_of(content, unbreakables):
    return [text for _chars, _bytes, text in Tokeneer(content, unbreakables)]


def verify_reflow(content, expected, max_line_width, unbreakables, indentations):
    gluon = Gluon(content, max_line_width, [Indentation(n) for n in indentations])
    gluon.add_unbreakables(unbreakables)
    lines = [(number, text) for number, text, _range in gluon]
    assert lines == list(enumerate(expected.splitlines(), start=1))


def test_tokeneer_smilies():
    assert tokens_of("🍇🌡 🌤", [range(0, 2)]) == ["🍇🌡", "🌤"]


def test_tokeneer_multi_char():
    assert tokens_of("abc xyz qwert", []) == ["abc", "xyz", "qwert"]


def test_tokeneer_partial_covered_word_unbreakable():
    assert tokens_of("abc xyz qwert", [range(2, 5)]) == ["abc xyz", "qwert"]


def test_tokeneer_ranges_match_text():
    content = "🍇🌡 🌤 word"
    data = content.encode("utf-8")
    for char_range, byte_range, text in Tokeneer(content):
        assert content[char_range.start:char_range.stop] == text
        assert data[byte_range.start:byte_range.stop].decode("utf-8") == text


def test_tokeneer_add_unbreakables_later():
    tokeneer = Tokeneer("abc xyz qwert")
    tokeneer.add_unbreakables([range(2, 5)])
    assert [text for _c, _b, text in tokeneer] == ["abc xyz", "qwert"]


def test_tokeneer_exhausted_stays_exhausted():
    tokeneer = Tokeneer("one")
    assert [text for _c, _b, text in tokeneer] == ["one"]
    with pytest.raises(StopIteration):
        next(tokeneer)


def test_tokeneer_whitespace_only():
    assert tokens_of("   \t  ", []) == []


def test_wrap_too_long_fluid():
    verify_reflow(
        "something kinda too long for a single line",
        "something kinda too long for a\nsingle line",
        30,
        [],
        [0],
    )


def test_wrap_too_short_fluid():
    verify_reflow(
        "something\nkinda\ntoo\nshort\nfor\na\nsingle\nline",
        "something kinda too short for\na single line",
        30,
        [],
        [0] * 8,
    )


def test_wrap_just_fine():
    content = "just fine, no action required 🐱"
    verify_reflow(content, content, 40, [], [0])


def test_wrap_too_long_unbreakable():
    verify_reflow(
        "something kinda too Xong for a singlX line",
        "something kinda too\nXong for a singlX line",
        30,
        [range(20, 37)],
        [0],
    )


def test_spaces_and_tabs():
    verify_reflow("        something     kinda       ", "something kinda", 20, [], [0])


def test_deep_indentation_too_long():
    verify_reflow("deep indentation", "deep\nindentation", 20, [], [15])


def test_deep_indentation_too_short():
    verify_reflow("deep\nindentation", "deep indentation", 22, [], [5, 5])


def test_gluon_char_range_covers_line():
    lines = list(Gluon("something kinda too long for a single line", 30, [Indentation(0)]))
    assert lines[0][2] == range(0, 30)
    assert lines[1][2] == range(31, 42)


def test_gluon_empty_input():
    assert list(Gluon("", 10, [])) == []


def test_indentation_str():
    assert str(Indentation(3)) == "   "
    assert str(Indentation.with_str(2, "\t\t")) == "\t\t"


def test_indentation_skipping():
    assert Indentation(7).to_string_skipping(4) == "   "
    assert Indentation(2).to_string_skipping(4) == ""
    assert Indentation.with_str(3, "abc").to_string_skipping(2) == "ab"