from pathlib import Path

import pytest

from spellmend.display import Detector
from spellmend.suggestion import Suggestion, SuggestionSet

ORIGIN = Path("/tmp/test/entity.rs")
REPLACEMENTS = ["replacement_0", "replacement_1", "replacement_2"]
DESCRIPTION = "Possible spelling mistake found."


def make(span, rng=range(0, 1), chunk="x", origin=ORIGIN, replacements=(), description=None):
    return Suggestion(
        detector=Detector.HUNSPELL,
        origin=origin,
        chunk=chunk,
        span=span,
        range=rng,
        replacements=replacements,
        description=description,
    )


def test_fmt_0_single():
    s = make(((1, 6), (1, 10)), range(7, 12), " Is it dyrck again?", replacements=REPLACEMENTS,
             description=DESCRIPTION)
    expected = (
        "error: spellcheck(Hunspell)\n"
        "  --> /tmp/test/entity.rs:1\n"
        "   |\n"
        " 1 |  Is it dyrck again?\n"
        "   |        ^^^^^\n"
        "   | - replacement_0, replacement_1, or replacement_2\n"
        "   |\n"
        "   |   Possible spelling mistake found.\n"
    )
    assert f"{s:80}" == expected


def test_fmt_0_no_suggestion():
    s = make(((1, 6), (1, 10)), range(7, 12), " Is it dyrck again?", description=DESCRIPTION)
    expected = (
        "error: spellcheck(Hunspell)\n"
        "  --> /tmp/test/entity.rs:1\n"
        "   |\n"
        " 1 |  Is it dyrck again?\n"
        "   |        ^^^^^\n"
        "   |   Possible spelling mistake found.\n"
    )
    assert f"{s:80}" == expected


def test_fmt_1_multi():
    content = " Line mitake 1\n Anowher 2\n Last"
    s = make(((1, 10), (1, 15)), range(6, 12), content, replacements=REPLACEMENTS,
             description=DESCRIPTION)
    expected = (
        "error: spellcheck(Hunspell)\n"
        "  --> /tmp/test/entity.rs:1\n"
        "   |\n"
        " 1 |  Line mitake 1\n"
        "   |       ^^^^^^\n"
        "   | - replacement_0, replacement_1, or replacement_2\n"
        "   |\n"
        "   |   Possible spelling mistake found.\n"
    )
    assert f"{s:80}" == expected


def test_fmt_2_multi_80_plus():
    long_line = " S" + "u" * 45 + "per d" + "u" * 24 + "per too long"
    content = " Line mitake 1\n" + long_line + "\n "
    s = make(((2, 5), (2, 92)), range(66, 94), content, replacements=REPLACEMENTS,
             description=DESCRIPTION)
    expected = (
        "error: spellcheck(Hunspell)\n"
        "  --> /tmp/test/entity.rs:2\n"
        "   |\n"
        " 2 | .." + "u" * 42 + "per duuu...uper too long\n"
        "   |" + " " * 49 + "^" * 11 + "\n"
        "   | - replacement_0, replacement_1, or replacement_2\n"
        "   |\n"
        "   |   Possible spelling mistake found.\n"
    )
    assert f"{s:80}" == expected


def test_multiline_chunk_second_line():
    s = make(((8, 0), (8, 3)), range(2, 6), "0\n2345\n7@n", replacements=["whocares"])
    expected = (
        "error: spellcheck(Hunspell)\n"
        "  --> /tmp/test/entity.rs:8\n"
        "   |\n"
        " 8 | 2345\n"
        "   | ^^^^\n"
        "   | - whocares\n"
        "   |\n"
        "   |"
    )
    assert f"{s:80}" == expected


def test_ordering_by_span():
    a = make(((1, 2), (1, 5)))
    b = make(((1, 2), (1, 7)))
    c = make(((2, 0), (2, 1)))
    assert sorted([c, b, a]) == [a, b, c]
    assert a < b < c


def test_replacements_stored_as_tuple_and_hashable():
    s = make(((1, 0), (1, 1)), replacements=["a", "b"])
    assert s.replacements == ("a", "b")
    assert hash(s) == hash(make(((1, 0), (1, 1)), replacements=("a", "b")))


def test_set_add_and_counts():
    sset = SuggestionSet()
    sset.add("b.rs", make(((1, 0), (1, 1))))
    sset.add("b.rs", make(((2, 0), (2, 1))))
    sset.add("a.rs", make(((1, 0), (1, 1))))
    assert len(sset) == 2
    assert sset.total_count() == 3
    assert list(sset.files()) == ["b.rs", "a.rs"]


def test_set_append_extend():
    sset = SuggestionSet()
    items = [make(((1, 0), (1, 1))), make(((3, 0), (3, 1)))]
    sset.append("x.rs", items)
    sset.extend("x.rs", iter([make(((2, 0), (2, 1)))]))
    assert [s.span[0][0] for s in sset.suggestions("x.rs")] == [1, 3, 2]


def test_set_suggestions_missing_origin():
    sset = SuggestionSet()
    with pytest.raises(KeyError):
        sset.suggestions("nope.rs")


def test_set_sort():
    sset = SuggestionSet()
    sset.add("z/b.rs", make(((3, 0), (3, 4))))
    sset.add("z/b.rs", make(((1, 0), (1, 9))))
    sset.add("z/b.rs", make(((1, 0), (1, 2))))
    sset.add("a.rs", make(((1, 0), (1, 1))))
    sset.sort()
    assert list(sset.files()) == ["a.rs", "z/b.rs"]
    spans = [s.span for s in sset.suggestions("z/b.rs")]
    assert spans == [((1, 0), (1, 2)), ((1, 0), (1, 9)), ((3, 0), (3, 4))]


def test_set_join_and_iter():
    first = SuggestionSet()
    first.add("a.rs", make(((1, 0), (1, 1))))
    second = SuggestionSet()
    second.add("a.rs", make(((2, 0), (2, 1))))
    second.add("b.rs", make(((5, 0), (5, 1))))
    first.join(second)
    assert first.total_count() == 3
    assert {origin: len(v) for origin, v in first} == {"a.rs": 2, "b.rs": 1}