# tests/test_parsing.py
from __future__ import annotations

import threading

import pytest

from keyword_parser import Keywords, Parser, Prefixes, parse_keywords


def _lists(kw: Keywords) -> tuple[list[str], list[str], list[str]]:
    return list(kw.positive), list(kw.negative), list(kw.other)


# ─────────────────────────────────────────────────────────────────────────────
# Scenarios (default prefixes: ',', '+', '-')
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw,positive,negative,other",
    [
        ("+foo,-bar,+baz", ["foo", "baz"], ["bar"], []),
        ("foo, -bar , +baz", ["baz"], ["bar"], ["foo"]),
        ("+,-,foo", [], [], ["foo"]),                      # bare markers dropped
        ("", [], [], []),
        ("+foo,,+bar", ["foo", "bar"], [], []),            # empty segment dropped
        ("+foo,-bar,+baz,bak", ["foo", "baz"], ["bar"], ["bak"]),
        ("  +  spaced out ,-\tbar\t", ["spaced out"], ["bar"], []),
        ("+-foo,-+bar", ["-foo"], ["+bar"], []),           # only one marker stripped
        ("++foo", ["+foo"], [], []),
        ("bar-baz,foo+", [], [], ["bar-baz", "foo+"]),     # marker only counts when leading
        (" , ,\t", [], [], []),
    ],
)
def test_default_scenarios(raw, positive, negative, other):
    assert _lists(Parser(raw).parse()) == (positive, negative, other)


def test_custom_separator_and_markers():
    prefixes = Prefixes(separator=";", positive="#", negative="!")
    kw = Parser("#alpha;!beta;gamma", prefixes).parse()
    assert _lists(kw) == (["alpha"], ["beta"], ["gamma"])


def test_custom_separator_keeps_default_separator_as_text():
    prefixes = Prefixes(separator=";")
    kw = Parser("+a,b;-c", prefixes).parse()
    assert _lists(kw) == (["a,b"], ["c"], [])


def test_multi_character_markers():
    prefixes = Prefixes(positive="yes!!", negative="no!!")
    kw = Parser("yes!!foo,no!!bar,yes!!baz", prefixes).parse()
    assert _lists(kw) == (["foo", "baz"], ["bar"], [])


def test_whitespace_separator():
    kw = Parser("+hoodie -youth  hat", Prefixes(separator=" ")).parse()
    assert _lists(kw) == (["hoodie"], ["youth"], ["hat"])


# ─────────────────────────────────────────────────────────────────────────────
# Result shape & purity
# ─────────────────────────────────────────────────────────────────────────────

def test_result_unpacks_as_three_tuples():
    positive, negative, other = Parser("+a,-b,c").parse()
    assert positive == ("a",)
    assert negative == ("b",)
    assert other == ("c",)


def test_classify_is_alias_of_parse():
    p = Parser("+a,-b,c")
    assert p.classify() == p.parse()


def test_parse_is_idempotent_and_input_untouched():
    raw = " +x , -y ,z,,+ "
    p = Parser(raw)
    first = p.parse()
    assert all(p.parse() == first for _ in range(5))
    assert p.input == raw


def test_parse_keywords_shorthand():
    assert parse_keywords("+a,-b") == Parser("+a,-b").parse()
    assert parse_keywords("+a", retain_prefix=True).positive == ("+a",)


def test_concurrent_calls_on_shared_parser():
    p = Parser(",".join(f"+k{i},-n{i},o{i}" for i in range(200)))
    expected = p.parse()
    results: list[Keywords] = []
    lock = threading.Lock()

    def _worker():
        out = p.parse()
        with lock:
            results.append(out)

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert all(r == expected for r in results)


# ─────────────────────────────────────────────────────────────────────────────
# Properties: accounting, order, no empties, stripping
# ─────────────────────────────────────────────────────────────────────────────

PROPERTY_INPUTS = [
    "",
    ",",
    "+foo,-bar,+baz",
    "foo, -bar , +baz",
    "+,-,foo",
    "+foo,,+bar",
    " a ,+ b,- c,,d,+,-, ",
    "++x,--y,+-z,-+w",
]


@pytest.mark.parametrize("raw", PROPERTY_INPUTS)
def test_total_accounting(raw):
    p = Parser(raw)
    kw, discarded = p.parse_with_stats()
    assert len(kw.positive) + len(kw.negative) + len(kw.other) + discarded == p.segment_count()
    assert p.segment_count() == len(raw.split(","))


@pytest.mark.parametrize("raw", PROPERTY_INPUTS)
def test_no_empty_tokens(raw):
    kw = Parser(raw).parse()
    for bucket in kw:
        assert all(tok and tok.strip() == tok for tok in bucket)


@pytest.mark.parametrize("raw", PROPERTY_INPUTS)
def test_order_and_stripping(raw):
    kw = Parser(raw).parse()
    segs = [s.strip() for s in raw.split(",") if s.strip()]
    expected_pos = [s[1:].strip() for s in segs if s.startswith("+") and s[1:].strip()]
    expected_neg = [s[1:].strip() for s in segs if s.startswith("-") and s[1:].strip()]
    expected_other = [s for s in segs if not s.startswith(("+", "-"))]
    assert list(kw.positive) == expected_pos
    assert list(kw.negative) == expected_neg
    assert list(kw.other) == expected_other


# ─────────────────────────────────────────────────────────────────────────────
# retain_prefix
# ─────────────────────────────────────────────────────────────────────────────

def test_retain_prefix_keeps_markers():
    p = Parser("+foo,-bar,baz", retain_prefix=True)
    assert _lists(p.parse()) == (["+foo"], ["-bar"], ["baz"])


def test_retain_prefix_still_drops_bare_markers_and_retrims():
    p = Parser("+ , - ,+  foo", retain_prefix=True)
    kw, discarded = p.parse_with_stats()
    assert _lists(kw) == (["+foo"], [], [])
    assert discarded == 2


def test_should_retain_prefix_toggles_and_returns_flag():
    p = Parser("+foo,-bar,+baz")
    assert p.should_retain_prefix(True) is True
    assert p.parse().positive == ("+foo", "+baz")
    assert p.should_retain_prefix(False) is False
    assert _lists(p.parse()) == (["foo", "baz"], ["bar"], [])


# ─────────────────────────────────────────────────────────────────────────────
# Construction guards
# ─────────────────────────────────────────────────────────────────────────────

def test_default_prefixes_when_none():
    assert Parser("x").prefixes == Prefixes()


@pytest.mark.parametrize("bad", [None, 42, b"+foo"])
def test_non_string_input_rejected(bad):
    with pytest.raises(TypeError):
        Parser(bad)


def test_non_prefixes_config_rejected():
    with pytest.raises(TypeError):
        Parser("+a", {"positive": "+", "negative": "-"})
