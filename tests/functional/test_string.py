import math
import re

import pytest
from flowkit import NOT_FOUND
from flowkit.functional import string as S


def test_append_prepend_concat():
    assert S.append("sel")("wea") == "weasel"
    assert S.prepend("wea")("sel") == "weasel"
    assert S.concat("e", "ase", "l")("w") == "weasel"
    assert S.concat("e", "ase", "l")("") == "easel"
    assert S.concat()("w") == "w"


def test_starts_and_ends_with():
    assert S.starts_with("wea")("weasel") is True
    assert S.starts_with("wea")("_wea") is False
    assert S.starts_with("wea")("we") is False
    assert S.ends_with("sel")("weasel") is True
    assert S.ends_with("sel")("sel_") is False
    assert S.ends_with("sel")("el") is False


@pytest.mark.parametrize(
    "index, expected",
    [(2, "c"), (-2, "e"), (0, "a"), (-6, "a"), (-7, NOT_FOUND), (6, NOT_FOUND)],
)
def test_get(index, expected):
    assert S.get(index)("abcdef") == expected


def test_get_with_fractional_index_is_invalid():
    assert S.get(1.5)("abcdef") is None


def test_includes():
    assert S.includes("as")("weasel") is True
    assert S.includes("as")("hippo") is False
    assert S.includes_regex(re.compile(r"[aeiou]", re.IGNORECASE))("WEASEL") is True
    assert S.includes_regex(r"[aeiou]")("qqq") is False


def test_insert():
    assert S.insert(0, "__")("gray") == "__gray"
    assert S.insert(2, "__")("gray") == "gr__ay"
    assert S.insert(4, "__")("gray") == "gray__"
    assert S.insert(4, "__")("gra") == "gra"
    assert S.insert(-1, "__")("gray") == "gra__y"
    assert S.insert(-4, "__")("gray") == "__gray"
    assert S.insert(-4, "__")("gra") == "gra"
    assert S.insert(2, "")("gra") == "gra"
    assert S.insert(1.5, "__")("gra") == "gra"


def test_length():
    assert S.length("weasel") == 6
    assert S.length("") == 0


def test_matches():
    assert S.matches(r"[ae]")("weasel") == ["e", "a", "e"]
    assert S.matches(re.compile(r"[ae]"))("weasel") == ["e", "a", "e"]
    assert S.matches(r"[ae]")("hippo") is NOT_FOUND


def test_match_groups():
    pair = S.match_groups(r"(\d),(\d)")
    assert pair("(4,6)") == ["4,6", "4", "6"]
    assert pair("(4,6) (3,2)") == ["4,6", "4", "6"]
    assert pair("hippo") is NOT_FOUND


def test_match_groups_all():
    pairs = S.match_groups_all(r"(\d),(\d)")
    assert pairs("(4,6)") == [["4,6", "4", "6"]]
    assert pairs("(4,6) (3,2)") == [["4,6", "4", "6"], ["3,2", "3", "2"]]
    assert pairs("hippo") == []


def test_pad_left():
    assert S.pad_left(10, ".")("weasel") == "....weasel"
    assert S.pad_left(10, ".")("grayweasel") == "grayweasel"
    assert S.pad_left(10, "_.")("weasel") == "_._.weasel"
    assert S.pad_left(10, "_.")("aweasel") == "_._aweasel"
    assert S.pad_left(10, "")("weasel") is None
    assert S.pad_left(10)("weasel") == "    weasel"


def test_pad_right():
    assert S.pad_right(10, ".")("weasel") == "weasel...."
    assert S.pad_right(10, ".")("grayweasel") == "grayweasel"
    assert S.pad_right(10, "_.")("weasel") == "weasel_._."
    assert S.pad_right(10, "_.")("aweasel") == "aweasel_._"
    assert S.pad_right(10, "")("weasel") is None
    assert S.pad_right(10)("weasel") == "weasel    "


def test_pad_with_empty_fill_keeps_long_strings():
    assert S.pad_left(3, "")("weasel") == "weasel"


@pytest.mark.parametrize("length", [10.5, math.nan, math.inf, "10", None])
def test_pad_with_non_integer_length_is_none(length):
    assert S.pad_left(length, ".")("weasel") is None
    assert S.pad_right(length, ".")("weasel") is None


def test_pad_accepts_integral_float_length():
    assert S.pad_left(8.0, ".")("weasel") == "..weasel"


def test_replace():
    assert S.replace("e", "_")("weasel") == "w_asel"
    assert S.replace("e", S.to_upper_case)("weasel") == "wEasel"
    assert S.replace(re.compile(r"[a-e]"), "_")("weasel") == "w_asel"
    assert S.replace(re.compile(r"[a-e]"), S.to_upper_case)("weasel") == "wEasel"


def test_replace_all():
    assert S.replace_all("e", "_")("weasel") == "w_as_l"
    assert S.replace_all("e", S.to_upper_case)("weasel") == "wEasEl"
    assert S.replace_all(re.compile(r"[a-e]"), "_")("weasel") == "w__s_l"
    assert S.replace_all(re.compile(r"[a-e]"), S.to_upper_case)("weasel") == "wEAsEl"


def test_replace_treats_targets_and_replacements_literally():
    assert S.replace_all(".", "!")("a.b.c") == "a!b!c"
    assert S.replace_all(re.compile(r"(\d)"), r"\1\1")("a1") == r"a\1\1"


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (2, None, "asel"),
        (-2, None, "el"),
        (2, 3, "a"),
        (-5, -3, "ea"),
        (10, None, ""),
        (-10, None, "weasel"),
        (2.5, None, ""),
        (2, 2.5, ""),
    ],
)
def test_slice(start, end, expected):
    assert S.slice(start, end)("weasel") == expected


def test_split():
    assert S.split("as")("class of weasels") == ["cl", "s of we", "els"]
    assert S.split("")("abc") == ["a", "b", "c"]
    assert S.split(",")("") == [""]


def test_case_and_trim():
    assert S.to_lower_case("WEASEL") == "weasel"
    assert S.to_upper_case("weasel") == "WEASEL"
    assert S.trim(" weasel ") == "weasel"
    assert S.trim_left(" weasel ") == "weasel "
    assert S.trim_right(" weasel ") == " weasel"
