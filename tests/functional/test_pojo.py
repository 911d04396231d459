import pytest
from flowkit import NOT_FOUND
from flowkit.functional import array as A
from flowkit.functional import number as N
from flowkit.functional import pojo as P


@pytest.fixture
def xyz():
    return {"x": 3, "y": 4, "z": 5}


def test_prop_quantifiers():
    assert P.all_props_satisfy(N.is_positive)({"x": 3, "y": 4, "z": 5}) is True
    assert P.all_props_satisfy(N.is_positive)({"x": 3, "y": -4, "z": 5}) is False
    assert P.any_prop_satisfies(N.is_positive)({"x": -3, "y": -4, "z": 5}) is True
    assert P.any_prop_satisfies(N.is_positive)({"x": -3, "y": -4, "z": -5}) is False
    assert P.no_prop_satisfies(N.is_positive)({"x": -3, "y": -4, "z": -5}) is True
    assert P.no_prop_satisfies(N.is_positive)({"x": -3, "y": -4, "z": 5}) is False


def test_entries_keys_values(xyz):
    assert P.entries(xyz) == [("x", 3), ("y", 4), ("z", 5)]
    assert P.keys(xyz) == ["x", "y", "z"]
    assert P.values(xyz) == [3, 4, 5]
    assert P.entries({}) == []
    assert P.keys({}) == []
    assert P.values({}) == []


def test_filter():
    assert P.filter(N.is_positive)({"x": 3, "y": -4, "z": 5}) == {"x": 3, "z": 5}
    assert P.filter(N.is_positive)({}) == {}
    same_as_key = P.filter_with_key(lambda k, v: k == v)
    assert same_as_key({"x": "x", "y": "weasel", "z": "z"}) == {"x": "x", "z": "z"}


def test_from_spec():
    ends = P.from_spec({"first": A.first, "last": A.last})
    assert ends([3, 4, 5, 6]) == {"first": 3, "last": 6}
    assert ends([]) == {"first": NOT_FOUND, "last": NOT_FOUND}


def test_get_or():
    assert P.get_or("x")({"x": 5}) == 5
    assert P.get_or("y", 10)({"x": 5}) == 10
    assert P.get_or("y")({"x": 5}) is NOT_FOUND
    assert P.get_or("x", 10)({"x": None}) is None


def test_has_key_and_is_empty():
    assert P.has_key("x")({"x": 5}) is True
    assert P.has_key("x")({"y": 2}) is False
    assert P.has_key("x")({"x": None}) is True
    assert P.is_empty({}) is True
    assert P.is_empty({"x": 4}) is False


def test_map():
    assert P.map(N.multiply(10))({"x": 3, "y": 4}) == {"x": 30, "y": 40}
    assert P.map(N.multiply(10))({}) == {}
    weights = {"x": 10, "y": 20}
    assert P.map_with_key(lambda v, k: v * weights[k])({"x": 3, "y": 4}) == {"x": 30, "y": 80}


def test_merge():
    assert P.merge({"x": 2})({"x": 3, "y": 5}) == {"x": 2, "y": 5}
    assert P.merge({"x": 2})({"y": 5}) == {"x": 2, "y": 5}
    assert P.merge_into({"x": 2})({"x": 3, "y": 5}) == {"x": 3, "y": 5}
    assert P.merge_into({"x": 2})({"y": 5}) == {"x": 2, "y": 5}


def test_pick(xyz):
    assert P.pick(["x", "z"])(xyz) == {"x": 3, "z": 5}
    assert P.pick(["x", "w"])(xyz) == {"x": 3}
    assert P.pick([])(xyz) == {}


def test_prop_equals():
    has_five = P.prop_equals("x", 5)
    assert has_five({"x": 5, "y": 3}) is True
    assert has_five({"x": 3, "y": 5}) is False
    assert has_five({"y": 5}) is False
    assert P.prop_equals("x", 1)({"x": True}) is False
    assert P.prop_equals("x", None)({}) is False


def test_prop_satisfies():
    assert P.prop_satisfies("x", N.is_positive)({"x": 5, "y": 3}) is True
    assert P.prop_satisfies("x", N.is_positive)({"x": -5, "y": 3}) is False
    assert P.prop_satisfies("x", lambda v: v is NOT_FOUND)({"y": 3}) is True


def test_regroup():
    assert P.regroup({"x": {"a": 1, "b": 2}, "y": {"a": 3, "b": 4}}) == {
        "a": {"x": 1, "y": 3},
        "b": {"x": 2, "y": 4},
    }
    assert P.regroup({"x": {"a": 1}, "y": {"b": 2}}) == {"a": {"x": 1}, "b": {"y": 2}}
    assert P.regroup({}) == {}


def test_remove():
    drop_x = P.remove("x")
    drop_xy = P.remove(["x", "y"])
    assert drop_x({"x": 3, "y": 5, "z": 4}) == {"y": 5, "z": 4}
    assert drop_xy({"x": 3, "y": 5, "z": 4}) == {"z": 4}
    assert drop_x({"x": 3}) == {}
    assert drop_xy({"z": 4}) == {"z": 4}
    assert drop_x({}) == {}


def test_set():
    assert P.set("x", 5)({"x": 3}) == {"x": 5}
    assert P.set("x", 5)({"y": 3}) == {"y": 3, "x": 5}
    assert P.set("x", 5, False)({"y": 3}) == {"y": 3}
    assert P.set("x", 5, False)({"x": 3}) == {"x": 5}


def test_records_are_not_mutated(xyz):
    original = dict(xyz)
    P.set("x", 0)(xyz)
    P.remove("x")(xyz)
    P.merge({"w": 1})(xyz)
    assert xyz == original
    assert P.set("w", 0, False)(xyz) is not xyz
