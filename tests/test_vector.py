import pytest

from pimplstack.vector import Vector


@pytest.mark.parametrize(
    "values, length, capacity",
    [([1.0, 2.0, 3.0], 3, 3), (None, 0, 0)],
)
def test_construction(values, length, capacity):
    v = Vector() if values is None else Vector(values)
    assert list(v) == (values or [])
    assert len(v) == length
    assert v.capacity() == capacity


@pytest.mark.parametrize("kwargs, expected", [({"coef": 1.5}, 1.5), ({}, 2.0)])
def test_load_factor_is_coefficient(kwargs, expected):
    assert Vector(**kwargs).load_factor() == expected


def test_push_back_and_front():
    v = Vector()
    v.push_back(2.0)
    v.push_back(3.0)
    v.push_front(1.0)
    assert list(v) == [1.0, 2.0, 3.0]
    assert v.capacity() >= len(v)


@pytest.mark.parametrize("coef, count", [(2.0, 50), (0.5, 5)])
def test_capacity_grows_to_hold_elements(coef, count):
    v = Vector(coef=coef)
    for value in range(count):
        v.push_back(value)
        assert v.capacity() >= len(v)
    assert list(v) == list(range(count))


@pytest.mark.parametrize(
    "start, values, pos, expected",
    [
        ([1.0, 3.0], [2.0], 1, [1.0, 2.0, 3.0]),
        ([1.0, 4.0], [2.0, 3.0], 1, [1.0, 2.0, 3.0, 4.0]),
        ([1.0, 4.0], Vector([2.0, 3.0]), 1, [1.0, 2.0, 3.0, 4.0]),
    ],
)
def test_insertions(start, values, pos, expected):
    v = Vector(start)
    if isinstance(values, list) and len(values) == 1:
        v.insert(values[0], pos)
    else:
        v.insert_values(values, pos)
    assert list(v) == expected


@pytest.mark.parametrize("pos", [2, -1])
def test_insert_out_of_range(pos):
    with pytest.raises(ValueError):
        Vector([1.0]).insert(5.0, pos)


@pytest.mark.parametrize(
    "values, pos", [([], 0), ([2.0], 3), (None, 0), (Vector(), 0)]
)
def test_insert_values_errors(values, pos):
    with pytest.raises(ValueError):
        Vector([1.0]).insert_values(values, pos)


def test_pop_back_and_front():
    v = Vector([1.0, 2.0, 3.0])
    v.pop_back()
    assert list(v) == [1.0, 2.0]
    v.pop_front()
    assert list(v) == [2.0]
    v.pop_front()
    v.pop_back()
    assert len(v) == 0


@pytest.mark.parametrize(
    "start, pos, count, expected",
    [
        ([1.0, 2.0, 3.0, 4.0], 2, 10, [1.0, 2.0]),
        ([1.0, 2.0], 5, 1, [1.0, 2.0]),
        ([1.0, 2.0], -1, 1, [1.0, 2.0]),
    ],
)
def test_erase(start, pos, count, expected):
    v = Vector(start)
    v.erase(pos, count)
    assert list(v) == expected


def test_erase_between_documented_example():
    v = Vector([1, 2, 3, 4])
    v.erase_between(1, 3)
    assert list(v) == [1, 4]


@pytest.mark.parametrize("begin, end", [(2, 2), (-1, 2)])
def test_erase_between_invalid(begin, end):
    with pytest.raises(ValueError):
        Vector([1, 2, 3]).erase_between(begin, end)


def test_clear_keeps_capacity():
    v = Vector([1.0, 2.0, 3.0])
    v.clear()
    assert (len(v), v.capacity()) == (0, 3)


@pytest.mark.parametrize("idx, expected", [(0, 1.0), (4, 2.0), (-1, 3.0)])
def test_indexing_wraps(idx, expected):
    assert Vector([1.0, 2.0, 3.0])[idx] == expected


def test_setitem_wraps():
    v = Vector([1.0, 2.0, 3.0])
    v[3] = 9.0
    assert list(v) == [9.0, 2.0, 3.0]


def test_indexing_empty_raises():
    v = Vector()
    with pytest.raises(IndexError):
        v[0] = 1.0
    assert len(v) == 0
    assert list(v) == []
    with pytest.raises(IndexError):
        value = v[0]
        assert value == 1.0


@pytest.mark.parametrize("value, expected", [(2.0, 1), (7.0, -1)])
def test_find(value, expected):
    assert Vector([1.0, 2.0, 2.0]).find(value) == expected


def test_reserve_and_shrink():
    v = Vector([1.0, 2.0])
    v.reserve(10)
    assert v.capacity() == 10
    v.reserve(5)
    assert v.capacity() == 10
    v.shrink_to_fit()
    assert v.capacity() == 2
    assert list(v) == [1.0, 2.0]


def test_copy_is_independent():
    v = Vector([1.0, 2.0], coef=3.0)
    v.reserve(8)
    c = v.copy()
    c.push_back(3.0)
    assert list(v) == [1.0, 2.0]
    assert list(c) == [1.0, 2.0, 3.0]
    assert c.load_factor() == 3.0
    assert v.copy().capacity() == 2