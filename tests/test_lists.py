import pytest

from infratest.lists import list_contains, list_intersection, list_subtract


@pytest.mark.parametrize(
    "items, element, expected",
    [
        ([], "", False),
        ([], "foo", False),
        (["foo"], "foo", True),
        (["bar"], "foo", False),
        (["bar", "foo", "baz"], "foo", True),
        (["bar", "foo", "baz"], "nope", False),
        (["bar", "foo", "baz"], "", False),
    ],
)
def test_list_contains(items, element, expected):
    assert list_contains(items, element) is expected


@pytest.mark.parametrize(
    "list1, list2, expected",
    [
        ([], [], []),
        ([], ["foo"], []),
        (["foo"], [], ["foo"]),
        (["foo"], ["bar"], ["foo"]),
        (["foo"], ["foo"], []),
        (["foo"], ["foo", "bar", "foo"], []),
        (["foo", "bar", "baz"], ["abc", "def"], ["foo", "bar", "baz"]),
        (["foo", "bar", "baz"], ["abc", "foo", "def"], ["bar", "baz"]),
        (
            ["foo", "bar", "baz", "foo", "bar", "baz"],
            ["abc", "foo", "baz"],
            ["bar", "bar"],
        ),
    ],
)
def test_list_subtract(list1, list2, expected):
    assert list_subtract(list1, list2) == expected


@pytest.mark.parametrize(
    "list1, list2, expected",
    [
        ([], [], []),
        ([], ["foo"], []),
        (["foo"], [], []),
        (["foo"], ["bar"], []),
        (["foo"], ["foo"], ["foo"]),
        (["foo"], ["foo", "bar", "foo"], ["foo"]),
        (["foo", "bar", "baz"], ["abc", "def"], []),
        (["foo", "bar", "baz"], ["abc", "foo", "def"], ["foo"]),
        (
            ["foo", "bar", "baz", "foo", "bar", "baz"],
            ["abc", "foo", "baz"],
            ["foo", "baz"],
        ),
    ],
)
def test_list_intersection(list1, list2, expected):
    assert list_intersection(list1, list2) == expected