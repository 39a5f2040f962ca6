import math

import pytest

from algokit.numeric import (
    binary_search,
    extended_gcd,
    fibonacci,
    fibonacci_recursive,
    gcd,
    gcd_recursive,
)


def test_binary_search_finds_every_key():
    values = list(range(1, 11))
    for key in values:
        index = binary_search(key, values)
        assert values[index] == key


def test_binary_search_missing_key():
    values = [1, 3, 5, 7, 9]
    assert binary_search(4, values) is None
    assert binary_search(0, values) is None
    assert binary_search(10, values) is None


def test_binary_search_empty():
    assert binary_search(1, []) is None


def test_binary_search_strings():
    words = ["apple", "banana", "cherry", "date"]
    assert words[binary_search("cherry", words)] == "cherry"


@pytest.mark.parametrize("a,b", [(12, 8), (8, 12), (17, 5), (100, 75), (7, 0), (0, 9), (1071, 462)])
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert gcd_recursive(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(-12, 8), (12, -8), (-30, -21)])
def test_gcd_negative_inputs(a, b):
    assert gcd(a, b) == gcd_recursive(a, b)
    assert abs(gcd(a, b)) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(240, 46), (46, 240), (17, 5), (10, 0), (-12, 8), (35, 64)])
def test_extended_gcd_bezout_identity(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == gcd(a, b)
    assert a * x + b * y == g


def test_fibonacci_first_terms():
    assert fibonacci(1) == 0
    assert fibonacci(2) == 1


def test_fibonacci_implementations_agree():
    for n in range(1, 21):
        assert fibonacci(n) == fibonacci_recursive(n)


def test_fibonacci_recurrence():
    for n in range(3, 60):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("func", [fibonacci, fibonacci_recursive])
def test_fibonacci_rejects_nonpositive(func):
    with pytest.raises(ValueError):
        func(0)