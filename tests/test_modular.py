import pytest
from sympy import n_order

from modular import is_primitive_root_of_unity, mod_pow, multiplicative_order, two_adic_order


def test_mod_pow_matches_builtin():
    p = 2**127 - 1
    for base, exp in [(2, 0), (3, 1), (5, 12345), (p - 1, 2), (123456789, p - 2), (p + 7, 99)]:
        assert mod_pow(base, exp, p) == pow(base, exp, p)
    assert mod_pow(5, 3, 1) == 0


def test_mod_pow_rejects_bad_arguments():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_two_adic_order():
    # 2 has order 8 mod 17, 3 is a generator
    assert two_adic_order(2, 17, 4) == 3
    assert two_adic_order(3, 17, 4) == 4
    assert two_adic_order(1, 17, 4) == 0
    assert two_adic_order(16, 17, 4) == 1
    with pytest.raises(ValueError):
        two_adic_order(3, 17, 3)


def test_multiplicative_order_against_sympy():
    for p in [101, 3329, 65537, 7681]:
        for a in [2, 3, 5, 7, 10, p - 1]:
            assert multiplicative_order(a, p, p - 1) == n_order(a, p)


def test_multiplicative_order_power_of_two_bound():
    p = 65537
    assert multiplicative_order(3, p, 2**16) == 2**16
    assert multiplicative_order(mod_pow(3, 2**10, p), p, 2**16) == 2**6


def test_multiplicative_order_rejects_bad_bound():
    with pytest.raises(ValueError):
        multiplicative_order(2, 7, 4)
    with pytest.raises(ValueError):
        multiplicative_order(2, 101, 7)
    with pytest.raises(ValueError):
        multiplicative_order(0, 7, 6)


def test_is_primitive_root_of_unity():
    assert is_primitive_root_of_unity(10, 4, 101)
    assert not is_primitive_root_of_unity(100, 4, 101)  # -1 has order 2
    assert not is_primitive_root_of_unity(10, 3, 101)   # 3 does not divide 100
    assert not is_primitive_root_of_unity(0, 4, 101)
