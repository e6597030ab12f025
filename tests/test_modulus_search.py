import pytest
from sympy import isprime

from field_errors import InvalidSpec, SearchExhausted
from modulus_search import candidate_cofactors, find_modulus


def test_scenario_a_160_bits():
    p, cofactor = find_modulus(160, 25)
    assert p.bit_length() == 160
    assert p - 1 == cofactor * 2**25
    assert cofactor % 3 != 0
    assert isprime(p)


def test_search_is_deterministic():
    assert find_modulus(64, 25) == find_modulus(64, 25)


def test_first_prime_from_the_top():
    k = 25
    p, cofactor = find_modulus(64, k)
    assert p.bit_length() == 64
    for c in range(2**(64 - k) - 1, cofactor, -1):
        if c % 3:
            assert not isprime(c * 2**k + 1)


def test_small_known_field():
    # 15 * 256 + 1 and 14 * 256 + 1 are composite, 13 * 256 + 1 is the Kyber prime
    assert find_modulus(12, 8) == (3329, 13)
    assert find_modulus(12, 8, skip_multiples_of_three=False) == (3329, 13)


def test_skip_filter_only_removes_candidates():
    with_filter = find_modulus(48, 20)
    without_filter = find_modulus(48, 20, skip_multiples_of_three=False)
    assert without_filter[1] >= with_filter[1]


def test_smallest_cofactor_width():
    # target_bits == k + 1 leaves the single cofactor 1
    assert list(candidate_cofactors(17, 16)) == [1]
    assert find_modulus(17, 16) == (65537, 1)
    assert find_modulus(5, 4) == (17, 1)
    with pytest.raises(SearchExhausted):
        find_modulus(4, 3)  # 9 is not prime


def test_trial_bound():
    with pytest.raises(SearchExhausted):
        find_modulus(12, 8, max_trials=2)
    assert find_modulus(12, 8, max_trials=3) == (3329, 13)


@pytest.mark.parametrize("max_trials", [0, -1])
def test_non_positive_trial_bound(max_trials):
    with pytest.raises(InvalidSpec):
        find_modulus(12, 8, max_trials=max_trials)


@pytest.mark.parametrize("bits, k", [(8, 25), (25, 25), (10, 0), (1, 1)])
def test_invalid_requests(bits, k):
    with pytest.raises(InvalidSpec):
        find_modulus(bits, k)


def test_candidate_range_keeps_bit_width():
    cofactors = list(candidate_cofactors(12, 8))
    assert cofactors == list(range(15, 7, -1))
    assert all((c * 2**8 + 1).bit_length() == 12 for c in cofactors)
