import pytest

from primality import is_prime, prime_factors

GOLDILOCKS = 2**64 - 2**32 + 1
BN254_R = 21888242871839275222246405745257275088548364400416034343698204186575808495617


@pytest.mark.parametrize("n", [2, 3, 17, 3329, 65537, 2**61 - 1, 2**127 - 1, GOLDILOCKS, BN254_R])
def test_known_primes(n):
    assert is_prime(n)


@pytest.mark.parametrize("n", [
    -7, 0, 1, 4, 561,               # 561 is a Carmichael number
    3215031751,                     # strong pseudoprime to bases 2, 3, 5, 7
    2**64 + 1,                      # 274177 * 67280421310721
    (2**61 - 1) * (2**31 - 1),
    GOLDILOCKS * BN254_R,
])
def test_known_composites(n):
    assert not is_prime(n)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        is_prime(7.0)
    with pytest.raises(TypeError):
        is_prime(True)


def test_prime_factors():
    assert prime_factors(360) == [2, 3, 5]
    assert prime_factors(2**25) == [2]
    assert prime_factors(97) == [97]
    assert prime_factors(1) == []
    with pytest.raises(ValueError):
        prime_factors(0)
