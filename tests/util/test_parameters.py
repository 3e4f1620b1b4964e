import pytest

from modcrypto.util.parameters import PrimeParameters, default_prime_parameters


def test_default_prime_parameters():
    assert default_prime_parameters == PrimeParameters(bits=1024, test_rounds=25, safe=False)


def test_with_overrides_returns_a_copy():
    params = default_prime_parameters.with_overrides(bits=256, safe=True)

    assert params == PrimeParameters(bits=256, test_rounds=25, safe=True)
    assert default_prime_parameters.bits == 1024
    assert default_prime_parameters.safe is False


def test_with_overrides_unknown_attribute():
    with pytest.raises(AttributeError, match="PrimeParameters has no attribute 'rounds'"):
        default_prime_parameters.with_overrides(rounds=3)
