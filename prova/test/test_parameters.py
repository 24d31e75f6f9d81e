import pytest

from prova.errors import InvalidParameters
from prova.models.parameters import DomainParameters, KeyPair
from prova.utils.randomness import ScriptedRandomSource
from prova.utils.validate import validate_key_pair
from prova.zkp import GROUPS, get_domain_parameters, get_encrypting_values


@pytest.mark.parametrize("name", sorted(GROUPS))
def test_named_groups_are_valid(name):
    params = get_domain_parameters(name)
    assert params.power(params.q) == 1
    assert (params.p, params.g, params.q) == get_encrypting_values(name)


def test_unknown_group_is_rejected():
    with pytest.raises(InvalidParameters):
        get_encrypting_values("nope")


@pytest.mark.parametrize("p, g, q", [
    (2, 1, 1),      # p not > 2
    (1, 2, 1),      # degenerate modulus
    (-7, 2, 3),     # negative modulus
    (24, 5, 22),    # p even
    (23, 1, 22),    # g too small
    (23, 23, 22),   # g not below p
    (23, 5, 1),     # q too small
    (23, 5, 7),     # q does not divide p - 1
    (21, 2, 4),     # p not prime
    (23, 5, 11),    # 5^11 mod 23 != 1
    (23, 4, 22),    # 4 has order 11, not 22
])
def test_invalid_parameters_are_rejected(p, g, q):
    with pytest.raises(InvalidParameters):
        DomainParameters(p, g, q)


@pytest.mark.parametrize("p, g, q", [
    (23.0, 5, 22),
    (23, "5", 22),
    (23, 5, True),
])
def test_non_integer_parameters_are_rejected(p, g, q):
    with pytest.raises(InvalidParameters):
        DomainParameters(p, g, q)


def test_invalid_parameters_is_a_value_error():
    with pytest.raises(ValueError):
        DomainParameters(9, 2, 2)


def test_parameters_are_immutable(demo_params):
    with pytest.raises(AttributeError):
        demo_params.p = 29


def test_keypair_from_secret(demo_params):
    keypair = KeyPair.from_secret(demo_params, 6)
    assert keypair.secret == 6
    assert keypair.public == 8


def test_keypair_secret_is_reduced_mod_q(demo_params):
    keypair = KeyPair.from_secret(demo_params, 6 + 22)
    assert keypair.secret == 6
    assert keypair.public == 8


def test_keypair_rejects_non_integer_secret(demo_params):
    with pytest.raises(InvalidParameters):
        KeyPair.from_secret(demo_params, "6")


def test_keypair_rejects_mismatched_public_key(demo_params):
    with pytest.raises(InvalidParameters):
        KeyPair(demo_params, 6, 9)


def test_generated_keypair_is_consistent(oakley_params):
    keypair = KeyPair.generate(oakley_params)
    assert 0 <= keypair.secret < oakley_params.q
    assert validate_key_pair(keypair.public, keypair.secret, oakley_params.g, oakley_params.p)


def test_generate_uses_given_random_source(demo_params):
    keypair = KeyPair.generate(demo_params, ScriptedRandomSource([6]))
    assert keypair.public == 8


def test_secret_is_not_in_repr(demo_params):
    keypair = KeyPair.from_secret(demo_params, 13)
    assert "13" not in repr(keypair).replace(repr(demo_params), "")
