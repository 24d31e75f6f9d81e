import pytest

from prova.models.parameters import DomainParameters, KeyPair
from prova.zkp import get_domain_parameters


@pytest.fixture
def demo_params() -> DomainParameters:
    """p = 23, g = 5, q = 22"""
    return get_domain_parameters("demo")


@pytest.fixture
def subgroup_params() -> DomainParameters:
    """p = 23, g = 4, q = 11 (prime order subgroup)"""
    return get_domain_parameters("subgroup")


@pytest.fixture
def oakley_params() -> DomainParameters:
    return get_domain_parameters("oakley1024")


@pytest.fixture
def demo_keypair(demo_params) -> KeyPair:
    return KeyPair.from_secret(demo_params, 6)
