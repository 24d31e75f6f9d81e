from dataclasses import dataclass, field

from prova.errors import InvalidParameters
from prova.utils.randomness import RandomSource, default_random_source
from prova.utils.validate import validate_domain_parameters, validate_key_pair


@dataclass(frozen=True)
class DomainParameters:
    """
    The group shared by prover and verifier.

    Attributes:
        p (int): A prime modulus.
        g (int): A generator of a subgroup of Z_p*.
        q (int): The order of g; every exponent (nonce, challenge, secret, response) lives mod q.
    """
    p: int
    g: int
    q: int

    def __post_init__(self):
        validate_domain_parameters(self.p, self.g, self.q)

    def power(self, exponent: int) -> int:
        """g^exponent mod p"""
        return pow(self.g, exponent, self.p)


@dataclass(frozen=True)
class KeyPair:
    params: DomainParameters
    secret: int = field(repr=False)
    public: int

    def __post_init__(self):
        if not 0 <= self.secret < self.params.q:
            raise InvalidParameters("secret must lie in [0, q)")
        if not validate_key_pair(self.public, self.secret, self.params.g, self.params.p):
            raise InvalidParameters("public key does not match g^secret mod p")

    @classmethod
    def generate(cls, params: DomainParameters, random_source: RandomSource = None) -> "KeyPair":
        random_source = random_source or default_random_source()
        x = random_source.randbelow(params.q)
        return cls(params, x, params.power(x))

    @classmethod
    def from_secret(cls, params: DomainParameters, secret: int) -> "KeyPair":
        if not isinstance(secret, int) or isinstance(secret, bool):
            raise InvalidParameters(f"secret must be an integer, got {type(secret).__name__}")
        # g^q == 1, so reducing the secret mod q leaves the public key unchanged
        x = secret % params.q
        return cls(params, x, params.power(x))
