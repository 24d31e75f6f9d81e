import sympy

from prova import config
from prova.errors import InvalidParameters


def _require_int(name: str, value) -> None:
    # bool is an int subclass but never a meaningful group element
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidParameters(f"{name} must be an integer, got {type(value).__name__}")


def validate_domain_parameters(p: int, g: int, q: int) -> None:
    """
    Validates a Schnorr group description, raising InvalidParameters on the first problem found.

    Args:
        p (int): The prime modulus of the multiplicative group.
        g (int): The generator of the subgroup the protocol works in.
        q (int): The order of g, used as the modulus for every exponent.

    Range checks run before any modular exponentiation, so a degenerate
    modulus is rejected without ever reaching pow().
    """
    for name, value in (("p", p), ("g", g), ("q", q)):
        _require_int(name, value)

    if p <= 2 or p % 2 == 0:
        raise InvalidParameters(f"p must be an odd integer greater than 2, got {p}")
    if not 1 < g < p:
        raise InvalidParameters("g must lie strictly between 1 and p")
    if q <= 1:
        raise InvalidParameters(f"q must be greater than 1, got {q}")
    if (p - 1) % q != 0:
        raise InvalidParameters("q must divide p - 1")

    if not sympy.isprime(p):
        raise InvalidParameters("p is not prime")
    if pow(g, q, p) != 1:
        raise InvalidParameters("g^q mod p != 1, g does not have order q")

    validate_generator_order(p, g, q)


def validate_generator_order(p: int, g: int, q: int) -> None:
    """
    Rejects a generator whose order is a proper divisor of q.

    Responses are reduced mod q, so a generator of smaller order would make
    distinct secrets indistinguishable. A prime q needs no further check once
    g^q == 1 and g != 1; a composite q is factored only when it is small.
    """
    if sympy.isprime(q):
        return
    if q.bit_length() > config.ORDER_CHECK_MAX_BITS:
        return

    for factor in sympy.primefactors(q):
        if pow(g, q // factor, p) == 1:
            raise InvalidParameters(f"g has order dividing {q // factor}, not {q}")


def validate_key_pair(public_key: int, private_key: int, g: int, p: int) -> bool:
    """
    Validates if a public key was generated from a private key.

    Args:
        public_key: The public key y
        private_key: The private key x
        g: The generator
        p: The prime modulus

    Returns:
        bool: True if the key pair is valid, False otherwise
    """
    computed_public = pow(g, private_key, p)
    return (computed_public - public_key) % p == 0
