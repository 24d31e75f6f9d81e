from prova.models.parameters import DomainParameters
from prova.models.protocol import Challenge
from prova.utils.randomness import RandomSource, default_random_source


def verify(params: DomainParameters, public_y: int, commitment_t: int, challenge_c: int, response_s: int) -> bool:
    """
    Checks the Schnorr verification equation g^s == t * y^c (mod p).

    Args:
        params (DomainParameters): The group the proof was made in.
        public_y (int): The prover's public key.
        commitment_t (int): The commitment received in step 1.
        challenge_c (int): The challenge sent in step 2.
        response_s (int): The response received in step 3.

    Returns:
        bool: True if the proof is accepted, False otherwise.
    """
    p = params.p

    # group elements live in [1, p) and exponents are non-negative
    if not (0 < commitment_t < p and 0 < public_y < p):
        return False
    if challenge_c < 0 or response_s < 0:
        return False

    left = pow(params.g, response_s, p)
    right = (commitment_t * pow(public_y, challenge_c, p)) % p
    return left == right


class Verifier:
    def __init__(self, params: DomainParameters, random_source: RandomSource = None):
        self.params = params
        self.random_source = random_source or default_random_source()

    def challenge(self) -> Challenge:
        """Step 2: c drawn uniformly from [0, q), independently of t."""
        return Challenge(self.random_source.randbelow(self.params.q))

    def verify(self, public_y: int, commitment_t: int, challenge_c: int, response_s: int) -> bool:
        return verify(self.params, public_y, commitment_t, challenge_c, response_s)
