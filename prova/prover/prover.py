from enum import Enum

from prova.errors import ProtocolOrderError
from prova.models.parameters import KeyPair
from prova.models.protocol import Challenge, Commitment, Response
from prova.utils.randomness import RandomSource, default_random_source


class SessionState(Enum):
    IDLE = "idle"
    COMMITTED = "committed"
    RESPONDED = "responded"


class Prover:
    def __init__(self, keypair: KeyPair, random_source: RandomSource = None):
        """
        One proof session on behalf of the holder of a key pair.

        Args:
            keypair (KeyPair): The secret x and public y = g^x mod p; carries the domain parameters.
            random_source (RandomSource, optional): Where the nonce r is drawn from. Defaults to the OS CSPRNG.

        Attributes:
            state (SessionState): IDLE until commit(), COMMITTED until respond(), then RESPONDED for good.

        A session proves knowledge of x exactly once. Committing twice or
        responding twice raises ProtocolOrderError; a new proof needs a new
        Prover with a fresh nonce.
        """
        self.keypair = keypair
        self.params = keypair.params
        self.random_source = random_source or default_random_source()
        self.state = SessionState.IDLE
        self._commitment = None

    @property
    def public(self) -> int:
        return self.keypair.public

    def commit(self) -> Commitment:
        """Step 1: draws r in [0, q) and returns t = g^r mod p."""
        if self.state is not SessionState.IDLE:
            raise ProtocolOrderError(f"commit() called in state '{self.state.value}', a session commits only once")

        r = self.random_source.randbelow(self.params.q)
        self._commitment = Commitment(self.params.power(r), r)
        self.state = SessionState.COMMITTED
        return self._commitment

    def respond(self, challenge: Challenge) -> Response:
        """Step 3: s = (r + c * x) mod q"""
        if self.state is SessionState.IDLE:
            raise ProtocolOrderError("respond() called before commit()")
        if self.state is SessionState.RESPONDED:
            raise ProtocolOrderError("respond() already called, the commitment has been consumed")

        s = (self._commitment.r + challenge.c * self.keypair.secret) % self.params.q

        # the nonce must never answer a second challenge
        self._commitment = None
        self.state = SessionState.RESPONDED
        return Response(s)
