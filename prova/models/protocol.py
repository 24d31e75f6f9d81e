from dataclasses import dataclass, field


@dataclass(frozen=True)
class Commitment:
    """First message. Only t leaves the prover; r is the single-use nonce behind it."""
    t: int
    r: int = field(repr=False, compare=False)


@dataclass(frozen=True)
class Challenge:
    c: int


@dataclass(frozen=True)
class Response:
    s: int


@dataclass(frozen=True)
class Proof:
    """The public transcript (t, c, s) of one session."""
    t: int
    c: int
    s: int


@dataclass(frozen=True)
class ProofResult:
    accepted: bool
    proof: Proof
    public: int

    def transcript(self) -> dict:
        return {"t": self.proof.t, "c": self.proof.c, "s": self.proof.s, "y": self.public}
