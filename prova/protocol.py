from prova.models.parameters import DomainParameters, KeyPair
from prova.models.protocol import Proof, ProofResult
from prova.prover.prover import Prover
from prova.utils.randomness import RandomSource, default_random_source
from prova.verifier.verifier import Verifier


def make_impostor(keypair: KeyPair, random_source: RandomSource = None) -> KeyPair:
    """A key pair over the same group whose secret differs from the one behind keypair.public."""
    random_source = random_source or default_random_source()
    params = keypair.params
    wrong_secret = (keypair.secret + 1 + random_source.randbelow(params.q - 1)) % params.q
    return KeyPair.from_secret(params, wrong_secret)


def run_session(keypair: KeyPair, prover_random: RandomSource = None, verifier_random: RandomSource = None,
                attacker: bool = False, verbose: bool = False) -> ProofResult:
    """
    Runs one commit / challenge / respond / verify session against keypair.public.

    With attacker set, the prover holds a different secret than the published
    key, so the proof must be rejected unless the challenge happens to be the
    one the forged response fits.
    """
    params = keypair.params
    prover_keypair = make_impostor(keypair) if attacker else keypair

    prover = Prover(prover_keypair, prover_random)
    verifier = Verifier(params, verifier_random)

    # Step 1: Commitment
    commitment = prover.commit()
    if verbose:
        print(f"[Prover] Step 1: sending commitment t = {commitment.t}")

    # Step 2: Challenge
    challenge = verifier.challenge()
    if verbose:
        print(f"[Verifier] Step 2: sending challenge c = {challenge.c}")

    # Step 3: Response
    response = prover.respond(challenge)
    if verbose:
        print(f"[Prover] Step 3: sending response s = {response.s}")

    # Step 4: Verification
    accepted = verifier.verify(keypair.public, commitment.t, challenge.c, response.s)
    if verbose:
        outcome = "ACCEPTED" if accepted else "REJECTED"
        print(f"[Verifier] Step 4: g^s == t * y^c (mod p) -> {outcome}")

    return ProofResult(accepted, Proof(commitment.t, challenge.c, response.s), keypair.public)


def run_protocol(params: DomainParameters, secret: int = None, prover_random: RandomSource = None,
                 verifier_random: RandomSource = None, attacker: bool = False, verbose: bool = False) -> ProofResult:
    """Builds the key pair (from secret, or freshly generated) and runs a single session."""
    if secret is None:
        keypair = KeyPair.generate(params)
    else:
        keypair = KeyPair.from_secret(params, secret)

    if verbose:
        print(f"[Demo] Parameters: p={params.p}, q={params.q}, g={params.g}")
        print(f"[Demo] Public key y = {keypair.public}")

    return run_session(keypair, prover_random, verifier_random, attacker=attacker, verbose=verbose)
