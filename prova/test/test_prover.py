import pytest

from prova.errors import ProtocolOrderError
from prova.models.parameters import KeyPair
from prova.models.protocol import Challenge
from prova.prover.prover import Prover, SessionState
from prova.utils.randomness import ScriptedRandomSource


def test_commit_follows_worked_example(demo_keypair):
    prover = Prover(demo_keypair, ScriptedRandomSource([4]))
    commitment = prover.commit()

    assert commitment.t == 4
    assert commitment.r == 4
    assert prover.state is SessionState.COMMITTED


def test_respond_follows_worked_example(demo_keypair):
    prover = Prover(demo_keypair, ScriptedRandomSource([4]))
    prover.commit()
    response = prover.respond(Challenge(3))

    assert response.s == 0
    assert prover.state is SessionState.RESPONDED


def test_respond_before_commit_is_rejected(demo_keypair):
    prover = Prover(demo_keypair)
    with pytest.raises(ProtocolOrderError):
        prover.respond(Challenge(3))
    assert prover.state is SessionState.IDLE


def test_second_respond_is_rejected(demo_keypair):
    prover = Prover(demo_keypair)
    prover.commit()
    prover.respond(Challenge(3))
    with pytest.raises(ProtocolOrderError):
        prover.respond(Challenge(5))


def test_second_commit_is_rejected(demo_keypair):
    prover = Prover(demo_keypair, ScriptedRandomSource([4, 7]))
    first = prover.commit()
    with pytest.raises(ProtocolOrderError):
        prover.commit()

    # the original nonce is still the one answering the challenge
    assert prover.respond(Challenge(3)).s == (first.r + 3 * 6) % 22


def test_commit_after_respond_is_rejected(demo_keypair):
    prover = Prover(demo_keypair)
    prover.commit()
    prover.respond(Challenge(1))
    with pytest.raises(ProtocolOrderError):
        prover.commit()


def test_order_error_leaves_key_material_usable(demo_keypair):
    prover = Prover(demo_keypair)
    with pytest.raises(ProtocolOrderError):
        prover.respond(Challenge(1))

    fresh = Prover(demo_keypair, ScriptedRandomSource([4]))
    fresh.commit()
    assert fresh.respond(Challenge(3)).s == 0


def test_commitment_and_response_ranges(oakley_params):
    keypair = KeyPair.generate(oakley_params)
    for _ in range(20):
        prover = Prover(keypair)
        commitment = prover.commit()
        assert 0 <= commitment.t < oakley_params.p
        assert 0 <= commitment.r < oakley_params.q
        assert commitment.t == pow(oakley_params.g, commitment.r, oakley_params.p)

        response = prover.respond(Challenge(oakley_params.q - 1))
        assert 0 <= response.s < oakley_params.q


def test_commitment_repr_hides_nonce(demo_keypair):
    prover = Prover(demo_keypair, ScriptedRandomSource([17]))
    commitment = prover.commit()
    assert "17" not in repr(commitment)
    assert "r=" not in repr(commitment)
