class ProtocolError(Exception):
    """Base class for every error raised by the Schnorr identification core."""


class InvalidParameters(ProtocolError, ValueError):
    """Domain parameters or key material that no proof can be built on."""


class ProtocolOrderError(ProtocolError, RuntimeError):
    """A prover operation was invoked out of the commit -> respond sequence."""
