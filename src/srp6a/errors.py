class SRPError(Exception):
    pass

class UnsupportedParameterSet(SRPError):
    """Only the vetted RFC 5054 groups can be used. Group parameters are
    never taken from the other side of the connection."""
class RandomGenerationFailure(SRPError):
    """The entropy source failed. The attempt must be abandoned: carrying on
    with a weak or zero secret would reveal the verifier."""
class InvalidClientPublic(SRPError):
    """The client's A was 0 mod N or outside 1..N-1. Accepting it would let
    the client force the premaster secret to a known value."""
class InvalidServerPublic(SRPError):
    """The server's B was 0 mod N or outside 1..N-1."""
class ProofMismatch(SRPError):
    """The client's M1 did not match: it does not know the password."""
class ServerProofMismatch(SRPError):
    """The server's M2 did not match: it does not know our verifier."""
class HandshakeStateError(SRPError):
    """A handshake method was called out of order, or on a handshake that was
    already consumed or failed. Handshakes are single-use."""
class HandshakeNotFound(SRPError):
    """No live handshake for this identity: it expired, was replaced by a
    newer login attempt, or was already taken."""
class SerializedTooLate(SRPError):
    """Only a handshake still waiting for the client's A can be serialized."""
class WrongSideSerialized(SRPError):
    """You tried to unserialize data stored for the other side."""
class WrongGroupError(SRPError):
    pass
class AuthenticationFailed(SRPError):
    """Login failed. Deliberately says nothing about why."""
