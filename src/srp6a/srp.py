import os, json, hmac
from binascii import hexlify, unhexlify
from .errors import (InvalidClientPublic, InvalidServerPublic, ProofMismatch,
                     ServerProofMismatch, HandshakeStateError,
                     SerializedTooLate, WrongSideSerialized, WrongGroupError,
                     RandomGenerationFailure)
from .params import Params
from .parameters import DefaultParams
from .util import bytes_to_number, number_to_bytes, unbiased_randrange
from . import primitives

SECRET_SIZE_BYTES = 32
_SECRET_MAX = 2**(8*SECRET_SIZE_BYTES) - 1

# handshake states
INITIALIZED = "initialized"
AWAITING_PEER_PUBLIC = "awaiting-peer-public"
DERIVED = "derived"
CONSUMED = "consumed"
FAILED = "failed"

SideClient = "client"
SideServer = "server"

# Message flow:
#
#   client                                  server
#                   <-- salt, B --          v, b = random()
#   a = random()
#                    -- A, M1 -->           set_A(A), check_M1(M1)
#                   <-- M2 --
#   check_M2(M2)
#
# The server sends B before it has seen A. That is safe because u = H(A|B)
# is only known once both public values are fixed.

def _make_secret(secret, entropy_f):
    # Returns (int, bytes). A fresh secret must be drawn for every handshake:
    # two handshakes sharing b leak enough to attack the verifier.
    if secret is None:
        s = unbiased_randrange(1, _SECRET_MAX + 1, entropy_f)
        return s, number_to_bytes(s, _SECRET_MAX)
    assert isinstance(secret, bytes), repr(secret)
    if len(secret) < SECRET_SIZE_BYTES:
        raise RandomGenerationFailure("ephemeral secret must be at least "
                                      "%d bytes" % SECRET_SIZE_BYTES)
    s = bytes_to_number(secret)
    if s == 0:
        raise RandomGenerationFailure("ephemeral secret is zero")
    return s, secret

def _check_public(value, N):
    # 1 <= value <= N-1, which also rules out value % N == 0
    return 0 < value < N

def _constant_time_equal(a, b):
    if not isinstance(a, bytes) or not isinstance(b, bytes):
        return False
    return hmac.compare_digest(a, b)


class SRPServer:
    """The server side of one SRP-6a login attempt.

    Build one per attempt from the stored verifier; it picks its own secret b
    and computes B right away. Feed it the client's A with set_A(), then the
    client's proof with check_M1(), which returns M2 for the client. Each
    instance can verify at most one proof.
    """

    side = SideServer

    def __init__(self, verifier, params=DefaultParams, secret=None,
                 entropy_f=os.urandom):
        assert isinstance(verifier, bytes), repr(verifier)
        assert isinstance(params, Params), repr(params)
        self.params = params
        self.state = INITIALIZED

        self.verifier = bytes_to_number(verifier)
        if not _check_public(self.verifier, params.N):
            raise ValueError("verifier must be in 1..N-1")

        self.secret, self._secret_bytes = _make_secret(secret, entropy_f)
        self.A = None
        self.K = None
        self.M1 = None
        self.M2 = None
        self._compute_B()

    def _compute_B(self):
        p = self.params
        self.B = (p.k * self.verifier + pow(p.g, self.secret, p.N)) % p.N
        self.B_bytes = p.pad(self.B)
        self.state = AWAITING_PEER_PUBLIC

    def compute_B(self):
        return self.B_bytes

    def set_A(self, A_bytes):
        if self.state != AWAITING_PEER_PUBLIC:
            raise HandshakeStateError("set_A() can only be called once, "
                                      "before check_M1()")
        assert isinstance(A_bytes, bytes), repr(A_bytes)
        p = self.params
        A = bytes_to_number(A_bytes)
        if not _check_public(A, p.N):
            raise InvalidClientPublic("client-supplied A must be in 1..N-1")

        u = primitives.compute_u(p, A, self.B)
        S = primitives.server_premaster(p, self.verifier, A, self.secret, u)
        self.A = A
        self.K = primitives.session_key(p, S)
        self.M1 = primitives.proof_m1(p, A, self.B, S)
        self.M2 = primitives.proof_m2(p, A, self.M1, self.K)
        self.state = DERIVED

    def check_M1(self, M1):
        if self.state != DERIVED:
            raise HandshakeStateError("check_M1() needs set_A() first, and "
                                      "can only be called once")
        if not _constant_time_equal(M1, self.M1):
            self.state = FAILED
            raise ProofMismatch("client proof M1 does not match")
        self.state = CONSUMED
        return self.M2

    def session_key(self):
        if self.state not in (DERIVED, CONSUMED):
            raise HandshakeStateError("no session key in state %s"
                                      % self.state)
        return self.K

    def serialize(self):
        # Only the pre-A state is worth saving: everything after that is
        # derived on the spot in the second round trip.
        if self.state != AWAITING_PEER_PUBLIC:
            raise SerializedTooLate("cannot serialize a handshake in state %s"
                                    % self.state)
        d = {"hashed_params": self.params.hash_params(),
             "side": self.side,
             "verifier": hexlify(self.params.pad(self.verifier)).decode("ascii"),
             "secret": hexlify(self._secret_bytes).decode("ascii"),
             }
        return json.dumps(d).encode("ascii")

    @classmethod
    def from_serialized(klass, data, params=DefaultParams):
        d = json.loads(data.decode("ascii"))
        if d["side"] != klass.side:
            raise WrongSideSerialized
        if d["hashed_params"] != params.hash_params():
            err = ("SRPServer.from_serialized() must be called with the same "
                   "params= that were used to create the serialized data. "
                   "These are different somehow.")
            raise WrongGroupError(err)
        return klass(unhexlify(d["verifier"].encode("ascii")), params=params,
                     secret=unhexlify(d["secret"].encode("ascii")))


class SRPClient:
    """The client side of an SRP-6a login.

    The server does not run this; it is here so that clients (and tests) can
    talk to SRPServer. Given the same inputs it derives exactly the same K,
    M1 and M2 as the server.
    """

    side = SideClient

    def __init__(self, identity, password, salt, params=DefaultParams,
                 secret=None, entropy_f=os.urandom):
        assert isinstance(params, Params), repr(params)
        self.params = params
        self.state = INITIALIZED
        self.x = primitives.compute_x(params, salt, identity, password)
        self.secret, _ = _make_secret(secret, entropy_f)
        self.A = pow(params.g, self.secret, params.N)
        self.A_bytes = params.pad(self.A)
        self.K = None
        self.M1 = None
        self._expected_M2 = None
        self.state = AWAITING_PEER_PUBLIC

    def compute_A(self):
        return self.A_bytes

    def set_B(self, B_bytes):
        if self.state != AWAITING_PEER_PUBLIC:
            raise HandshakeStateError("set_B() can only be called once")
        assert isinstance(B_bytes, bytes), repr(B_bytes)
        p = self.params
        B = bytes_to_number(B_bytes)
        if not _check_public(B, p.N):
            raise InvalidServerPublic("server-supplied B must be in 1..N-1")

        u = primitives.compute_u(p, self.A, B)
        S = primitives.client_premaster(p, B, self.x, self.secret, u)
        self.K = primitives.session_key(p, S)
        self.M1 = primitives.proof_m1(p, self.A, B, S)
        self._expected_M2 = primitives.proof_m2(p, self.A, self.M1, self.K)
        self.state = DERIVED

    def compute_M1(self):
        if self.state != DERIVED:
            raise HandshakeStateError("call set_B() before compute_M1()")
        return self.M1

    def session_key(self):
        if self.state not in (DERIVED, CONSUMED):
            raise HandshakeStateError("no session key in state %s"
                                      % self.state)
        return self.K

    def check_M2(self, M2):
        if self.state != DERIVED:
            raise HandshakeStateError("check_M2() needs set_B() first, and "
                                      "can only be called once")
        if not _constant_time_equal(M2, self._expected_M2):
            self.state = FAILED
            raise ServerProofMismatch("server proof M2 does not match")
        self.state = CONSUMED
