import os, hashlib, logging
from collections import namedtuple
from hkdf import Hkdf
from .errors import (AuthenticationFailed, HandshakeNotFound,
                     HandshakeStateError, InvalidClientPublic, ProofMismatch)
from .parameters import DefaultParams
from .srp import SRPServer
from .util import bytes_to_number, random_bytes
from .verifier import SALT_SIZE_BYTES, create_verifier

logger = logging.getLogger(__name__)

# seconds: long enough for a client to compute A and M1 and send them back
DEFAULT_HANDSHAKE_TTL = 60

Challenge = namedtuple("Challenge", ["salt", "B"])
Session = namedtuple("Session", ["identity", "key", "M2"])

_LOGIN_FAILURES = (HandshakeNotFound, HandshakeStateError,
                   InvalidClientPublic, ProofMismatch)

def expand_decoy_seed(seed, info, num_bytes):
    h = Hkdf(salt=b"", input_key_material=seed, hash=hashlib.sha256)
    return h.expand(info, num_bytes)


class Authenticator:
    """The whole SRP login, as seen by the service that hosts it.

    Registration:
        salt, verifier = auth.register(identity, password)
        # persist (identity, salt, verifier)

    Login, first request (the service looks up the stored credentials, or
    passes None when the identity is unknown):
        challenge = auth.begin_login(identity, (salt, verifier))
        # send challenge.salt and challenge.B to the client

    Login, second request:
        session = auth.complete_login(identity, A, M1)
        # session.key is the shared secret; send session.M2 to the client

    complete_login() raises AuthenticationFailed for every kind of failure,
    so callers cannot tell a wrong password from an unknown identity or an
    expired attempt.
    """

    def __init__(self, store, params=DefaultParams,
                 ttl=DEFAULT_HANDSHAKE_TTL, decoy_seed=None,
                 entropy_f=os.urandom):
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.store = store
        self.params = params
        self.ttl = ttl
        self.entropy_f = entropy_f
        if decoy_seed is None:
            # Several workers behind one store should share a seed, or an
            # unknown identity will see its salt change between workers.
            decoy_seed = random_bytes(32, entropy_f)
        assert isinstance(decoy_seed, bytes)
        self._decoy_seed = decoy_seed

    @classmethod
    def from_config(klass, config, store=None, entropy_f=os.urandom):
        if store is None:
            store = config.make_store()
        return klass(store, params=config.params(),
                     ttl=config.handshake_ttl,
                     decoy_seed=config.decoy_seed, entropy_f=entropy_f)

    def register(self, identity, password):
        return create_verifier(identity, password, params=self.params,
                               entropy_f=self.entropy_f)

    def _decoy_credentials(self, identity):
        # Stable per identity, so probing the same unknown identity twice
        # gets the same salt, just like a real account would.
        salt = expand_decoy_seed(self._decoy_seed,
                                 b"SRP decoy salt:" + identity,
                                 SALT_SIZE_BYTES)
        stretched = expand_decoy_seed(self._decoy_seed,
                                      b"SRP decoy verifier:" + identity,
                                      self.params.padded_length + 16)
        v = bytes_to_number(stretched) % self.params.N or 1
        return salt, self.params.pad(v)

    def begin_login(self, identity, credentials):
        assert isinstance(identity, bytes), repr(identity)
        if credentials is None:
            logger.debug("issuing decoy challenge for unknown identity %r",
                         identity)
            salt, verifier = self._decoy_credentials(identity)
        else:
            salt, verifier = credentials
            logger.debug("issuing challenge for %r", identity)
        handshake = SRPServer(verifier, params=self.params,
                              entropy_f=self.entropy_f)
        self.store.put(identity, handshake, self.ttl)
        return Challenge(salt, handshake.compute_B())

    def complete_login(self, identity, A, M1):
        assert isinstance(identity, bytes), repr(identity)
        try:
            handshake = self.store.take(identity)
            handshake.set_A(A)
            M2 = handshake.check_M1(M1)
        except _LOGIN_FAILURES as e:
            logger.warning("login failed for %r: %s", identity,
                           e.__class__.__name__)
            raise AuthenticationFailed("authentication failed") from None
        logger.info("login succeeded for %r", identity)
        return Session(identity, handshake.session_key(), M2)
