import logging, threading, time
import redis
from .errors import HandshakeNotFound
from .parameters import DefaultParams
from .srp import SRPServer

logger = logging.getLogger(__name__)

# A login takes two round trips, and the SRPServer created in the first one
# (holding the secret b) must still exist when the second one arrives,
# possibly in another worker or process. A HandshakeStore keeps it, keyed by
# identity, for at most 'ttl' seconds.
#
# Rules every store follows:
#  * put() for an identity replaces whatever was there (last writer wins).
#    Only the newest B can be completed; an older, slower attempt fails.
#  * take() removes the entry as it returns it. A handshake is therefore
#    never handed out twice, and a proof can never be retried against it.
#  * expiry is the store's job: SRPServer has no notion of time.

class HandshakeStore:
    def put(self, identity, handshake, ttl):
        raise NotImplementedError
    def take(self, identity):
        raise NotImplementedError
    def discard(self, identity):
        raise NotImplementedError


class MemoryHandshakeStore(HandshakeStore):
    """Keeps live handshakes in this process. Good for a single worker, and
    for tests, where 'clock' can be replaced to step time forward."""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._entries = {} # identity -> (expires_at, handshake)

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def put(self, identity, handshake, ttl):
        assert isinstance(identity, bytes), repr(identity)
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        with self._lock:
            now = self._clock()
            self._purge(now)
            if identity in self._entries:
                logger.debug("replacing live handshake for %r", identity)
            self._entries[identity] = (now + ttl, handshake)

    def take(self, identity):
        with self._lock:
            entry = self._entries.pop(identity, None)
            now = self._clock()
        if entry is None:
            raise HandshakeNotFound(identity)
        expires_at, handshake = entry
        if now >= expires_at:
            logger.debug("handshake for %r expired", identity)
            raise HandshakeNotFound(identity)
        return handshake

    def discard(self, identity):
        with self._lock:
            self._entries.pop(identity, None)

    def _purge(self, now):
        # abandoned logins must not pile up
        expired = [i for i, (expires_at, _) in self._entries.items()
                   if now >= expires_at]
        for identity in expired:
            del self._entries[identity]
        if expired:
            logger.debug("purged %d expired handshakes", len(expired))


class RedisHandshakeStore(HandshakeStore):
    """Keeps serialized handshakes in redis, so any worker can finish a login
    that another worker started. Redis enforces the expiry, and GETDEL makes
    take() atomic when two requests race for the same identity."""

    def __init__(self, client, params=DefaultParams,
                 key_prefix=b"srp_handshake_"):
        if isinstance(key_prefix, str):
            key_prefix = key_prefix.encode("utf-8")
        self.client = client
        self.params = params
        self.key_prefix = key_prefix

    @classmethod
    def from_url(klass, url, params=DefaultParams, key_prefix=b"srp_handshake_"):
        return klass(redis.Redis.from_url(url), params=params,
                     key_prefix=key_prefix)

    def _key(self, identity):
        assert isinstance(identity, bytes), repr(identity)
        return self.key_prefix + identity

    def put(self, identity, handshake, ttl):
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.client.set(self._key(identity), handshake.serialize(),
                        px=max(1, int(ttl * 1000)))

    def take(self, identity):
        data = self.client.getdel(self._key(identity))
        if data is None:
            raise HandshakeNotFound(identity)
        return SRPServer.from_serialized(data, params=self.params)

    def discard(self, identity):
        self.client.delete(self._key(identity))
