import os
from binascii import unhexlify, Error as BinasciiError
from dotenv import dotenv_values
from .parameters import load_params
from .store import MemoryHandshakeStore, RedisHandshakeStore

# Environment variables, all optional:
#
#   SRP_PARAMS          modulus size in bits: 1024, 1536, 2048, 3072, 4096
#   SRP_HANDSHAKE_TTL   seconds a started login stays completable
#   SRP_REDIS_URL       keep handshakes in redis instead of process memory
#   SRP_KEY_PREFIX      redis key prefix for handshakes
#   SRP_DECOY_SEED      hex; share it between workers so that unknown
#                       identities always see the same salt

class Config:
    def __init__(self, params_bits=2048, handshake_ttl=60, redis_url=None,
                 key_prefix="srp_handshake_", decoy_seed=None):
        self.params_bits = params_bits
        self.handshake_ttl = handshake_ttl
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.decoy_seed = decoy_seed
        # fail at startup, not on the first login
        self.params()
        if self.handshake_ttl <= 0:
            raise ValueError("SRP_HANDSHAKE_TTL must be positive")

    @classmethod
    def from_env(klass, environ=None):
        if environ is None:
            environ = os.environ
        kwargs = {}
        if environ.get("SRP_PARAMS"):
            kwargs["params_bits"] = _parse_int("SRP_PARAMS",
                                               environ["SRP_PARAMS"])
        if environ.get("SRP_HANDSHAKE_TTL"):
            kwargs["handshake_ttl"] = _parse_int("SRP_HANDSHAKE_TTL",
                                                 environ["SRP_HANDSHAKE_TTL"])
        if environ.get("SRP_REDIS_URL"):
            kwargs["redis_url"] = environ["SRP_REDIS_URL"]
        if environ.get("SRP_KEY_PREFIX"):
            kwargs["key_prefix"] = environ["SRP_KEY_PREFIX"]
        if environ.get("SRP_DECOY_SEED"):
            try:
                kwargs["decoy_seed"] = unhexlify(environ["SRP_DECOY_SEED"])
            except BinasciiError:
                raise ValueError("SRP_DECOY_SEED must be hex") from None
        return klass(**kwargs)

    @classmethod
    def from_dotenv(klass, path=".env", environ=None):
        # the process environment wins over the file
        if environ is None:
            environ = os.environ
        merged = {k: v for k, v in dotenv_values(path).items()
                  if v is not None}
        merged.update(environ)
        return klass.from_env(merged)

    def params(self):
        return load_params(self.params_bits)

    def make_store(self):
        if self.redis_url:
            return RedisHandshakeStore.from_url(self.redis_url,
                                                params=self.params(),
                                                key_prefix=self.key_prefix)
        return MemoryHandshakeStore()

def _parse_int(name, value):
    try:
        return int(value)
    except ValueError:
        raise ValueError("%s must be an integer, not %r" % (name, value)) from None
