import hashlib
from .groups import SRPGroup
from .util import number_to_bytes
from . import primitives

# A Params bundles everything both sides must agree on before a handshake:
# the group (N, g), the hash function, and the padding width derived from N.
# The multiplier k = H(pad(N) | pad(g)) only depends on those, so it is
# computed once here rather than once per login.

class Params:
    def __init__(self, group, hashfunc=hashlib.sha256):
        assert isinstance(group, SRPGroup), repr(group)
        self._set("group", group)
        self._set("N", group.N)
        self._set("g", group.g)
        self._set("hashfunc", hashfunc)
        self._set("padded_length", group.element_size_bytes)
        self._set("k", primitives.multiplier(self))

    def _set(self, name, value):
        object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("Params are immutable")

    def __repr__(self):
        return "<Params %d-bit %s>" % (self.group.element_size_bits,
                                       self.hashfunc().name)

    @property
    def digest_size(self):
        return self.hashfunc().digest_size

    def pad(self, i):
        return number_to_bytes(i, self.N)

    def H(self, *pieces):
        h = self.hashfunc()
        for piece in pieces:
            h.update(piece)
        return h.digest()

    def hash_params(self):
        # Serialized handshakes record this, so that a restore with different
        # params fails loudly instead of silently deriving a different key.
        pieces = [self.pad(self.N), self.pad(self.g),
                  self.hashfunc().name.encode("ascii")]
        return hashlib.sha256(b"".join(pieces)).hexdigest()
