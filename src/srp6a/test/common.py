from hashlib import sha256
from itertools import count

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return b"".join([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, bytes)
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for i in range(len(block)):
                yield block[i:i+1]

class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now
    def __call__(self):
        return self.now
    def advance(self, seconds):
        self.now += seconds

def run_handshake(identity, password, salt, verifier, params, entropy_f=None):
    # returns (client, server) after a full exchange
    from srp6a.srp import SRPClient, SRPServer
    kwargs = {} if entropy_f is None else {"entropy_f": entropy_f}
    s = SRPServer(verifier, params=params, **kwargs)
    c = SRPClient(identity, password, salt, params=params, **kwargs)
    s.set_A(c.compute_A())
    c.set_B(s.compute_B())
    M2 = s.check_M1(c.compute_M1())
    c.check_M2(M2)
    return c, s
