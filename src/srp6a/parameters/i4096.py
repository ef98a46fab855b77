from ..params import Params
from ..groups import G4096
# Params4096 uses a 4096-bit modulus. Each handshake costs noticeably more
# CPU than with Params2048.
Params4096 = Params(G4096)
