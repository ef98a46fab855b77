from ..params import Params
from ..groups import G1024
# Params1024 is roughly as secure as an 80-bit symmetric key, and uses a
# 1024-bit modulus. Keep it for interoperability and tests.
Params1024 = Params(G1024)
