from ..params import Params
from ..groups import G1536
# Params1536 uses a 1536-bit modulus, roughly 90-bit security.
Params1536 = Params(G1536)
