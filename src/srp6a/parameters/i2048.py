from ..params import Params
from ..groups import G2048
# Params2048 has 112-bit security. It is the default.
Params2048 = Params(G2048)
