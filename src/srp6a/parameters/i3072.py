from ..params import Params
from ..groups import G3072
# Params3072 has 128-bit security.
Params3072 = Params(G3072)
