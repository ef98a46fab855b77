from ..errors import UnsupportedParameterSet
from .i1024 import Params1024
from .i1536 import Params1536
from .i2048 import Params2048
from .i3072 import Params3072
from .i4096 import Params4096

DefaultParams = Params2048

ALL_PARAMS = {1024: Params1024, 1536: Params1536, 2048: Params2048,
              3072: Params3072, 4096: Params4096}

def load_params(bits):
    """Return the Params for a parameter-set identifier (the modulus size in
    bits). Anything outside the fixed set is rejected."""
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise UnsupportedParameterSet("parameter set must be an integer bit "
                                      "length, not %r" % (bits,))
    try:
        return ALL_PARAMS[bits]
    except KeyError:
        raise UnsupportedParameterSet("no %d-bit parameter set (choose from "
                                      "%s)" % (bits, sorted(ALL_PARAMS))
                                      ) from None
