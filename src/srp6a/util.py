import os, math
from .errors import RandomGenerationFailure

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num, maxval):
    """Encode 'num' big-endian, left-padded with zeros to the width of
    'maxval'. Every integer that gets hashed or sent to the other side goes
    through here, so both ends agree on the byte string."""
    if num < 0 or num > maxval:
        raise ValueError("number out of range for this encoding")
    s = num.to_bytes(size_bytes(maxval), "big")
    assert isinstance(s, bytes)
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError("expected bytes, got %r" % type(s))
    return int.from_bytes(s, "big")

def random_bytes(count, entropy_f=os.urandom):
    # a short read or a broken entropy source must never turn into a
    # predictable secret
    try:
        data = entropy_f(count)
    except (OSError, NotImplementedError) as e:
        raise RandomGenerationFailure("entropy source failed: %s" % e) from e
    if not isinstance(data, bytes) or len(data) != count:
        raise RandomGenerationFailure("entropy source did not return "
                                      "%d bytes" % count)
    return data

def generate_mask(maxval):
    num_bytes = size_bytes(maxval)
    num_bits = size_bits(maxval)
    leftover_bits = num_bits % 8
    if leftover_bits:
        top_byte_mask_int = (0x1 << leftover_bits) - 1
    else:
        top_byte_mask_int = 0xff
    assert 0 <= top_byte_mask_int <= 0xff
    return (top_byte_mask_int, num_bytes)

def unbiased_randrange(start, stop, entropy_f=os.urandom):
    """Return a random integer k such that start <= k < stop, uniformly
    distributed across that range, like random.randrange but
    cryptographically bound and unbiased.

    r(1, 2**256) provides a non-zero 256-bit ephemeral exponent.
    """

    # we generate a random binary string up to 7 bits larger than we really
    # need, mask that down to be the right number of bits, then compare
    # against the range and try again if it's wrong. This will take a random
    # number of tries, but on average less than two
    maxval = stop - start
    if maxval <= 0:
        raise ValueError("empty range")

    top_byte_mask_int, num_bytes = generate_mask(maxval)
    while True:
        enough_bytes = bytearray(random_bytes(num_bytes, entropy_f))
        enough_bytes[0] &= top_byte_mask_int
        candidate_int = int.from_bytes(bytes(enough_bytes), "big")
        if candidate_int < maxval:
            return start + candidate_int
