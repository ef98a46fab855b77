import os
from .parameters import DefaultParams
from .primitives import compute_x
from .util import random_bytes

SALT_SIZE_BYTES = 20

def generate_salt(entropy_f=os.urandom):
    return random_bytes(SALT_SIZE_BYTES, entropy_f)

def compute_verifier(params, salt, identity, password):
    """Return v = g^x mod N, padded, for x = H(salt | H(identity:password)).

    This is what the server stores instead of the password. It is computed
    once at registration time; login never needs the password again."""
    x = compute_x(params, salt, identity, password)
    return params.pad(pow(params.g, x, params.N))

def create_verifier(identity, password, params=DefaultParams,
                    entropy_f=os.urandom):
    salt = generate_salt(entropy_f)
    return salt, compute_verifier(params, salt, identity, password)
