from .util import bytes_to_number

# N    A large safe prime (N = 2q+1, where q is prime)
#      All arithmetic is done modulo N.
# g    A generator modulo N
# k    Multiplier parameter, k = H(N, g) in SRP-6a
# s    User's salt
# I    Username (identity)
# p    Cleartext password
# H()  One-way hash function
# u    Random scrambling parameter
# a,b  Secret ephemeral values
# A,B  Public ephemeral values
# x    Private key (derived from p and s)
# v    Password verifier
# S    Premaster secret
# K    Session key
#
# Integers are hashed as their padded big-endian encoding (params.pad), so
# both sides agree on the exact bytes regardless of leading zeros.
#
# x = H(s | H(I | ":" | p))
# v = g^x
#  B = k*v + g^b
# A = g^a
# u = H(A | B)
# S = (B - k*g^x) ^ (a + u*x)       client
#  S = (A * v^u) ^ b                server
# K = H(S)
# M1 = H(A | B | S)
# M2 = H(A | M1 | K)

def multiplier(params):
    return bytes_to_number(params.H(params.pad(params.N),
                                    params.pad(params.g)))

def compute_x(params, salt, identity, password):
    assert isinstance(salt, bytes), repr(salt)
    assert isinstance(identity, bytes), repr(identity)
    assert isinstance(password, bytes)
    inner = params.H(identity, b":", password)
    return bytes_to_number(params.H(salt, inner))

def compute_u(params, A, B):
    return bytes_to_number(params.H(params.pad(A), params.pad(B)))

def server_premaster(params, v, A, b, u):
    N = params.N
    return pow(A * pow(v, u, N) % N, b, N)

def client_premaster(params, B, x, a, u):
    N = params.N
    base = (B - params.k * pow(params.g, x, N)) % N
    return pow(base, a + u * x, N)

def session_key(params, S):
    return params.H(params.pad(S))

def proof_m1(params, A, B, S):
    return params.H(params.pad(A), params.pad(B), params.pad(S))

def proof_m2(params, A, M1, K):
    return params.H(params.pad(A), M1, K)
