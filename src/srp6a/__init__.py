from .srp import SRPServer, SRPClient
from .errors import (SRPError, UnsupportedParameterSet,
                     RandomGenerationFailure, InvalidClientPublic,
                     InvalidServerPublic, ProofMismatch, ServerProofMismatch,
                     HandshakeStateError, HandshakeNotFound,
                     AuthenticationFailed)
from .parameters import load_params, DefaultParams
from .verifier import compute_verifier, create_verifier, generate_salt
from .store import HandshakeStore, MemoryHandshakeStore, RedisHandshakeStore
from .login import Authenticator, Challenge, Session
from .config import Config
SRPServer, SRPClient, SRPError, UnsupportedParameterSet # hush pyflakes
RandomGenerationFailure, InvalidClientPublic, InvalidServerPublic
ProofMismatch, ServerProofMismatch, HandshakeStateError, HandshakeNotFound
AuthenticationFailed, load_params, DefaultParams, compute_verifier
create_verifier, generate_salt, HandshakeStore, MemoryHandshakeStore
RedisHandshakeStore, Authenticator, Challenge, Session, Config

from ._version import __version__
