from .srp6 import (SRP6, Handshake, HandshakeProof, HandshakeProofVerifier,
                   StrongProofVerifier, DefaultParams, UnverifiedSessionKey)
from .groups import Group
from .parameters.rfc5054 import (Params2048, Params3072, Params4096,
                                 Params6144, Params8192, group_for_key_length)
from .values import (Salt, PrimeModulus, Generator, MultiplierParameter,
                     PasswordVerifier, PrivateKey, PublicKey, SessionKey,
                     StrongSessionKey, Proof, StrongProof, UserDetails,
                     UserCredentials)
from .errors import (SRP6Error, KeyLengthMismatch, HexDecodingError,
                     InvalidPublicKey, InvalidProof, InvalidStrongProof,
                     UnsupportedKeyLength, OnlyCallVerifyOnce,
                     WrongGroupError, WrongSideSerialized)
# hush pyflakes
SRP6, Handshake, HandshakeProof, HandshakeProofVerifier, StrongProofVerifier
DefaultParams, UnverifiedSessionKey, Group, group_for_key_length
Params2048, Params3072, Params4096, Params6144, Params8192
Salt, PrimeModulus, Generator, MultiplierParameter, PasswordVerifier
PrivateKey, PublicKey, SessionKey, StrongSessionKey, Proof, StrongProof
UserDetails, UserCredentials
SRP6Error, KeyLengthMismatch, HexDecodingError, InvalidPublicKey
InvalidProof, InvalidStrongProof, UnsupportedKeyLength, OnlyCallVerifyOnce
WrongGroupError, WrongSideSerialized

__version__ = "0.1.0"
