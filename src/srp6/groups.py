"""Group configuration.

A Group is one SRP6 parameter set: the safe prime N, the generator g, the
salt length and the hash function H. Everything else is derived once, when
the Group is built:

    KEY_LEN       = byte length of N (A, B, v, S, a, b all have this size)
    SALT_LEN      = byte length of the salt (KEY_LEN unless told otherwise)
    HASH_LEN      = digest size of H (k, K, M1, M2 have this size)
    GENERATOR_LEN = byte length of g
    k             = H(N | PAD(g))

Groups are plain values: build as many as you like, there is no global
"current" group. Values carry their own lengths, and the protocol code
checks them against the Group it is running with, so a 4096-bit PublicKey
cannot sneak into a 2048-bit handshake.
"""

import hashlib
from .util import size_bits, size_bytes, number_to_bytes
from .hashing import (DefaultHash, hash_operands, hash_to_number,
                      password_hash, digest_size, hash_name)
from .values import PrimeModulus, Generator, MultiplierParameter

class Group:
    def __init__(self, N, g, salt_len=None, hashfunc=DefaultHash):
        if not 1 < g < N:
            raise ValueError("generator must lie in (1, N)")
        self.key_bits = size_bits(N)
        self.KEY_LEN = size_bytes(N)
        self.SALT_LEN = salt_len or self.KEY_LEN
        self.GENERATOR_LEN = size_bytes(g)
        self.hashfunc = hashfunc
        self.HASH_LEN = digest_size(hashfunc)

        self.N = PrimeModulus.from_number(N, self.KEY_LEN)
        self.g = Generator.from_number(g, self.GENERATOR_LEN)
        # these are used by every exponentiation, so keep the ints around
        self.N_int = N
        self.g_int = g

        # SRP-6a defines k = H(N, g), with g padded to the length of N
        k_bytes = self.hash(self.N, self.pad(g))
        self.k = MultiplierParameter(k_bytes, self.HASH_LEN)
        self.k_int = self.k.to_number()

    def pad(self, i):
        return number_to_bytes(i, self.KEY_LEN)

    def hash(self, *operands):
        return hash_operands(self.hashfunc, operands)

    def hash_to_number(self, *operands):
        return hash_to_number(self.hashfunc, operands)

    def x(self, salt, username, password):
        # x = H(s, H(I | ":" | P))
        return self.hash_to_number(salt, password_hash(self.hashfunc,
                                                       username, password))

    def get_constants(self):
        return (self.N, self.g, self.k)

    def hash_params(self):
        # enough to notice, when restoring saved state, that the caller
        # handed us a different group than the one the state was made with
        pieces = [self.N.to_bytes(), self.g.to_bytes(),
                  str(self.SALT_LEN).encode("ascii"),
                  hash_name(self.hashfunc).encode("ascii")]
        return hashlib.sha256(b"".join(pieces)).hexdigest()

    def __eq__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        return self.hash_params() == other.hash_params()

    def __hash__(self):
        return hash(self.hash_params())

    def __repr__(self):
        return "<Group %d-bit, g=%d, %s>" % (self.key_bits, self.g_int,
                                              hash_name(self.hashfunc))
