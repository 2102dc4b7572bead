"""Typed wrappers for every number that takes part in an SRP6 handshake.

Each wrapper holds a big-endian byte string of a fixed length. The length
depends on the group configuration (KEY_LEN for anything living modulo N,
HASH_LEN for digests, SALT_LEN for salts), so it is stored on the instance
and checked whenever bytes, hex or numbers are turned into a wrapper:

    A = PublicKey(data, group.KEY_LEN)
    A = PublicKey.from_hex("A23B91...", group.KEY_LEN)
    A = PublicKey.for_group(group, data) # same thing, length looked up
    A.to_bytes(), A.to_number(), A.hex(), A.num_bytes()

Wrappers of different types never compare equal, even when their bytes
match. Equality is constant-time.
"""

import hmac
from .util import number_to_bytes, bytes_to_number, hex_to_bytes
from .errors import KeyLengthMismatch
from .hashing import expand_key

class _FixedLengthValue:
    # name of the Group attribute holding our length, for for_group()
    length_attr = "KEY_LEN"
    # secrets are not rendered by repr()
    secret = False

    def __init__(self, data, num_bytes):
        if not isinstance(data, bytes):
            raise TypeError("%s wants bytes, got %r"
                            % (self.__class__.__name__, type(data)))
        if len(data) != num_bytes:
            raise KeyLengthMismatch(len(data), num_bytes)
        self._data = data
        self._num_bytes = num_bytes

    @classmethod
    def from_hex(klass, s, num_bytes):
        return klass(hex_to_bytes(s), num_bytes)

    @classmethod
    def from_number(klass, i, num_bytes):
        return klass(number_to_bytes(i, num_bytes), num_bytes)

    @classmethod
    def for_group(klass, group, data):
        num_bytes = getattr(group, klass.length_attr)
        if isinstance(data, klass):
            if data.num_bytes() != num_bytes:
                raise KeyLengthMismatch(data.num_bytes(), num_bytes)
            return data
        if isinstance(data, str):
            return klass.from_hex(data, num_bytes)
        if isinstance(data, int):
            return klass.from_number(data, num_bytes)
        return klass(data, num_bytes)

    def num_bytes(self):
        return self._num_bytes

    def to_bytes(self):
        return self._data

    def to_number(self):
        return bytes_to_number(self._data)

    def hex(self):
        return self._data.hex().upper()

    def __len__(self):
        return self._num_bytes

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    def __hash__(self):
        return hash((type(self).__name__, self._data))

    def __repr__(self):
        if self.secret:
            return "<%s (%d bytes, redacted)>" % (type(self).__name__,
                                                   self._num_bytes)
        h = self.hex()
        if len(h) > 16:
            h = h[:16] + "..."
        return "<%s %s (%d bytes)>" % (type(self).__name__, h,
                                       self._num_bytes)

class PrimeModulus(_FixedLengthValue):
    """N, a large safe prime. All arithmetic is done modulo N."""

class Generator(_FixedLengthValue):
    """g, a generator modulo N."""
    length_attr = "GENERATOR_LEN"

class MultiplierParameter(_FixedLengthValue):
    """k = H(N, PAD(g))"""
    length_attr = "HASH_LEN"

class Salt(_FixedLengthValue):
    length_attr = "SALT_LEN"

class PasswordVerifier(_FixedLengthValue):
    """v = g^x mod N, stored by the host instead of the password."""
    secret = True

class PrivateKey(_FixedLengthValue):
    """An ephemeral secret exponent (a or b). Never reuse one."""
    secret = True

class PublicKey(_FixedLengthValue):
    """A = g^a mod N, or B = (k*v + g^b) mod N."""

class SessionKey(_FixedLengthValue):
    """S, the shared premaster secret."""
    secret = True

class StrongSessionKey(_FixedLengthValue):
    """K = H(S), the session key both sides end up with."""
    length_attr = "HASH_LEN"
    secret = True

    def derive_key(self, info, num_bytes=32):
        """Expand K into an application key (for encryption or MACs) with
        HKDF-SHA256. Use a different 'info' for each purpose."""
        if not isinstance(info, bytes):
            raise TypeError("info must be bytes")
        return expand_key(self._data, info, num_bytes)

class Proof(_FixedLengthValue):
    """M1 = H(A, B, K), the user's proof."""
    length_attr = "HASH_LEN"

class StrongProof(_FixedLengthValue):
    """M2 = H(A, M1, K), the host's proof."""
    length_attr = "HASH_LEN"

class UserDetails:
    """The record a host keeps for each user. The password is not in it."""
    def __init__(self, username, salt, verifier):
        self.username = username
        self.salt = salt
        self.verifier = verifier

    def __eq__(self, other):
        if not isinstance(other, UserDetails):
            return NotImplemented
        return (self.username == other.username and
                self.salt == other.salt and
                self.verifier == other.verifier)

    def __repr__(self):
        return "<UserDetails %r salt=%r verifier=%r>" % (
            self.username, self.salt, self.verifier)

class UserCredentials:
    def __init__(self, username, password):
        self.username = username
        self.password = password

    def __repr__(self):
        return "<UserCredentials %r password=<redacted>>" % (self.username,)
