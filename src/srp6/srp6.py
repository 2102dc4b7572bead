import os, json, hmac, logging
from . import util
from .errors import (SRP6Error, InvalidPublicKey, InvalidProof,
                     InvalidStrongProof, OnlyCallVerifyOnce, WrongGroupError,
                     WrongSideSerialized)
from .hashing import DefaultHash
from .values import (Salt, PrimeModulus, Generator, PasswordVerifier,
                     PrivateKey, PublicKey, SessionKey, StrongSessionKey,
                     Proof, StrongProof)
from .groups import Group
from .parameters.rfc5054 import Params2048

DefaultParams = Params2048

# B = 0 (mod N) would need g^b = -k*v (mod N). That never happens with a
# working RNG, so running out of attempts means something is badly broken.
MAX_KEY_ATTEMPTS = 3

logger = logging.getLogger(__name__)

class UnverifiedSessionKey(SRP6Error):
    """The session key is only usable once the host's strong proof has been
    checked with verify_strong_proof()."""

SideHost = "host"
SideUser = "user"

#  N, g, k = H(N, PAD(g))   from the Group
#  s = random, x = H(s, H(I ":" P)), v = g^x            (registration)
#  b = random, B = k*v + g^b                            (host)
#   a = random, A = g^a                                 (user)
#   u = H(A, B)
#   S = (B - k*g^x) ^ (a + u*x)                         (user)
#  S = (A * v^u) ^ b                                    (host)
#  K = H(S), M1 = H(A, B, K), M2 = H(A, M1, K)
# all arithmetic mod N

def _short(value):
    return value.hex()[:16]

def _check_credentials(username, password):
    if not isinstance(username, (str, bytes)) or not username:
        raise ValueError("username must be a non-empty string")
    if not isinstance(password, (str, bytes)) or not password:
        raise ValueError("password must be a non-empty string")

def _check_public_key(group, key):
    if key.to_number() % group.N_int == 0:
        logger.warning("rejecting public key %s: zero modulo N", _short(key))
        raise InvalidPublicKey(key)

def _scrambler(group, A, B, received):
    u = group.hash_to_number(A, B)
    if u == 0:
        logger.warning("rejecting public key %s: u is zero", _short(received))
        raise InvalidPublicKey(received)
    return u

def _compute_proofs(group, A, B, S_int):
    S = SessionKey.from_number(S_int, group.KEY_LEN)
    K = StrongSessionKey(group.hash(S), group.HASH_LEN)
    M1 = Proof(group.hash(A, B, K), group.HASH_LEN)
    return K, M1

def _strong_proof(group, A, M1, K):
    return StrongProof(group.hash(A, M1, K), group.HASH_LEN)

def _check_hashed_params(d, group, klass):
    if d["hashed_params"] != group.hash_params():
        err = ("%s.from_serialized() must be called with the same"
               " params= that were used to create the serialized data."
               " These are different somehow." % klass.__name__)
        raise WrongGroupError(err)

class SRP6:
    """The host's side of SRP6: registering users and starting handshakes.

        srp = SRP6(params=Params2048)
        salt, verifier = srp.generate_new_user_secrets("Bob", "pw")
        # ... persist (username, salt, verifier) ...
        handshake, proof_verifier = srp.start_handshake(user_details)
    """

    def __init__(self, params=DefaultParams, entropy_f=os.urandom):
        assert isinstance(params, Group), repr(params)
        self.params = params
        self.entropy_f = entropy_f

    @property
    def KEY_LEN(self):
        return self.params.KEY_LEN

    @property
    def SALT_LEN(self):
        return self.params.SALT_LEN

    @property
    def HASH_LEN(self):
        return self.params.HASH_LEN

    @property
    def N(self):
        return self.params.N

    @property
    def g(self):
        return self.params.g

    @property
    def k(self):
        return self.params.k

    def get_constants(self):
        return self.params.get_constants()

    def generate_new_user_secrets(self, username, password):
        """Return a fresh (Salt, PasswordVerifier) for a new user, or for a
        password change. The password itself is not kept anywhere."""
        _check_credentials(username, password)
        g = self.params
        salt = Salt(self.entropy_f(g.SALT_LEN), g.SALT_LEN)
        x = g.x(salt, username, password)
        v = util.mod_pow(g.g_int, x, g.N_int)
        return salt, PasswordVerifier.from_number(v, g.KEY_LEN)

    def start_handshake(self, user_details):
        """Begin authenticating a known user. Send the Handshake to the
        user, keep the HandshakeProofVerifier for their reply."""
        g = self.params
        N = g.N_int
        salt = Salt.for_group(g, user_details.salt)
        v = PasswordVerifier.for_group(g, user_details.verifier)
        kv = (g.k_int * v.to_number()) % N
        for attempt in range(MAX_KEY_ATTEMPTS):
            b = util.random_below(N, self.entropy_f)
            B_int = util.mod_add(kv, util.mod_pow(g.g_int, b, N), N)
            if B_int % N != 0:
                break
            logger.warning("drew a private key giving B=0, retrying")
        else:
            raise InvalidPublicKey(PublicKey.from_number(B_int, g.KEY_LEN))
        B = PublicKey.from_number(B_int, g.KEY_LEN)
        logger.debug("handshake started for %r, B=%s", user_details.username,
                     _short(B))
        handshake = Handshake(salt, B, g)
        proof_verifier = HandshakeProofVerifier(
            PrivateKey.from_number(b, g.KEY_LEN), v, B, g)
        return handshake, proof_verifier

class Handshake:
    """What the host sends to the user: {s, N, g, B}."""

    def __init__(self, s, B, params=DefaultParams):
        self.group = params
        self.s = Salt.for_group(params, s)
        self.B = PublicKey.for_group(params, B)
        self.N = params.N
        self.g = params.g

    @classmethod
    def from_values(klass, s, N, g, B, hashfunc=DefaultHash):
        """Rebuild a Handshake from the values a host sent over the wire.
        N and g may be wrappers, ints or hex strings. The hash function has
        to be agreed on out of band."""
        def _number(value, wrapper):
            if isinstance(value, wrapper):
                return value.to_number()
            if isinstance(value, str):
                return util.bytes_to_number(util.hex_to_bytes(value))
            if isinstance(value, bytes):
                return util.bytes_to_number(value)
            return value
        if isinstance(s, Salt):
            salt_len = s.num_bytes()
        elif isinstance(s, str):
            s = util.hex_to_bytes(s)
            salt_len = len(s)
        else:
            salt_len = len(s)
        group = Group(_number(N, PrimeModulus), _number(g, Generator),
                      salt_len=salt_len, hashfunc=hashfunc)
        return klass(s, B, group)

    def calculate_proof(self, username, password, entropy_f=os.urandom):
        """Prove to the host that we know the password. Returns the
        HandshakeProof to send, and a StrongProofVerifier to keep for the
        host's answer."""
        _check_credentials(username, password)
        g = self.group
        N = g.N_int
        _check_public_key(g, self.B)

        x = g.x(self.s, username, password)
        a = util.random_below(N, entropy_f)
        A = PublicKey.from_number(util.mod_pow(g.g_int, a, N), g.KEY_LEN)
        _check_public_key(g, A)
        u = _scrambler(g, A, self.B, received=self.B)

        kgx = (g.k_int * util.mod_pow(g.g_int, x, N)) % N
        base = util.mod_sub(self.B.to_number(), kgx, N)
        S_int = util.mod_pow(base, a + u * x, N)
        K, M1 = _compute_proofs(g, A, self.B, S_int)
        logger.debug("proof computed, A=%s", _short(A))
        return HandshakeProof(A, M1), StrongProofVerifier(A, M1, K, g)

    def __eq__(self, other):
        if not isinstance(other, Handshake):
            return NotImplemented
        return (self.group == other.group and self.s == other.s and
                self.B == other.B)

    def __repr__(self):
        return "<Handshake s=%r B=%r %r>" % (self.s, self.B, self.group)

class HandshakeProof:
    """What the user sends back: {A, M1}."""

    def __init__(self, A, M1):
        self.A = A
        self.M1 = M1

    def __eq__(self, other):
        if not isinstance(other, HandshakeProof):
            return NotImplemented
        return self.A == other.A and self.M1 == other.M1

    def __repr__(self):
        return "<HandshakeProof A=%r M1=%r>" % (self.A, self.M1)

class HandshakeProofVerifier:
    """The host's half of a handshake in progress: b, v and B. Use it
    once, for one user's proof, then throw it away."""

    side = SideHost

    def __init__(self, b, v, B, params=DefaultParams):
        self.group = params
        self.b = PrivateKey.for_group(params, b)
        self.v = PasswordVerifier.for_group(params, v)
        self.B = PublicKey.for_group(params, B)
        self._used = False

    def verify_proof(self, proof):
        """Check the user's proof. Returns (StrongProof, StrongSessionKey):
        send the StrongProof to the user, adopt the key as the session key.
        Raises InvalidProof when the user does not know the password."""
        if self._used:
            raise OnlyCallVerifyOnce("verify_proof() can only be called once")
        self._used = True

        g = self.group
        N = g.N_int
        A = PublicKey.for_group(g, proof.A)
        M1 = Proof.for_group(g, proof.M1)
        _check_public_key(g, A)
        u = _scrambler(g, A, self.B, received=A)

        v_u = util.mod_pow(self.v.to_number(), u, N)
        S_int = util.mod_pow((A.to_number() * v_u) % N, self.b.to_number(), N)
        K, expected_M1 = _compute_proofs(g, A, self.B, S_int)
        if not hmac.compare_digest(expected_M1.to_bytes(), M1.to_bytes()):
            logger.warning("proof from A=%s does not match", _short(A))
            raise InvalidProof(M1)
        logger.debug("proof from A=%s verified", _short(A))
        return _strong_proof(g, A, M1, K), K

    def serialize(self):
        if self._used:
            raise OnlyCallVerifyOnce("this verifier was already used")
        return json.dumps(self._serialize_to_dict()).encode("ascii")

    @classmethod
    def from_serialized(klass, data, params=DefaultParams):
        d = json.loads(data.decode("ascii"))
        if d["side"] != klass.side:
            raise WrongSideSerialized
        _check_hashed_params(d, params, klass)
        return klass(d["b"], d["v"], d["B"], params)

    def _serialize_to_dict(self):
        return {"hashed_params": self.group.hash_params(),
                "side": self.side,
                "b": self.b.hex(),
                "v": self.v.hex(),
                "B": self.B.hex(),
                }

    def __repr__(self):
        return "<HandshakeProofVerifier B=%r>" % (self.B,)

class StrongProofVerifier:
    """The user's half of a handshake in progress: A, M1 and K."""

    side = SideUser

    def __init__(self, A, M1, K, params=DefaultParams):
        self.group = params
        self.A = PublicKey.for_group(params, A)
        self.M1 = Proof.for_group(params, M1)
        self.K = StrongSessionKey.for_group(params, K)
        self._verified = False

    def verify_strong_proof(self, strong_proof):
        """Check that the host knows our verifier. Raises
        InvalidStrongProof if it does not."""
        g = self.group
        M2 = StrongProof.for_group(g, strong_proof)
        expected_M2 = _strong_proof(g, self.A, self.M1, self.K)
        if not hmac.compare_digest(expected_M2.to_bytes(), M2.to_bytes()):
            logger.warning("strong proof does not match")
            raise InvalidStrongProof(M2)
        self._verified = True
        logger.debug("strong proof verified, A=%s", _short(self.A))

    def session_key(self):
        if not self._verified:
            raise UnverifiedSessionKey("call verify_strong_proof() first")
        return self.K

    def serialize(self):
        return json.dumps(self._serialize_to_dict()).encode("ascii")

    @classmethod
    def from_serialized(klass, data, params=DefaultParams):
        d = json.loads(data.decode("ascii"))
        if d["side"] != klass.side:
            raise WrongSideSerialized
        _check_hashed_params(d, params, klass)
        return klass(d["A"], d["M1"], d["K"], params)

    def _serialize_to_dict(self):
        return {"hashed_params": self.group.hash_params(),
                "side": self.side,
                "A": self.A.hex(),
                "M1": self.M1.hex(),
                "K": self.K.hex(),
                }

    def __repr__(self):
        return "<StrongProofVerifier A=%r>" % (self.A,)
