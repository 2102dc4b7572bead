class SRP6Error(Exception):
    pass

class KeyLengthMismatch(SRP6Error, ValueError):
    """Some bytes were offered for a value of a different fixed length."""
    def __init__(self, given, expected):
        SRP6Error.__init__(self,
                           "The provided key length (%d byte) does not match"
                           " the expected (%d byte)" % (given, expected))
        self.given = given
        self.expected = expected

class HexDecodingError(SRP6Error, ValueError):
    """The hex string had an odd length or a non-hex character."""

class InvalidPublicKey(SRP6Error):
    """A public key reduced to zero modulo N, or the scrambling parameter
    derived from it was zero. The handshake must be aborted."""
    def __init__(self, public_key):
        SRP6Error.__init__(self, "The provided public key is invalid")
        self.public_key = public_key

class InvalidProof(SRP6Error):
    """The user's proof M1 did not match: wrong password, or tampering."""
    def __init__(self, proof):
        SRP6Error.__init__(self, "The provided proof is invalid")
        self.proof = proof

class InvalidStrongProof(SRP6Error):
    """The host's strong proof M2 did not match: the host does not know
    our verifier."""
    def __init__(self, strong_proof):
        SRP6Error.__init__(self, "The provided strong proof is invalid")
        self.strong_proof = strong_proof

class UnsupportedKeyLength(SRP6Error):
    def __init__(self, bits):
        SRP6Error.__init__(self, "no standard group for %r bits" % (bits,))
        self.bits = bits

class OnlyCallVerifyOnce(SRP6Error):
    """verify_proof() may only be called once. Re-using a proof verifier
    would let an attacker test many passwords against one ephemeral key."""

class WrongGroupError(SRP6Error):
    pass

class WrongSideSerialized(SRP6Error):
    """You tried to unserialize data stored for the other side."""
