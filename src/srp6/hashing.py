import hashlib
from hkdf import Hkdf
from .util import bytes_to_number

# Every hash in the protocol is H(op1 | op2 | ...) over the operands in the
# order given. Numbers are always hashed in their fixed-length encoding (so
# g is PAD(g), A and B are PAD(A) and PAD(B), as in RFC5054), which is why
# callers hand us value objects rather than raw ints.

DefaultHash = hashlib.sha1

def operand_to_bytes(op):
    if isinstance(op, bytes):
        return op
    if isinstance(op, str):
        return op.encode("utf-8")
    to_bytes = getattr(op, "to_bytes", None)
    if to_bytes is None or isinstance(op, int):
        raise TypeError("cannot hash operand of type %r" % type(op))
    return to_bytes()

def hash_operands(hashfunc, operands):
    h = hashfunc()
    for op in operands:
        h.update(operand_to_bytes(op))
    return h.digest()

def hash_to_number(hashfunc, operands):
    return bytes_to_number(hash_operands(hashfunc, operands))

def digest_size(hashfunc):
    return hashfunc().digest_size

def hash_name(hashfunc):
    return hashfunc().name

def password_hash(hashfunc, username, password):
    # H(I | ":" | P), the inner half of x = H(s, H(I | ":" | P))
    return hash_operands(hashfunc, [username, b":", password])

def expand_key(key_bytes, info, num_bytes, hashfunc=hashlib.sha256):
    h = Hkdf(salt=b"", input_key_material=key_bytes, hash=hashfunc)
    return h.expand(info, num_bytes)
