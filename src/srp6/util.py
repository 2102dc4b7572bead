import os, binascii, math
from .errors import KeyLengthMismatch, HexDecodingError

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num, num_bytes):
    """Encode a non-negative integer as exactly num_bytes big-endian bytes,
    padding with zeros on the left. Raises KeyLengthMismatch when the
    number does not fit."""
    if num < 0:
        raise ValueError("cannot encode a negative number")
    needed = size_bytes(num)
    if needed > num_bytes:
        raise KeyLengthMismatch(needed, num_bytes)
    fmt_str = "%0" + str(2*num_bytes) + "x"
    s_hex = fmt_str % num
    s = binascii.unhexlify(s_hex.encode("ascii"))
    assert len(s) == num_bytes
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError("expected bytes, got %r" % type(s))
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def hex_to_bytes(s):
    if isinstance(s, bytes):
        s = s.decode("ascii", "replace")
    try:
        return binascii.unhexlify(s.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise HexDecodingError("not a valid hex string: %s" % e)

def mod_pow(base, exponent, modulus):
    return pow(base, exponent, modulus)

def mod_sub(a, b, modulus):
    # python's % already yields a non-negative result for a positive modulus
    return (a - b) % modulus

def mod_add(a, b, modulus):
    return (a + b) % modulus

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

def random_list_of_ints(count, entropy_f=os.urandom):
    # return a list of ints, each 0<=x<=255, for masking
    return list(entropy_f(count))
def mask_list_of_ints(top_byte_mask_int, list_of_ints):
    return [top_byte_mask_int & list_of_ints[0]] + list_of_ints[1:]
def list_of_ints_to_number(l):
    return bytes_to_number(bytes(l))

def unbiased_randrange(start, stop, entropy_f):
    """Return a random integer k such that start <= k < stop, uniformly
    distributed across that range, like random.randrange but
    cryptographically bound and unbiased.
    """

    # we generate a random binary string up to 7 bits larger than we really
    # need, mask that down to be the right number of bits, then compare
    # against the range and try again if it's wrong. This will take a random
    # number of tries, but on average less than two

    # first we get 0<=number<(stop-start)
    maxval = stop - start
    if maxval <= 0:
        raise ValueError("empty range [%d, %d)" % (start, stop))

    top_byte_mask_int, num_bytes = generate_mask(maxval)
    while True:
        enough_bytes = random_list_of_ints(num_bytes, entropy_f)
        assert len(enough_bytes) == num_bytes
        candidate_bytes = mask_list_of_ints(top_byte_mask_int, enough_bytes)
        candidate_int = list_of_ints_to_number(candidate_bytes)
        if candidate_int < maxval:
            return start + candidate_int

def random_below(bound, entropy_f=os.urandom):
    """Uniform integer in [1, bound). Zero is never returned, so this is
    suitable for drawing ephemeral private exponents."""
    return unbiased_randrange(1, bound, entropy_f)
