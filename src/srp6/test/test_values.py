import unittest
from srp6.values import (Salt, PrimeModulus, Generator, MultiplierParameter,
                         PasswordVerifier, PrivateKey, PublicKey, SessionKey,
                         StrongSessionKey, Proof, StrongProof, UserDetails,
                         UserCredentials)
from srp6.errors import KeyLengthMismatch, HexDecodingError
from srp6.parameters.rfc5054 import Params2048, Params4096

ALL_WRAPPERS = [Salt, PrimeModulus, Generator, MultiplierParameter,
                PasswordVerifier, PrivateKey, PublicKey, SessionKey,
                StrongSessionKey, Proof, StrongProof]

class Lengths(unittest.TestCase):
    def test_exact_length(self):
        for klass in ALL_WRAPPERS:
            v = klass(b"\x01"*20, 20)
            self.assertEqual(v.num_bytes(), 20)
            self.assertEqual(len(v), 20)
            self.assertEqual(v.to_bytes(), b"\x01"*20)

    def test_wrong_length(self):
        for klass in ALL_WRAPPERS:
            for length in (0, 1, 19, 21, 256):
                with self.assertRaises(KeyLengthMismatch) as cm:
                    klass(b"\x01"*length, 20)
                self.assertEqual(cm.exception.given, length)
                self.assertEqual(cm.exception.expected, 20)

    def test_group_boundaries(self):
        g = Params2048
        for klass, length in [(Salt, g.SALT_LEN), (PublicKey, g.KEY_LEN),
                              (Proof, g.HASH_LEN),
                              (StrongSessionKey, g.HASH_LEN),
                              (MultiplierParameter, g.HASH_LEN)]:
            self.assertEqual(klass.for_group(g, b"\x00"*length).num_bytes(),
                             length)
            self.assertRaises(KeyLengthMismatch, klass.for_group, g,
                              b"\x00"*(length-1))
            self.assertRaises(KeyLengthMismatch, klass.for_group, g,
                              b"\x00"*(length+1))

    def test_not_bytes(self):
        self.assertRaises(TypeError, PublicKey, "00"*4, 4)
        self.assertRaises(TypeError, PublicKey, [0, 0, 0, 0], 4)

    def test_message(self):
        e = KeyLengthMismatch(3, 4)
        self.assertEqual(str(e), "The provided key length (3 byte) does not"
                         " match the expected (4 byte)")

class Hex(unittest.TestCase):
    def test_parse(self):
        p = Proof.from_hex("B2FA20E7AC9EEE2F015A4893BA2502B905E452FB", 20)
        self.assertEqual(p.hex(), "B2FA20E7AC9EEE2F015A4893BA2502B905E452FB")
        lower = Proof.from_hex("b2fa20e7ac9eee2f015a4893ba2502b905e452fb", 20)
        self.assertEqual(p, lower)

    def test_bad_hex(self):
        self.assertRaises(HexDecodingError, Proof.from_hex, "abc", 20)
        self.assertRaises(HexDecodingError, Proof.from_hex, "zz"*20, 20)
        self.assertRaises(ValueError, Proof.from_hex, "0x"+"00"*19, 20)

    def test_wrong_length_hex(self):
        with self.assertRaises(KeyLengthMismatch) as cm:
            Proof.from_hex("B2FA20E7AC9EEE2F015A4893BA2502B905E452", 20)
        self.assertEqual(cm.exception.given, 19)
        self.assertEqual(cm.exception.expected, 20)

    def test_leading_zeros_kept(self):
        p = PublicKey.from_hex("0000000000000001", 8)
        self.assertEqual(p.to_number(), 1)
        self.assertEqual(p.hex(), "0000000000000001")

class Numbers(unittest.TestCase):
    def test_from_number(self):
        p = PublicKey.from_number(0x0102, 4)
        self.assertEqual(p.to_bytes(), b"\x00\x00\x01\x02")
        self.assertEqual(p.to_number(), 0x0102)
        self.assertRaises(KeyLengthMismatch, PublicKey.from_number,
                          2**40, 4)

    def test_for_group(self):
        g = Params2048
        p = PublicKey.for_group(g, 5)
        self.assertEqual(p.num_bytes(), g.KEY_LEN)
        self.assertIs(PublicKey.for_group(g, p), p)
        self.assertEqual(PublicKey.for_group(g, p.hex()), p)
        self.assertEqual(PublicKey.for_group(g, p.to_bytes()), p)
        self.assertEqual(Generator.for_group(g, 2), g.g)
        # a 4096-bit value is refused by a 2048-bit group
        big = PublicKey.for_group(Params4096, 5)
        self.assertRaises(KeyLengthMismatch, PublicKey.for_group, g, big)

class Equality(unittest.TestCase):
    def test_eq(self):
        a = Proof(b"\x01"*20, 20)
        self.assertEqual(a, Proof(b"\x01"*20, 20))
        self.assertNotEqual(a, Proof(b"\x02"*20, 20))
        self.assertEqual(hash(a), hash(Proof(b"\x01"*20, 20)))

    def test_types_are_distinct(self):
        self.assertNotEqual(Proof(b"\x01"*20, 20),
                            StrongProof(b"\x01"*20, 20))
        self.assertNotEqual(Proof(b"\x01"*20, 20), b"\x01"*20)

class Secrets(unittest.TestCase):
    def test_repr_redacted(self):
        secret = b"\xab"*32
        for klass in (PrivateKey, SessionKey, StrongSessionKey,
                      PasswordVerifier):
            r = repr(klass(secret, 32))
            self.assertIn("redacted", r)
            self.assertNotIn("ABAB", r)

    def test_repr_public(self):
        r = repr(PublicKey(b"\xab"*32, 32))
        self.assertIn("ABABABAB", r)
        self.assertIn("32 bytes", r)

    def test_credentials(self):
        c = UserCredentials("Bob", "secret-password")
        self.assertNotIn("secret-password", repr(c))
        self.assertIn("Bob", repr(c))

    def test_user_details(self):
        s = Salt(b"\x01"*4, 4)
        v = PasswordVerifier(b"\x02"*4, 4)
        self.assertEqual(UserDetails("Bob", s, v), UserDetails("Bob", s, v))
        self.assertNotEqual(UserDetails("Bob", s, v),
                            UserDetails("Alice", s, v))
        self.assertNotIn("0202", repr(UserDetails("Bob", s, v)))

class DeriveKey(unittest.TestCase):
    def test_derive(self):
        K = StrongSessionKey(b"\x07"*20, 20)
        enc = K.derive_key(b"encryption")
        mac = K.derive_key(b"mac", 64)
        self.assertEqual(len(enc), 32)
        self.assertEqual(len(mac), 64)
        self.assertNotEqual(enc, mac[:32])
        self.assertEqual(enc, StrongSessionKey(b"\x07"*20, 20)
                         .derive_key(b"encryption"))
        self.assertRaises(TypeError, K.derive_key, "encryption")

if __name__ == '__main__':
    unittest.main()
