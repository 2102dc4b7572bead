import unittest
import hashlib
from srp6.groups import Group
from srp6.parameters import rfc5054
from srp6.parameters.rfc5054 import (Params2048, Params3072, Params4096,
                                     Params6144, Params8192,
                                     group_for_key_length)
from srp6.errors import UnsupportedKeyLength

ALL_PARAMS = [Params2048, Params3072, Params4096, Params6144, Params8192]

class Constants(unittest.TestCase):
    def test_lengths(self):
        for bits, params in zip([2048, 3072, 4096, 6144, 8192], ALL_PARAMS):
            self.assertEqual(params.key_bits, bits)
            self.assertEqual(params.KEY_LEN, bits // 8)
            self.assertEqual(params.SALT_LEN, bits // 8)
            self.assertEqual(params.HASH_LEN, 20)
            self.assertEqual(params.N.num_bytes(), params.KEY_LEN)
            self.assertEqual(params.k.num_bytes(), params.HASH_LEN)
            self.assertEqual(params.GENERATOR_LEN, 1)

    def test_generators(self):
        self.assertEqual(Params2048.g.to_number(), 2)
        self.assertEqual(Params3072.g.to_number(), 5)
        self.assertEqual(Params4096.g.to_number(), 5)
        self.assertEqual(Params6144.g.to_number(), 5)
        self.assertEqual(Params8192.g.to_number(), 19)

    def test_primes(self):
        self.assertTrue(Params2048.N.hex().startswith("AC6BDB41324A9A9B"))
        self.assertTrue(Params2048.N.hex().endswith("0FA7111F9E4AFF73"))
        for params in ALL_PARAMS[1:]:
            self.assertTrue(params.N.hex().startswith("FFFFFFFFFFFFFFFFC90F"))
            self.assertTrue(params.N.hex().endswith("FFFFFFFFFFFFFFFF"))
            # Fermat: g^(N-1) == 1 for prime N
            N = params.N_int
            self.assertEqual(pow(params.g_int, N - 1, N), 1)

    def test_known_multipliers(self):
        # k = SHA1(N | PAD(g))
        self.assertEqual(Params2048.k.hex(),
                         "A56303F32C60E599E82C396F0D57F1B344A7313C")
        self.assertEqual(Params3072.k.hex(),
                         "C2FD8F8B274FA634EFD702BD22FB6C1218D9F2A0")
        self.assertEqual(Params4096.k.hex(),
                         "A521694605810C01ABDFA01FD6207173A56178E9")
        self.assertEqual(Params6144.k.hex(),
                         "153C65E6058EBCAB714D6940818015C2283ADCB2")
        self.assertEqual(Params8192.k.hex(),
                         "3BC248EDFAFEF15A15518351B43DFCA0A37C4941")

    def test_sha256_multiplier(self):
        g = group_for_key_length(2048, hashfunc=hashlib.sha256)
        self.assertEqual(g.HASH_LEN, 32)
        self.assertEqual(g.k.hex().lower(),
                         "05b9e8ef059c6b32ea59fc1d322d37f04aa30bae5aa9003b8321e21ddb04e300")

    def test_get_constants(self):
        N, g, k = Params2048.get_constants()
        self.assertEqual(N, Params2048.N)
        self.assertEqual(g, Params2048.g)
        self.assertEqual(k, Params2048.k)

class Configuration(unittest.TestCase):
    def test_deterministic(self):
        for bits in rfc5054.supported_key_lengths():
            g1 = group_for_key_length(bits)
            g2 = group_for_key_length(bits)
            self.assertIsNot(g1, g2)
            self.assertEqual(g1.N, g2.N)
            self.assertEqual(g1.g, g2.g)
            self.assertEqual(g1.k, g2.k)
            self.assertEqual(g1, g2)
            self.assertEqual(g1.hash_params(), g2.hash_params())

    def test_distinct(self):
        self.assertNotEqual(Params2048, Params4096)
        self.assertNotEqual(Params2048.hash_params(),
                            Params4096.hash_params())
        sha256 = group_for_key_length(2048, hashfunc=hashlib.sha256)
        self.assertNotEqual(Params2048.hash_params(), sha256.hash_params())
        short_salt = group_for_key_length(2048, salt_len=16)
        self.assertEqual(short_salt.SALT_LEN, 16)
        self.assertNotEqual(Params2048.hash_params(),
                            short_salt.hash_params())

    def test_supported(self):
        self.assertEqual(rfc5054.supported_key_lengths(),
                         [2048, 3072, 4096, 6144, 8192])
        with self.assertRaises(UnsupportedKeyLength) as cm:
            group_for_key_length(1000)
        self.assertEqual(cm.exception.bits, 1000)

    def test_custom_group(self):
        # a toy group is fine for the arithmetic, if not for security
        g = Group(23, 5)
        self.assertEqual(g.KEY_LEN, 1)
        self.assertEqual(g.key_bits, 5)
        self.assertEqual(g.k.to_bytes(), hashlib.sha1(b"\x17\x05").digest())
        self.assertRaises(ValueError, Group, 23, 1)
        self.assertRaises(ValueError, Group, 23, 23)

    def test_x(self):
        salt = b"\x5a" * 256
        inner = hashlib.sha1(b"Bob:secret-password").digest()
        expected = int(hashlib.sha1(salt + inner).hexdigest(), 16)
        self.assertEqual(Params2048.x(salt, "Bob", "secret-password"),
                         expected)

    def test_repr(self):
        self.assertEqual(repr(Params2048), "<Group 2048-bit, g=2, sha1>")

if __name__ == '__main__':
    unittest.main()
