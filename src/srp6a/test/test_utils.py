import unittest
from srp6a import util
from srp6a.errors import RandomGenerationFailure
from .common import PRG

class Utils(unittest.TestCase):
    def test_binsize(self):
        def sizebb(maxval):
            num_bits = util.size_bits(maxval)
            num_bytes = util.size_bytes(maxval)
            return (num_bytes, num_bits)
        self.assertEqual(sizebb(0x0f), (1, 4))
        self.assertEqual(sizebb(0x10), (1, 5))
        self.assertEqual(sizebb(0xff), (1, 8))
        self.assertEqual(sizebb(0x100), (2, 9))
        self.assertEqual(sizebb(0x1ff), (2, 9))
        self.assertEqual(sizebb(2**1024-1), (128, 1024))
        self.assertEqual(sizebb(2**256-1), (32, 256))

    def test_number_to_bytes(self):
        n2b = util.number_to_bytes
        self.assertEqual(n2b(0x00, 0xff), b"\x00")
        self.assertEqual(n2b(0x01, 0xff), b"\x01")
        self.assertEqual(n2b(0xff, 0xff), b"\xff")
        self.assertEqual(n2b(0x100, 0xffff), b"\x01\x00")
        self.assertEqual(n2b(0x1ff, 0xffff), b"\x01\xff")
        self.assertEqual(n2b(0x10000, 0xffffff), b"\x01\x00\x00")
        self.assertEqual(n2b(0x1, 0xffffffff), b"\x00\x00\x00\x01")
        self.assertRaises(ValueError, n2b, 0x10000, 0xff)
        self.assertRaises(ValueError, n2b, -1, 0xff)

    def test_bytes_to_number(self):
        b2n = util.bytes_to_number
        self.assertEqual(b2n(b""), 0)
        self.assertEqual(b2n(b"\x00"), 0x00)
        self.assertEqual(b2n(b"\xff"), 0xff)
        self.assertEqual(b2n(b"\x01\x02"), 0x0102)
        self.assertEqual(b2n(b"\x00\x00\x00\x01"), 0x01)
        self.assertRaises(TypeError, b2n, 42)
        self.assertRaises(TypeError, b2n, "not bytes")

    def test_mask(self):
        gen = util.generate_mask
        self.assertEqual(gen(0x01), (0x01, 1))
        self.assertEqual(gen(0x02), (0x03, 1))
        self.assertEqual(gen(0x07), (0x07, 1))
        self.assertEqual(gen(0x08), (0x0f, 1))
        self.assertEqual(gen(0x80), (0xff, 1))
        self.assertEqual(gen(0xff), (0xff, 1))
        self.assertEqual(gen(0x0100), (0x01, 2))
        self.assertEqual(gen(2**256-1), (0xff, 32))

    def test_unbiased_randrange(self):
        for seed in range(300):
            self.do_test_unbiased_randrange(0, 254, seed)
            self.do_test_unbiased_randrange(0, 256, seed)
            self.do_test_unbiased_randrange(1, 257, seed)
            self.do_test_unbiased_randrange(1, 2**256, seed)

    def do_test_unbiased_randrange(self, start, stop, seed):
        seed_b = str(seed).encode("ascii")
        num = util.unbiased_randrange(start, stop, entropy_f=PRG(seed_b))
        self.assertTrue(start <= num < stop, (num, seed))

    def test_randrange_empty(self):
        self.assertRaises(ValueError, util.unbiased_randrange, 5, 5)

class Entropy(unittest.TestCase):
    def test_random_bytes(self):
        self.assertEqual(len(util.random_bytes(20)), 20)
        fr = PRG(b"seed")
        self.assertEqual(util.random_bytes(20, fr), PRG(b"seed")(20))

    def test_short_read(self):
        def short(count):
            return b"\x01" * (count - 1)
        self.assertRaises(RandomGenerationFailure,
                          util.random_bytes, 32, short)
        self.assertRaises(RandomGenerationFailure,
                          util.unbiased_randrange, 1, 2**256, short)

    def test_broken_source(self):
        def broken(count):
            raise OSError("no entropy today")
        self.assertRaises(RandomGenerationFailure,
                          util.random_bytes, 32, broken)

    def test_not_bytes(self):
        self.assertRaises(RandomGenerationFailure,
                          util.random_bytes, 4, lambda count: None)

if __name__ == '__main__':
    unittest.main()
