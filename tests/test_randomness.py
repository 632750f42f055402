import unittest
from unittest.mock import patch

from nftraffle.raffle import SecretsRandomness, random_u32, reduce_to_index


class RandomU32Tests(unittest.TestCase):
    def test_reads_first_four_bytes_little_endian(self):
        self.assertEqual(random_u32(b"\x01\x00\x00\x00\xff\xff"), 1)
        self.assertEqual(random_u32(b"\xff\xff\xff\xff"), 2**32 - 1)

    def test_shift_rotates_seed(self):
        seed = b"\x01\x02\x03\x04\x05"
        self.assertEqual(random_u32(seed, 1), 0x05040302)
        # Rotation wraps around the seed length.
        self.assertEqual(random_u32(seed, 6), 0x05040302)
        self.assertEqual(random_u32(seed, 4), 0x03020105)

    def test_short_seed_rejected(self):
        with self.assertRaises(ValueError):
            random_u32(b"\x01\x02\x03")


class ReduceToIndexTests(unittest.TestCase):
    def test_plain_modulo(self):
        self.assertEqual(reduce_to_index(2**32 - 1, 10), 5)
        self.assertEqual(reduce_to_index(7, 3), 1)
        self.assertEqual(reduce_to_index(0, 1), 0)

    def test_non_positive_length_rejected(self):
        with self.assertRaises(ValueError):
            reduce_to_index(5, 0)


class SecretsRandomnessTests(unittest.TestCase):
    def test_seed_length(self):
        self.assertEqual(len(SecretsRandomness().random_seed()), 32)
        self.assertEqual(len(SecretsRandomness(seed_length=4).random_seed()), 4)

    def test_fresh_bytes_every_call(self):
        with patch(
            "nftraffle.raffle.randomness.secrets.token_bytes",
            side_effect=[b"a" * 32, b"b" * 32],
        ) as mock_token_bytes:
            source = SecretsRandomness()
            self.assertEqual(source.random_seed(), b"a" * 32)
            self.assertEqual(source.random_seed(), b"b" * 32)
        self.assertEqual(mock_token_bytes.call_count, 2)

    def test_too_short_seed_length_rejected(self):
        with self.assertRaises(ValueError):
            SecretsRandomness(seed_length=3)


if __name__ == "__main__":
    unittest.main()
