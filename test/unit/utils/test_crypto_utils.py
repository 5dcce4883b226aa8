from txsigner import eth_constants
from txsigner.testing import helpers
from txsigner.testing.abstract_test_case import AbstractTestCase
from txsigner.utils import convert, crypto_utils


class CryptoUtilsTests(AbstractTestCase):

    def test_sign_and_recover__valid_signature(self):
        dummy_private_key = crypto_utils.make_private_key(helpers.generate_bytearray(111))
        public_key = crypto_utils.private_to_public_key(dummy_private_key)

        msg = helpers.generate_bytearray(222)
        msg_hash = crypto_utils.keccak_hash(msg)

        signature = crypto_utils.sign(msg_hash, dummy_private_key)

        self.assertEqual(eth_constants.SIGNATURE_LEN, len(signature))
        self.assertEqual(public_key, crypto_utils.recover_public_key(msg_hash, signature))

    def test_sign_and_recover__other_signer(self):
        dummy_private_key1 = crypto_utils.make_private_key(helpers.generate_bytearray(111))
        dummy_private_key2 = crypto_utils.make_private_key(helpers.generate_bytearray(222))
        public_key2 = crypto_utils.private_to_public_key(dummy_private_key2)

        msg = helpers.generate_bytearray(333)
        msg_hash = crypto_utils.keccak_hash(msg)

        signature = crypto_utils.sign(msg_hash, dummy_private_key1)

        self.assertNotEqual(public_key2, crypto_utils.recover_public_key(msg_hash, signature))

    def test_sign_is_deterministic(self):
        private_key = crypto_utils.make_private_key(b"seed")
        msg_hash = crypto_utils.keccak_hash(b"message")

        self.assertEqual(crypto_utils.sign(msg_hash, private_key), crypto_utils.sign(msg_hash, private_key))

    def test_sign_produces_low_s(self):
        private_key = crypto_utils.make_private_key(b"seed")
        for i in range(20):
            msg_hash = crypto_utils.keccak_hash(bytes([i]))
            _, _, s = crypto_utils.decode_signature(crypto_utils.sign(msg_hash, private_key))
            self.assertLessEqual(s, eth_constants.SECP256K1_N // 2)

    def test_sign_invalid_arguments(self):
        msg_hash = crypto_utils.keccak_hash(b"message")
        self.assertRaises(ValueError, crypto_utils.sign, b"", helpers.PRIVATE_KEY_ONE)
        self.assertRaises(ValueError, crypto_utils.sign, msg_hash, b"\x01" * 31)
        self.assertRaises(ValueError, crypto_utils.sign, msg_hash, b"\x00" * 32)

    def test_keccak_hash(self):
        self.assertEqual(
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470",
            convert.bytes_to_hex(crypto_utils.keccak_hash(b""))
        )

        sha1 = crypto_utils.keccak_hash(helpers.generate_bytearray(111))
        sha2 = crypto_utils.keccak_hash(helpers.generate_bytearray(1111))

        self.assertEqual(len(sha1), eth_constants.SHA3_LEN_BYTES)
        self.assertEqual(len(sha2), eth_constants.SHA3_LEN_BYTES)
        self.assertNotEqual(sha1, sha2)

    def test_recover_public_key(self):
        dummy_private_key = crypto_utils.make_private_key(helpers.generate_bytearray(111))
        public_key = crypto_utils.private_to_public_key(dummy_private_key)

        msg_hash = crypto_utils.keccak_hash(helpers.generate_bytearray(222))
        signature = crypto_utils.sign(msg_hash, dummy_private_key)

        recovered_pub_key = crypto_utils.recover_public_key(msg_hash, signature)

        self.assertEqual(recovered_pub_key, public_key)
        self.assertRaises(ValueError, crypto_utils.recover_public_key, msg_hash, signature[:64])

    def test_encode_decode_signature(self):
        dummy_private_key = crypto_utils.make_private_key(helpers.generate_bytearray(111))
        msg_hash = crypto_utils.keccak_hash(helpers.generate_bytearray(222))

        signature = crypto_utils.sign(msg_hash, dummy_private_key)

        v, r, s = crypto_utils.decode_signature(signature)

        self.assertIn(v, (27, 28))
        self.assertEqual(signature, crypto_utils.encode_signature(v, r, s))

    def test_encode_signature_pads_short_scalars(self):
        signature = crypto_utils.encode_signature(28, 1, 2)
        self.assertEqual(b"\x00" * 31 + b"\x01" + b"\x00" * 31 + b"\x02" + b"\x01", signature)

        self.assertRaises(ValueError, crypto_utils.encode_signature, 29, 1, 2)
        self.assertRaises(ValueError, crypto_utils.encode_signature, "27", 1, 2)

    def test_public_key_to_address(self):
        public_key = crypto_utils.private_to_public_key(helpers.PRIVATE_KEY_ONE)
        address = crypto_utils.public_key_to_address(public_key)

        self.assertEqual(helpers.PRIVATE_KEY_ONE_ADDRESS, convert.bytes_to_hex(address))
        self.assertRaises(ValueError, crypto_utils.public_key_to_address, b"\x04" + public_key)

    def test_private_to_public_key(self):
        public_key = crypto_utils.private_to_public_key(helpers.PRIVATE_KEY_ONE)
        # generator point of secp256k1
        self.assertEqual(
            "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
            convert.bytes_to_hex(public_key[:32])
        )
        self.assertRaises(ValueError, crypto_utils.private_to_public_key, b"\x01")

    def test_make_private_key(self):
        self.assertEqual(crypto_utils.make_private_key(b"seed"), crypto_utils.make_private_key(b"seed"))
        self.assertEqual(eth_constants.PRIVATE_KEY_LEN, len(crypto_utils.make_private_key(b"seed")))
        self.assertRaises(ValueError, crypto_utils.make_private_key, b"")
