import os

from txsigner.utils import convert, crypto_utils

# well known test keys, never use outside of tests
PRIVATE_KEY_ONE = b"\x00" * 31 + b"\x01"
PRIVATE_KEY_ONE_ADDRESS = "7e5f4552091a69125d5dfcb7b8c2659029395bdf"

ACCOUNT_SEED = b"sdkjfhskjhskhjsfkjhsf093j9sdjfpisjdfoisjdfisdfsfkjhsfkjhskjfhkshdf"


def generate_bytearray(size: int) -> bytearray:
    return bytearray(os.urandom(size))


def generate_bytes(size: int) -> bytes:
    return bytes(generate_bytearray(size))


class SeededAccount:
    """
    Deterministic account derived from a seed
    """

    def __init__(self, seed: bytes = ACCOUNT_SEED):
        self.private_key = crypto_utils.make_private_key(seed)
        self.public_key = crypto_utils.private_to_public_key(self.private_key)
        self.address_bytes = crypto_utils.public_key_to_address(self.public_key)

    @property
    def private_key_hex(self) -> str:
        return convert.add_hex_prefix(convert.bytes_to_hex(self.private_key))

    @property
    def address(self) -> str:
        return convert.add_hex_prefix(convert.bytes_to_hex(self.address_bytes))
