from abc import ABCMeta, abstractmethod
from typing import Tuple

from txsigner import eth_constants
from txsigner.utils import crypto_utils


class AbstractEcdsaBackend(metaclass=ABCMeta):
    """
    Recoverable secp256k1 ECDSA over 32 bytes message hashes.
    """

    @abstractmethod
    def sign_recoverable(self, msg_hash: bytes, private_key: bytes) -> Tuple[int, int, int]:
        """
        :return: tuple (recovery id, r, s), recovery id in (0, 1)
        """
        pass

    @abstractmethod
    def recover(self, msg_hash: bytes, recovery_id: int, r: int, s: int) -> bytes:
        """
        :return: 64 bytes uncompressed public key
        """
        pass


class CoincurveEcdsaBackend(AbstractEcdsaBackend):
    """
    libsecp256k1 backend. Nonces are derived with RFC 6979 and s is always low.
    """

    def sign_recoverable(self, msg_hash: bytes, private_key: bytes) -> Tuple[int, int, int]:
        signature = crypto_utils.sign(msg_hash, private_key)
        v, r, s = crypto_utils.decode_signature(signature)
        return v - eth_constants.LEGACY_V_OFFSET, r, s

    def recover(self, msg_hash: bytes, recovery_id: int, r: int, s: int) -> bytes:
        signature = crypto_utils.encode_signature(recovery_id + eth_constants.LEGACY_V_OFFSET, r, s)
        return crypto_utils.recover_public_key(msg_hash, signature)


default_backend = CoincurveEcdsaBackend()


def recovery_id_from_v(v: int) -> int:
    if v in eth_constants.LEGACY_V_VALUES:
        return v - eth_constants.LEGACY_V_OFFSET
    if v in eth_constants.RECOVERY_ID_VALUES:
        return v
    raise ValueError("v is expected in (0, 1, 27, 28) but was {0}".format(v))


def is_valid_scalar(value: int) -> bool:
    return 0 < value < eth_constants.SECP256K1_N
