import logging
from typing import Callable, List, Mapping, Optional, Union

from txsigner import eth_constants, log_messages
from txsigner.transaction_canonicalizer import TransactionFields, canonicalize
from txsigner.tx_exceptions import (
    DecodeError,
    InvalidKeyError,
    InvalidRecoveryIdError,
    RecoveryFailureError,
    SigningFailureError,
)
from txsigner.utils import convert, rlp_utils
from txsigner.utils.crypto_utils import keccak_hash
from txsigner.utils.ecdsa_backend import AbstractEcdsaBackend, default_backend, is_valid_scalar, recovery_id_from_v

logger = logging.getLogger(__name__)

Hasher = Callable[[bytes], bytes]
SignatureScalar = Union[int, bytes, bytearray, memoryview, str]


def sign(
    raw_tx: Mapping,
    private_key: Union[bytes, str],
    structured_output: bool = False,
    hasher: Hasher = keccak_hash,
    backend: Optional[AbstractEcdsaBackend] = None,
) -> Union[str, TransactionFields]:
    """
    Signs legacy transaction.

    :param raw_tx: transaction dictionary (to, nonce, gasPrice, gasLimit/gas, value, data)
    :param private_key: 32 bytes or hex string with optional 0x prefix
    :param structured_output: return list of nine fields instead of hex string
    :param hasher: digest function applied to the unsigned RLP encoding
    :param backend: recoverable ECDSA implementation
    :return: 0x prefixed hex string of the signed transaction, or the list of its fields
    """

    if backend is None:
        backend = default_backend

    fields = canonicalize(raw_tx)
    msg_hash = hasher(rlp_utils.encode_fields(fields[:eth_constants.UNSIGNED_TX_FIELD_COUNT]))
    key = _private_key_to_bytes(private_key)

    try:
        recovery_id, r, s = backend.sign_recoverable(msg_hash, key)
    except (ValueError, TypeError) as e:
        logger.warning(log_messages.SIGNING_REJECTED, e)
        raise SigningFailureError("Private key was rejected by signing backend") from e

    fields[6] = convert.int_to_big_endian(recovery_id + eth_constants.LEGACY_V_OFFSET)
    fields[7] = convert.int_to_big_endian(r)
    fields[8] = convert.int_to_big_endian(s)

    signed_tx = rlp_utils.encode_fields(fields)
    logger.debug(log_messages.SIGNED_TRANSACTION, convert.bytes_to_hex(keccak_hash(signed_tx)))

    if structured_output:
        return fields
    return convert.add_hex_prefix(convert.bytes_to_hex(signed_tx))


def recover(
    signed_tx: Union[str, bytes, bytearray, memoryview],
    v: Union[int, bytes, str],
    r: SignatureScalar,
    s: SignatureScalar,
    hasher: Hasher = keccak_hash,
    backend: Optional[AbstractEcdsaBackend] = None,
) -> bytes:
    """
    Recovers public key of the signer of legacy transaction.
    Signature is supplied by the caller and is not read from the transaction fields.

    :param signed_tx: RLP encoded transaction, bytes or hex string
    :param v: recovery parameter (27, 28, 0 or 1)
    :param r: signature scalar r
    :param s: signature scalar s
    :param hasher: digest function applied to the unsigned RLP encoding
    :param backend: recoverable ECDSA implementation
    :return: 64 bytes uncompressed public key
    """

    if backend is None:
        backend = default_backend

    fields = decode_transaction(signed_tx)
    msg_hash = hasher(rlp_utils.encode_fields(fields[:eth_constants.UNSIGNED_TX_FIELD_COUNT]))

    try:
        recovery_id = recovery_id_from_v(_scalar_to_int("v", v, InvalidRecoveryIdError))
    except ValueError as e:
        raise InvalidRecoveryIdError(str(e)) from e

    r_value = _scalar_to_int("r", r, RecoveryFailureError)
    s_value = _scalar_to_int("s", s, RecoveryFailureError)
    if not is_valid_scalar(r_value) or not is_valid_scalar(s_value):
        raise RecoveryFailureError("Signature scalars must be in range [1, n - 1]")

    try:
        public_key = backend.recover(msg_hash, recovery_id, r_value, s_value)
    except (ValueError, TypeError) as e:
        logger.warning(log_messages.RECOVERY_REJECTED, convert.bytes_to_hex(msg_hash), e)
        raise RecoveryFailureError("Public key could not be recovered from signature") from e

    logger.debug(log_messages.RECOVERED_PUBLIC_KEY, convert.bytes_to_hex(public_key[:8]),
                 convert.bytes_to_hex(msg_hash))
    return public_key


def decode_transaction(signed_tx: Union[str, bytes, bytearray, memoryview]) -> List[bytes]:
    """
    Decodes RLP encoded legacy transaction into its fields.
    Both signed (nine fields) and unsigned (six fields) encodings are accepted.
    """

    if isinstance(signed_tx, str):
        try:
            tx_bytes = convert.hex_to_bytes(signed_tx, allow_odd_length=False)
        except ValueError as e:
            raise DecodeError("Transaction is not a valid hex string") from e
    elif isinstance(signed_tx, (bytes, bytearray, memoryview)):
        tx_bytes = bytes(signed_tx)
    else:
        raise DecodeError("Transaction is expected to be bytes or hex string but was {0}"
                          .format(type(signed_tx).__name__))

    fields = rlp_utils.decode_fields(tx_bytes)
    if len(fields) not in (eth_constants.UNSIGNED_TX_FIELD_COUNT, eth_constants.SIGNED_TX_FIELD_COUNT):
        raise DecodeError("Legacy transaction is expected to have {0} or {1} fields but had {2}"
                          .format(eth_constants.UNSIGNED_TX_FIELD_COUNT, eth_constants.SIGNED_TX_FIELD_COUNT,
                                  len(fields)))
    return fields


def _private_key_to_bytes(private_key) -> bytes:
    if isinstance(private_key, (bytes, bytearray, memoryview)):
        key = bytes(private_key)
    elif isinstance(private_key, str):
        try:
            key = convert.hex_to_bytes(private_key, allow_odd_length=False)
        except ValueError as e:
            raise InvalidKeyError("Private key is not a valid hex string") from e
    else:
        raise InvalidKeyError("Private key is expected to be bytes or hex string but was {0}"
                              .format(type(private_key).__name__))

    if len(key) != eth_constants.PRIVATE_KEY_LEN:
        raise InvalidKeyError("Private key is expected of len {0} but was {1}"
                              .format(eth_constants.PRIVATE_KEY_LEN, len(key)))
    return key


def _scalar_to_int(name: str, value: SignatureScalar, error_class) -> int:
    if isinstance(value, bool):
        raise error_class("Signature parameter {0} does not accept boolean values".format(name))

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        try:
            value = convert.hex_to_bytes(value, allow_odd_length=False)
        except ValueError as e:
            raise error_class("Signature parameter {0} is not a valid hex string".format(name)) from e

    if isinstance(value, (bytes, bytearray, memoryview)):
        if len(value) > eth_constants.SHA3_LEN_BYTES:
            raise error_class("Signature parameter {0} is longer than {1} bytes"
                              .format(name, eth_constants.SHA3_LEN_BYTES))
        return convert.big_endian_to_int(value)

    raise error_class("Signature parameter {0} has unsupported type {1}".format(name, type(value).__name__))
