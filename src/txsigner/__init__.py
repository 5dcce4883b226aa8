from txsigner.transaction_canonicalizer import canonicalize
from txsigner.transaction_signer import recover, sign
from txsigner.serializers.transaction import Transaction
from txsigner.tx_exceptions import (
    DecodeError,
    InvalidAddressError,
    InvalidFieldError,
    InvalidKeyError,
    InvalidPayloadError,
    InvalidRecoveryIdError,
    RecoveryFailureError,
    SigningFailureError,
    TxSignerError,
)
from txsigner.utils.crypto_utils import public_key_to_address

__all__ = [
    "sign",
    "recover",
    "canonicalize",
    "public_key_to_address",
    "Transaction",
    "TxSignerError",
    "InvalidAddressError",
    "InvalidFieldError",
    "InvalidPayloadError",
    "InvalidKeyError",
    "SigningFailureError",
    "InvalidRecoveryIdError",
    "RecoveryFailureError",
    "DecodeError",
]
