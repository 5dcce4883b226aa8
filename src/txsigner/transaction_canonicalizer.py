"""
Normalizes loosely typed transaction dictionaries into the ordered list of byte
strings that forms a legacy transaction.

Accepted input keys are ``to``, ``nonce``, ``gasPrice``, ``gasLimit`` (or its
alias ``gas``), ``value`` and ``data``. Unknown keys are ignored.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List

from txsigner import eth_constants, log_messages
from txsigner.tx_exceptions import InvalidAddressError, InvalidFieldError, InvalidPayloadError
from txsigner.utils import convert

logger = logging.getLogger(__name__)

TransactionFields = List[bytes]

GAS_LIMIT_KEY = "gasLimit"
GAS_ALIAS_KEY = "gas"


class FieldKind(Enum):
    QUANTITY = "quantity"
    ADDRESS = "address"
    PAYLOAD = "payload"


@dataclass(frozen=True)
class TransactionField:
    name: str
    kind: FieldKind


TRANSACTION_FIELDS = [
    TransactionField("nonce", FieldKind.QUANTITY),
    TransactionField("gasPrice", FieldKind.QUANTITY),
    TransactionField(GAS_LIMIT_KEY, FieldKind.QUANTITY),
    TransactionField("to", FieldKind.ADDRESS),
    TransactionField("value", FieldKind.QUANTITY),
    TransactionField("data", FieldKind.PAYLOAD),
]


def canonicalize(raw_tx: Mapping) -> TransactionFields:
    """
    Converts transaction dictionary into nine ordered byte string fields.
    Signature fields (v, r, s) are empty.

    :param raw_tx: transaction dictionary
    :return: list of nine byte strings
    """

    if not isinstance(raw_tx, Mapping):
        raise InvalidFieldError("Transaction is expected to be a mapping but was {0}"
                                .format(type(raw_tx).__name__))

    fields = []
    for field in TRANSACTION_FIELDS:
        if field.name == GAS_LIMIT_KEY:
            fields.append(_gas_limit(raw_tx))
        else:
            fields.append(_FIELD_PARSERS[field.kind](field.name, raw_tx.get(field.name)))

    fields.extend([b"", b"", b""])
    return fields


def parse_quantity(name: str, value: Any) -> bytes:
    """
    Parses numeric field. Accepts None, non negative int, 0x prefixed hex string,
    decimal string or unprefixed hex string containing a letter a-f.

    :return: minimal big endian bytes, empty for zero
    """

    if value is None:
        return b""

    if isinstance(value, bool):
        raise InvalidFieldError("Field {0} does not accept boolean values".format(name))

    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        number = _str_to_int(name, value)
    else:
        raise InvalidFieldError("Field {0} is expected to be int or hex string but was {1}"
                                .format(name, type(value).__name__))

    if number < 0:
        raise InvalidFieldError("Field {0} must not be negative".format(name))

    quantity = convert.int_to_big_endian(number)
    if len(quantity) > eth_constants.MAX_QUANTITY_LEN:
        raise InvalidFieldError("Field {0} is longer than {1} bytes"
                                .format(name, eth_constants.MAX_QUANTITY_LEN))
    return quantity


def parse_address(name: str, value: Any) -> bytes:
    if value is None:
        return b""

    if not isinstance(value, str):
        raise InvalidAddressError("Field {0} is expected to be hex string but was {1}"
                                  .format(name, type(value).__name__))

    try:
        address = convert.hex_to_bytes(value)
    except ValueError as e:
        raise InvalidAddressError("Field {0} is not a valid hex string".format(name)) from e

    if address and len(address) != eth_constants.ADDRESS_LEN:
        raise InvalidAddressError("Field {0} is expected of len {1} but was {2}"
                                  .format(name, eth_constants.ADDRESS_LEN, len(address)))
    return address


def parse_payload(name: str, value: Any) -> bytes:
    if value is None:
        return b""

    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)

    if not isinstance(value, str):
        raise InvalidPayloadError("Field {0} is expected to be bytes or hex string but was {1}"
                                  .format(name, type(value).__name__))

    try:
        return convert.hex_to_bytes(value)
    except ValueError as e:
        raise InvalidPayloadError("Field {0} is not a valid hex string".format(name)) from e


_FIELD_PARSERS: Dict[FieldKind, Callable[[str, Any], bytes]] = {
    FieldKind.QUANTITY: parse_quantity,
    FieldKind.ADDRESS: parse_address,
    FieldKind.PAYLOAD: parse_payload,
}


def _gas_limit(raw_tx: Mapping) -> bytes:
    gas_limit = parse_quantity(GAS_LIMIT_KEY, raw_tx.get(GAS_LIMIT_KEY))
    if raw_tx.get(GAS_ALIAS_KEY) is None:
        return gas_limit

    gas = parse_quantity(GAS_ALIAS_KEY, raw_tx.get(GAS_ALIAS_KEY))
    if raw_tx.get(GAS_LIMIT_KEY) is not None and gas != gas_limit:
        logger.warning(log_messages.GAS_ALIAS_CONFLICT, raw_tx.get(GAS_ALIAS_KEY), raw_tx.get(GAS_LIMIT_KEY))
        raise InvalidFieldError("Fields gas and gasLimit are both set and differ")
    return gas


def _str_to_int(name: str, value: str) -> int:
    if convert.is_hex_prefixed(value):
        digits = value[2:]
        if not digits:
            return 0
        if not _is_hex(digits):
            raise InvalidFieldError("Field {0} is not a valid hex string".format(name))
        return int(digits, 16)

    if value.isascii() and value.isdigit():
        return int(value, 10)

    # digits only are decimal, a hex letter makes the string hex
    if value and _is_hex(value):
        return int(value, 16)

    raise InvalidFieldError("Field {0} is expected to be hex or decimal string".format(name))


def _is_hex(value: str) -> bool:
    return all(c in "0123456789abcdefABCDEF" for c in value)
