import binascii
from math import ceil
from typing import Union

from txsigner import eth_constants

BytesLike = Union[bytes, bytearray, memoryview]


def is_hex_prefixed(value: str) -> bool:
    return value[:2].lower() == eth_constants.HEX_PREFIX


def strip_hex_prefix(value: str) -> str:
    """
    Removes leading 0x (or 0X) from hex string
    :param value: hex string
    :return: hex string without prefix
    """

    if is_hex_prefixed(value):
        return value[2:]
    return value


def add_hex_prefix(value: str) -> str:
    return eth_constants.HEX_PREFIX + value


def bytes_to_hex(value: BytesLike) -> str:
    """
    Converts bytes to lower case hex string without prefix
    :param value: bytes
    :return: hex string
    """

    return binascii.hexlify(value).decode("ascii")


def hex_to_bytes(value: str, allow_odd_length: bool = True) -> bytes:
    """
    Converts hex string with optional 0x prefix to bytes.
    Odd length strings are padded to even length with a leading zero,
    or rejected when allow_odd_length is False.

    :param value: hex string
    :param allow_odd_length: pad odd length strings instead of raising ValueError
    :return: bytes
    """

    if not isinstance(value, str):
        raise TypeError("Hex string is expected but was {0}".format(type(value).__name__))

    stripped = strip_hex_prefix(value)
    if len(stripped) % 2:
        if not allow_odd_length:
            raise ValueError("Hex string {0!r} has odd length".format(value))
        stripped = "0" + stripped

    try:
        return binascii.unhexlify(stripped)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Invalid hex string {0!r}".format(value)) from e


def int_to_big_endian(value: int) -> bytes:
    """
    Converts non negative int to minimal big endian bytes. Zero is empty bytes.

    :param value: int value
    :return: big endian bytes without leading zeros
    """

    if value < 0:
        raise ValueError("Non negative value is expected but was {0}".format(value))

    byte_length = ceil(value.bit_length() / 8)
    return value.to_bytes(byte_length, byteorder="big")


def big_endian_to_int(value: BytesLike) -> int:
    return int.from_bytes(value, byteorder="big") if value else 0
