"""
Utility functions to work with RLP (Recursive Length Prefix) encoding.

https://ethereum.org/en/developers/docs/data-structures-and-encoding/rlp/

This module is the canonical encoder: sign and recover build and parse transaction
bytes with it. The pyrlp based models in txsigner.serializers are read-only views
over bytes produced here.
"""

from typing import List, Sequence, Tuple, Type, Union

from txsigner import eth_constants
from txsigner.tx_exceptions import DecodeError
from txsigner.utils import convert

RlpItem = Union[bytes, List["RlpItem"]]


def encode(item) -> bytes:
    """
    Encodes byte string or (nested) list of byte strings into RLP format

    :param item: bytes, bytearray, memoryview or list/tuple of such items
    :return: RLP encoded bytes
    """

    if isinstance(item, (bytes, bytearray, memoryview)):
        item_bytes = bytes(item)
        if len(item_bytes) == 1 and item_bytes[0] < eth_constants.RLP_STR_OFFSET:
            return item_bytes
        return get_length_prefix_str(len(item_bytes)) + item_bytes

    if isinstance(item, (list, tuple)):
        payload = b"".join(encode(list_item) for list_item in item)
        return get_length_prefix_list(len(payload)) + payload

    raise TypeError("Cannot RLP encode object of type {0}".format(type(item).__name__))


def decode(rlp) -> RlpItem:
    """
    Decodes RLP bytes into byte string or (nested) list of byte strings

    :param rlp: RLP encoded bytes
    :return: bytes or list
    """

    rlp_bytes = memoryview(bytes(rlp))
    if not rlp_bytes:
        raise DecodeError("Cannot decode empty RLP input")

    item, end = _decode_item(rlp_bytes, 0, 0)
    if end != len(rlp_bytes):
        raise DecodeError("RLP input has {0} trailing bytes".format(len(rlp_bytes) - end))
    return item


def get_length_prefix_str(length):
    """
    Calculates length prefix for byte string

    :param length: length of bytes
    :return: length prefix bytes
    """

    if length is None:
        raise ValueError("Argument length is required")

    return get_length_prefix(length, eth_constants.RLP_STR_OFFSET)


def get_length_prefix_list(length):
    """
    Calculates length prefix for list

    :param length: length of list
    :return: length prefix bytes
    """

    if length is None:
        raise ValueError("Argument length is required")

    return get_length_prefix(length, eth_constants.RLP_LIST_OFFSET)


def get_length_prefix(length, offset):
    """Construct the prefix to lists or strings denoting their length.

    :param length: the length of the item in bytes
    :param offset: ``0x80`` when encoding raw bytes, ``0xc0`` when encoding a list
    """

    if length is None:
        raise ValueError("Argument length is required")

    if offset is None:
        raise ValueError("Argument offset is required")

    if length < eth_constants.RLP_SHORT_LEN_LIMIT:
        return bytes([offset + length])
    elif length < eth_constants.RLP_MAX_LEN:
        length_string = convert.int_to_big_endian(length)
        return bytes([offset + eth_constants.RLP_SHORT_LEN_LIMIT - 1 + len(length_string)]) + length_string
    else:
        raise ValueError("Length greater than 256**8")


def consume_length_prefix(rlp: memoryview, start: int) -> Tuple[Type, int, int]:
    """
    Reads the length prefix of the item that starts at given offset

    :param rlp: RLP bytes
    :param start: offset of the item
    :return: tuple (bytes or list, payload length, offset of payload)
    """

    if not isinstance(rlp, memoryview):
        raise TypeError("Only memoryview is supported but was {0}".format(type(rlp).__name__))

    if start is None:
        raise ValueError("Argument start is required")

    if start >= len(rlp):
        raise DecodeError("RLP input ended unexpectedly at {0}".format(start))

    b0 = rlp[start]
    str_offset = eth_constants.RLP_STR_OFFSET
    list_offset = eth_constants.RLP_LIST_OFFSET
    short_limit = eth_constants.RLP_SHORT_LEN_LIMIT

    if b0 < str_offset:
        return bytes, 1, start
    elif b0 < str_offset + short_limit:
        length = b0 - str_offset
        if length == 1 and start + 1 < len(rlp) and rlp[start + 1] < str_offset:
            raise DecodeError("Single byte below 128 must not have a length prefix")
        return _check_bounds(rlp, bytes, length, start + 1)
    elif b0 < list_offset:
        length, payload_start = _consume_long_length(rlp, start, b0 - str_offset - short_limit + 1)
        return _check_bounds(rlp, bytes, length, payload_start)
    elif b0 < list_offset + short_limit:
        return _check_bounds(rlp, list, b0 - list_offset, start + 1)
    else:
        length, payload_start = _consume_long_length(rlp, start, b0 - list_offset - short_limit + 1)
        return _check_bounds(rlp, list, length, payload_start)


def get_list_items_bytes(list_bytes: memoryview) -> List[Tuple[Type, memoryview]]:
    """
    Splits list payload into its items without descending into nested lists
    :param list_bytes: RLP serialized list payload (without list prefix)
    :return: list of tuples (bytes or list, item payload without length prefix)
    """
    result = []
    offset = 0

    while offset < len(list_bytes):
        item_type, item_len, item_start = consume_length_prefix(list_bytes, offset)
        result.append((item_type, list_bytes[item_start:item_start + item_len]))
        offset = item_start + item_len

    return result


def encode_fields(fields: Sequence[bytes]) -> bytes:
    return encode(list(fields))


def decode_fields(rlp) -> List[bytes]:
    """
    Decodes RLP list of byte strings, e.g. serialized legacy transaction.
    Only the top level list is parsed; a nested list is rejected without being decoded.

    :param rlp: RLP encoded bytes
    :return: list of byte strings
    """

    rlp_bytes = memoryview(bytes(rlp))
    if not rlp_bytes:
        raise DecodeError("Cannot decode empty RLP input")

    item_type, list_len, list_start = consume_length_prefix(rlp_bytes, 0)
    if item_type is not list:
        raise DecodeError("RLP list is expected but found byte string")

    end = list_start + list_len
    if end != len(rlp_bytes):
        raise DecodeError("RLP input has {0} trailing bytes".format(len(rlp_bytes) - end))

    fields = []
    for index, (field_type, field_bytes) in enumerate(get_list_items_bytes(rlp_bytes[list_start:end])):
        if field_type is not bytes:
            raise DecodeError("Nested list found at field {0}, byte string is expected".format(index))
        fields.append(bytes(field_bytes))
    return fields


def _decode_item(rlp: memoryview, start: int, depth: int) -> Tuple[RlpItem, int]:
    if depth > eth_constants.RLP_MAX_DEPTH:
        raise DecodeError("RLP lists are nested deeper than {0} levels".format(eth_constants.RLP_MAX_DEPTH))

    item_type, item_len, item_start = consume_length_prefix(rlp, start)
    end = item_start + item_len

    if item_type is bytes:
        return bytes(rlp[item_start:end]), end

    items = []
    offset = item_start
    while offset < end:
        item, offset = _decode_item(rlp, offset, depth + 1)
        if offset > end:
            raise DecodeError("RLP list item exceeds list payload at {0}".format(start))
        items.append(item)
    return items, end


def _consume_long_length(rlp: memoryview, start: int, length_of_length: int) -> Tuple[int, int]:
    length_start = start + 1
    length_end = length_start + length_of_length
    if length_end > len(rlp):
        raise DecodeError("RLP length prefix at {0} is truncated".format(start))

    length_bytes = rlp[length_start:length_end]
    if length_bytes[0] == 0:
        raise DecodeError("RLP length prefix at {0} has leading zeros".format(start))

    length = convert.big_endian_to_int(length_bytes)
    if length < eth_constants.RLP_SHORT_LEN_LIMIT:
        raise DecodeError("RLP long length form used for short item at {0}".format(start))

    return length, length_end


def _check_bounds(rlp: memoryview, item_type: Type, length: int, payload_start: int) -> Tuple[Type, int, int]:
    if payload_start + length > len(rlp):
        raise DecodeError("RLP item of length {0} at {1} exceeds input of length {2}"
                          .format(length, payload_start, len(rlp)))
    return item_type, length, payload_start
