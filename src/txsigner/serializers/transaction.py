from typing import Any, Dict, Optional, Union

import rlp
from rlp.exceptions import RLPException

from txsigner import eth_constants
from txsigner.serializers.unsigned_transaction import UnsignedTransaction
from txsigner.tx_exceptions import DecodeError
from txsigner.utils import convert, crypto_utils


# pyre-fixme[13]: Attribute `data` is never initialized.
# pyre-fixme[13]: Attribute `gas_price` is never initialized.
# pyre-fixme[13]: Attribute `nonce` is never initialized.
# pyre-fixme[13]: Attribute `r` is never initialized.
# pyre-fixme[13]: Attribute `s` is never initialized.
# pyre-fixme[13]: Attribute `start_gas` is never initialized.
# pyre-fixme[13]: Attribute `to` is never initialized.
# pyre-fixme[13]: Attribute `v` is never initialized.
# pyre-fixme[13]: Attribute `value` is never initialized.
class Transaction(rlp.Serializable):
    fields = [
        ("nonce", rlp.sedes.big_endian_int),
        ("gas_price", rlp.sedes.big_endian_int),
        ("start_gas", rlp.sedes.big_endian_int),
        ("to", rlp.sedes.Binary.fixed_length(eth_constants.ADDRESS_LEN, allow_empty=True)),
        ("value", rlp.sedes.big_endian_int),
        ("data", rlp.sedes.binary),
        ("v", rlp.sedes.big_endian_int),
        ("r", rlp.sedes.big_endian_int),
        ("s", rlp.sedes.big_endian_int),
    ]

    nonce: int
    gas_price: int
    start_gas: int
    to: Optional[bytes]
    value: int
    data: bytes
    v: int
    r: int
    s: int

    @classmethod
    def deserialize_raw(cls, raw: Union[str, bytes, bytearray, memoryview]) -> "Transaction":
        """
        Parses signed legacy transaction from bytes or 0x prefixed hex string
        """
        try:
            raw_bytes = convert.hex_to_bytes(raw) if isinstance(raw, str) else bytes(raw)
            return rlp.decode(raw_bytes, cls)
        except (ValueError, TypeError, IndexError, RLPException) as e:
            raise DecodeError("Invalid legacy transaction: {0}".format(e)) from e

    def hash(self) -> bytes:
        """Transaction hash"""
        return crypto_utils.keccak_hash(rlp.encode(self))

    def contents(self) -> memoryview:
        return memoryview(rlp.encode(self))

    def get_unsigned(self) -> UnsignedTransaction:
        return UnsignedTransaction(
            self.nonce,
            self.gas_price,
            self.start_gas,
            self.to,
            self.value,
            self.data
        )

    def signing_hash(self) -> bytes:
        return self.get_unsigned().signing_hash()

    def sender_public_key(self) -> bytes:
        signature = crypto_utils.encode_signature(self.v, self.r, self.s)
        return crypto_utils.recover_public_key(self.signing_hash(), signature)

    def from_address(self) -> str:
        address = crypto_utils.public_key_to_address(self.sender_public_key())
        return convert.add_hex_prefix(convert.bytes_to_hex(address))

    def to_json(self) -> Dict[str, Any]:
        """
        Serializes data to be close to Ethereum RPC spec for eth_getTransactionByHash.

        Fields related to the block the transaction gets included in are excluded.
        """
        input_data = convert.bytes_to_hex(self.data)
        return {
            "from": self.from_address(),
            "gas": hex(self.start_gas),
            "gasPrice": hex(self.gas_price),
            "hash": convert.add_hex_prefix(convert.bytes_to_hex(self.hash())),
            "input": convert.add_hex_prefix(input_data),
            "nonce": hex(self.nonce),
            "to": convert.add_hex_prefix(convert.bytes_to_hex(self.to)) if self.to else None,
            "value": hex(self.value),
            "v": hex(self.v),
            "r": hex(self.r),
            "s": hex(self.s)
        }
