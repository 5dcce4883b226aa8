ADDRESS_LEN = 20
PRIVATE_KEY_LEN = 32
PUBLIC_KEY_LEN = 64
SIGNATURE_LEN = 65

SHA3_LEN_BITS = 256
SHA3_LEN_BYTES = SHA3_LEN_BITS // 8

# numeric transaction fields are uint256
MAX_QUANTITY_LEN = 32

# legacy (pre EIP-155) recovery id offset
LEGACY_V_OFFSET = 27
LEGACY_V_VALUES = (LEGACY_V_OFFSET, LEGACY_V_OFFSET + 1)
RECOVERY_ID_VALUES = (0, 1)

# order of the secp256k1 group
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

UNSIGNED_TX_FIELD_COUNT = 6
SIGNED_TX_FIELD_COUNT = 9

HEX_PREFIX = "0x"

RLP_STR_OFFSET = 0x80
RLP_LIST_OFFSET = 0xc0
RLP_SHORT_LEN_LIMIT = 56
RLP_MAX_LEN = 256 ** 8
# nesting limit for generic decoding, transactions use a single level
RLP_MAX_DEPTH = 64
