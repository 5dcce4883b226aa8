from Crypto.Hash import keccak
from coincurve import PrivateKey, PublicKey

from txsigner import eth_constants
from txsigner.utils import convert


def keccak_hash(data) -> bytes:
    """
    Calculates keccak 256 hash (original Keccak padding, not NIST SHA3)
    :param data: input bytes
    :return: 32 bytes hash
    """

    return keccak.new(digest_bits=eth_constants.SHA3_LEN_BITS, data=bytes(data)).digest()


def sign(msg_hash, private_key):
    """
    Signs message hash using private key
    :param msg_hash: 32 bytes message hash
    :param private_key: 32 bytes private key
    :return: 65 bytes signature r(32) || s(32) || recovery id(1)
    """

    if not msg_hash:
        raise ValueError("Message is required")

    if len(private_key) != eth_constants.PRIVATE_KEY_LEN:
        raise ValueError("Private key is expected of len {0} but was {1}"
                         .format(eth_constants.PRIVATE_KEY_LEN, len(private_key)))

    pk = PrivateKey(bytes(private_key))
    return pk.sign_recoverable(bytes(msg_hash), hasher=None)


def recover_public_key(msg_hash, signature):
    """
    Recovers public key from signed message hash
    :param msg_hash: message hash
    :param signature: 65 bytes signature
    :return: 64 bytes public key
    """

    if len(signature) != eth_constants.SIGNATURE_LEN:
        raise ValueError("Expected signature len of {0} but was {1}"
                         .format(eth_constants.SIGNATURE_LEN, len(signature)))

    pk = PublicKey.from_signature_and_message(bytes(signature), bytes(msg_hash), hasher=None)
    return pk.format(compressed=False)[1:]


def encode_signature(v, r, s):
    """
    Calculates byte representation of ECC signature from parameters
    :param v: legacy recovery parameter (27 or 28)
    :param r: signature scalar r
    :param s: signature scalar s
    :return: bytes of ECC signature
    """

    if not isinstance(v, int) or v not in eth_constants.LEGACY_V_VALUES:
        raise ValueError("v is expected to be int in range (27, 28)")

    return _left_0_pad_32(convert.int_to_big_endian(r)) + _left_0_pad_32(convert.int_to_big_endian(s)) + \
        bytes([v - eth_constants.LEGACY_V_OFFSET])


def decode_signature(sig):
    """
    Decodes coordinates from ECC signature bytes
    :param sig: signature bytes
    :return: ECC signature parameters (v, r, s)
    """

    if not sig:
        raise ValueError("Signature is required")

    return (
        sig[64] + eth_constants.LEGACY_V_OFFSET,
        convert.big_endian_to_int(sig[0:32]),
        convert.big_endian_to_int(sig[32:64])
    )


def make_private_key(seed):
    """
    Generates ECC private key using provided seed value
    :param seed: seed used to generate ECC private key
    :return: ECC private key
    """

    if not seed:
        raise ValueError("Seed is required")

    return keccak_hash(seed)


def private_to_public_key(raw_private_key):
    """
    Calculates public key for private key
    :param raw_private_key: ECC private key
    :return: 64 bytes public key
    """

    if len(raw_private_key) != eth_constants.PRIVATE_KEY_LEN:
        raise ValueError("Private key is expected of len {0} but was {1}"
                         .format(eth_constants.PRIVATE_KEY_LEN, len(raw_private_key)))

    raw_pubkey = PrivateKey(bytes(raw_private_key)).public_key.format(compressed=False)[1:]
    assert len(raw_pubkey) == eth_constants.PUBLIC_KEY_LEN
    return raw_pubkey


def public_key_to_address(public_key):
    """
    Calculates account address from public key
    :param public_key: 64 bytes public key
    :return: 20 bytes address
    """

    if len(public_key) != eth_constants.PUBLIC_KEY_LEN:
        raise ValueError("Public key is expected of len {0} but was {1}"
                         .format(eth_constants.PUBLIC_KEY_LEN, len(public_key)))

    return keccak_hash(public_key)[-eth_constants.ADDRESS_LEN:]


def _left_0_pad_32(x):
    """
    Pads bytes with 0 on the left to length of 32
    :param x: bytes
    :return: padded bytes
    """

    return b"\x00" * (32 - len(x)) + x
