import os

import pytest

from thorchain.blockchain.exception import DecodeError
from thorchain.crypto import (
    blake2b256, keccak256, rlp_encode, rlp_decode, address_from_pubkey, address_bytes_from_pubkey, recover
)
from thorchain.crypto.signature import Signer, SignVerifier

PRIVATE_KEY = "7582be841ca040aa940fff6c05773129e135623e41acce3e0b8ba520dc1ae26a"
ADDRESS = "0xd989829d88b0ed1b06edf5c50174ecfa64f14a64"


class TestHashing:
    def test_blake2b256_empty(self):
        assert blake2b256().hex() == "0e5751c026e543b2e8ab2eb06099daa1d1e5df47778f7787faab45cdf12fe3a8"
        assert blake2b256(b'') == blake2b256()

    def test_blake2b256_concatenates(self):
        assert blake2b256(b'hello', b' ', b'world') == blake2b256(b'hello world')
        assert len(blake2b256(b'hello world')) == 32

    def test_keccak256_empty(self):
        assert keccak256(b'').hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


class TestEncoding:
    def test_encode_nested(self):
        assert rlp_encode([]) == b'\xc0'
        assert rlp_encode(b'') == b'\x80'
        assert rlp_encode([b'\x01', [b'']]) == b'\xc3\x01\xc1\x80'

    def test_decode_nested(self):
        assert rlp_decode(b'\xc3\x01\xc1\x80') == [b'\x01', [b'']]

    @pytest.mark.parametrize("data", [b'', b'\xc3\x01', b'\x81\x01'])
    def test_decode_invalid(self, data):
        with pytest.raises(DecodeError):
            rlp_decode(data)


class TestAddress:
    def test_known_address(self):
        signer = Signer.from_prikey_hex(PRIVATE_KEY)
        assert signer.address == ADDRESS
        assert address_from_pubkey(signer.public_key) == ADDRESS
        assert address_bytes_from_pubkey(signer.public_key).hex_0x() == ADDRESS

    def test_rejects_compressed_key(self):
        signer = Signer.new()
        with pytest.raises(ValueError):
            address_from_pubkey(signer.private_key.public_key.format(compressed=True))


class TestSignature:
    def test_sign_and_recover(self):
        signer = Signer.new()
        msg_hash = blake2b256(os.urandom(16))
        signature = signer.sign_hash(msg_hash)

        assert len(signature) == 65
        assert signature.recover_id() in (0, 1)
        assert recover(msg_hash, signature) == signer.public_key

    def test_verifier(self):
        signer = Signer.new()
        other = Signer.new()
        msg_hash = blake2b256(b'thorchain')
        signature = signer.sign_hash(msg_hash)

        verified = SignVerifier.from_address(signer.address).verify_hash(msg_hash, signature)
        assert verified.result
        assert verified.expected_address == signer.address_bytes

        verified = SignVerifier.from_pubkey(other.public_key).verify_hash(msg_hash, signature)
        assert not verified.result

    def test_verifier_absorbs_malformed_signature(self):
        verified = SignVerifier.from_address(ADDRESS).verify_hash(bytes(32), bytes(64) + b'\x09')
        assert verified == SignVerifier.VerifiedAddress(False, None)

    @pytest.mark.parametrize("signature", [bytes(64), bytes(66), os.urandom(64) + b'\x04'])
    def test_recover_rejects_malformed(self, signature):
        with pytest.raises(ValueError):
            recover(bytes(32), signature)

    def test_sign_requires_hash(self):
        with pytest.raises(ValueError):
            Signer.new().sign_hash(b'not a hash')
