# Copyright 2018 ICON Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
""" A class for signing transaction hashes"""

import os

from coincurve import PrivateKey

from thorchain import utils
from thorchain.blockchain.types import Address, Signature
from thorchain.crypto.address import address_bytes_from_pubkey


class Signer:
    def __init__(self, private_key: PrivateKey):
        self.private_key = private_key
        self.public_key: bytes = private_key.public_key.format(compressed=False)
        self.address_bytes: Address = address_bytes_from_pubkey(self.public_key)

    @property
    def address(self) -> str:
        return self.address_bytes.hex_0x()

    @classmethod
    def new(cls) -> 'Signer':
        return cls.from_prikey(os.urandom(32))

    @classmethod
    def from_prikey(cls, prikey: bytes) -> 'Signer':
        from thorchain.crypto.signature import SignVerifier

        signer = cls(PrivateKey(prikey))

        test_hash = bytes(32)
        signature = signer.sign_hash(test_hash)
        verifier = SignVerifier.from_address(signer.address)
        if not verifier.verify_hash(test_hash, signature).result:
            raise ValueError("Invalid Signature.")
        return signer

    @classmethod
    def from_prikey_hex(cls, prikey: str) -> 'Signer':
        return cls.from_prikey(utils.to_bytes(prikey))

    def sign_hash(self, msg_hash: bytes) -> Signature:
        """Recoverable signature of an already hashed 32 byte message."""
        if len(msg_hash) != 32:
            raise ValueError(f"Hash must be 32 bytes. {msg_hash.hex()}")

        signature = Signature(self.private_key.sign_recoverable(bytes(msg_hash), hasher=None))
        utils.logger.spam(f"signed hash({msg_hash.hex()}) by {self.address}")
        return signature
