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
""" A class for signature verifier"""

from collections import namedtuple

from coincurve import PublicKey

from thorchain import utils
from thorchain.blockchain.types import Address
from thorchain.crypto.address import address_bytes_from_pubkey


def recover(msg_hash: bytes, signature: bytes) -> bytes:
    """Uncompressed public key that produced ``signature`` over ``msg_hash``.

    Raises ValueError when the signature is malformed or does not recover.
    """
    if len(msg_hash) != 32:
        raise ValueError(f"Hash must be 32 bytes. {bytes(msg_hash).hex()}")
    if len(signature) != 65:
        raise ValueError(f"Signature must be 65 bytes. {bytes(signature).hex()}")
    if signature[-1] > 3:
        raise ValueError(f"Invalid recovery id({signature[-1]})")

    pub = PublicKey.from_signature_and_message(bytes(signature), bytes(msg_hash), hasher=None)
    return pub.format(compressed=False)


class SignVerifier:
    VerifiedAddress = namedtuple("VerifiedAddress", "result expected_address")

    def __init__(self, address: Address):
        self.address = address

    @classmethod
    def from_pubkey(cls, pubkey: bytes) -> 'SignVerifier':
        return cls(address_bytes_from_pubkey(pubkey))

    @classmethod
    def from_address(cls, address: str) -> 'SignVerifier':
        return cls(Address.from_(address))

    def verify_hash(self, msg_hash: bytes, signature: bytes) -> 'VerifiedAddress':
        try:
            expected_address = address_bytes_from_pubkey(recover(msg_hash, signature))
        except Exception as e:
            utils.logger.debug(f"Fail to verify the signature : ({bytes(msg_hash).hex()})/({bytes(signature).hex()})\n{e}")
            return self.VerifiedAddress(False, None)

        return self.VerifiedAddress(expected_address == self.address, expected_address)
