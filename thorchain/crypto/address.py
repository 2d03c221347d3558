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

from thorchain.blockchain.types import Address
from thorchain.crypto.hashing import keccak256


def address_bytes_from_pubkey(pubkey: bytes) -> Address:
    """20 byte address of a 65 byte uncompressed public key."""
    if len(pubkey) != 65 or pubkey[0] != 4:
        raise ValueError(f"Not an uncompressed public key. {pubkey.hex()}")
    return Address(keccak256(pubkey[1:])[-20:])


def address_from_pubkey(pubkey: bytes) -> str:
    return address_bytes_from_pubkey(pubkey).hex_0x()
