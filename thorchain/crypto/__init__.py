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
"""Thin wrappers over the primitives transactions are built on."""

from .hashing import blake2b256, keccak256
from .encoding import rlp_encode, rlp_decode
from .address import address_bytes_from_pubkey, address_from_pubkey
from .signature import Signer, SignVerifier, recover
