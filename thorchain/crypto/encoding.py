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
"""RLP encoding of nested lists of byte strings."""

from typing import List, Union

import rlp
from rlp.exceptions import DecodingError

from thorchain.blockchain.exception import DecodeError

Item = Union[bytes, List['Item']]


def rlp_encode(item: Item) -> bytes:
    return rlp.encode(item)


def rlp_decode(data: bytes) -> Item:
    if not data:
        raise DecodeError("Invalid rlp: empty input")
    try:
        return rlp.decode(data, strict=True)
    except DecodingError as e:
        raise DecodeError(f"Invalid rlp: {e}") from e
