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
"""Codecs between field values and their canonical byte form.

Numbers are big-endian with no leading zero byte, zero being ``b''``.
Blobs are hex strings (``0x`` prefix) or bytes.
"""

from typing import Optional, Type, Union

from thorchain import utils
from thorchain.blockchain.exception import OutOfRange, InvalidLength, InvalidFormat


class NumericKind:
    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes

    def to_int(self, value: Union[int, str]) -> int:
        """Parse an int, a decimal string or a ``0x`` hex string, checking the width."""
        if isinstance(value, bool):
            raise InvalidFormat(f"Not a number. {value!r}")

        if isinstance(value, int):
            number = value
        elif isinstance(value, str):
            if value[:2] in ("0x", "0X"):
                digits = value[2:]
                if not digits or not all(c in "0123456789abcdefABCDEF" for c in digits):
                    raise InvalidFormat(f"Invalid hex number. {value!r}")
                number = int(digits, 16)
            elif value.isdecimal() and value.isascii():
                number = int(value, 10)
            else:
                raise InvalidFormat(f"Invalid decimal number. {value!r}")
        else:
            raise InvalidFormat(f"Not a number. {value!r}")

        if number < 0 or number.bit_length() > self.max_bytes * 8:
            raise OutOfRange(value, self.max_bytes)
        return number

    def serialize(self, value: Union[int, str]) -> bytes:
        number = self.to_int(value)
        return number.to_bytes((number.bit_length() + 7) // 8, 'big')

    def deserialize(self, data: bytes) -> int:
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidFormat(f"Expected bytes. {data!r}")
        if len(data) > self.max_bytes:
            raise OutOfRange(bytes(data), self.max_bytes)
        if data and data[0] == 0:
            raise InvalidFormat(f"Number has a leading zero byte. {bytes(data)!r}")
        return int.from_bytes(data, 'big')


class BlobKind:
    """Variable length bytes, ``0x`` prefixed when given as a string."""

    def to_bytes(self, value: Union[str, bytes]) -> bytes:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if not isinstance(value, str) or value[:2] not in ("0x", "0X"):
            raise InvalidFormat(f"Blob must be bytes or a 0x prefixed hex string. {value!r}")
        if not utils.is_hex(value[2:]):
            raise InvalidFormat(f"Invalid hex. {value!r}")
        return bytes.fromhex(value[2:])

    def serialize(self, value: Union[str, bytes]) -> bytes:
        return self.to_bytes(value)

    def deserialize(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidFormat(f"Expected bytes. {data!r}")
        return bytes(data)


class FixedBlobKind:
    def __init__(self, width: int, type_: Type[bytes] = bytes):
        self.width = width
        self.type_ = type_

    def to_bytes(self, value: Union[str, bytes]) -> bytes:
        if isinstance(value, (bytes, bytearray)):
            data = bytes(value)
        elif isinstance(value, str):
            contents = utils.strip_0x(value)
            if len(contents) != self.width * 2:
                raise InvalidLength(value, self.width, len(contents) // 2)
            if not utils.is_hex(contents):
                raise InvalidFormat(f"Invalid hex. {value!r}")
            data = bytes.fromhex(contents)
        else:
            raise InvalidFormat(f"Blob must be bytes or a hex string. {value!r}")

        if len(data) != self.width:
            raise InvalidLength(value, self.width, len(data))
        return self.type_(data)

    def serialize(self, value: Union[str, bytes]) -> bytes:
        return bytes(self.to_bytes(value))

    def deserialize(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidFormat(f"Expected bytes. {data!r}")
        if len(data) != self.width:
            raise InvalidLength(bytes(data), self.width, len(data))
        return self.type_(data)


class CompactFixedBlobKind(FixedBlobKind):
    """Fixed width blob written as-is.

    Decoding also accepts the zero-stripped form some peers produce and
    pads it back to ``width``.
    """

    def deserialize(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidFormat(f"Expected bytes. {data!r}")
        if len(data) > self.width:
            raise InvalidLength(bytes(data), self.width, len(data))
        return self.type_(bytes(self.width - len(data)) + bytes(data))


class NullableFixedBlobKind(FixedBlobKind):
    def to_bytes(self, value: Optional[Union[str, bytes]]) -> Optional[bytes]:
        if value is None or value == '' or value == b'':
            return None
        return super().to_bytes(value)

    def serialize(self, value: Optional[Union[str, bytes]]) -> bytes:
        data = self.to_bytes(value)
        return b'' if data is None else bytes(data)

    def deserialize(self, data: bytes) -> Optional[bytes]:
        if isinstance(data, (bytes, bytearray)) and len(data) == 0:
            return None
        return super().deserialize(data)
