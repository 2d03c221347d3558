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

from thorchain import utils
from thorchain.blockchain.exception import InvalidLength, InvalidFormat, InvalidAddress


class Bytes(bytes):
    size = None
    prefix = None

    def __new__(cls, *args, **kwargs):
        self = super().__new__(cls, *args, **kwargs)
        if cls.size is not None and cls.size != len(self):
            raise InvalidLength(bytes(self), cls.size, len(self))

        return self

    def __repr__(self):
        type_name = type(self).__qualname__
        return type_name + "(" + super().__repr__() + ")"

    def __str__(self):
        type_name = type(self).__qualname__
        return type_name + "(" + self.hex_xx() + ")"

    def hex_xx(self):
        if self.prefix:
            return self.prefix + self.hex()
        return self.hex()

    @classmethod
    def fromhex(cls, value: str, ignore_prefix=False):
        if not isinstance(value, str):
            raise InvalidFormat(f"Not a hex string. {cls.__qualname__}, {value!r}")

        if cls.prefix and not ignore_prefix and value[:len(cls.prefix)].lower() == cls.prefix:
            contents = value[len(cls.prefix):]
        else:
            contents = value

        if cls.size is not None and len(contents) != cls.size * 2:
            raise InvalidLength(value, cls.size, len(contents) // 2)
        if not utils.is_hex(contents):
            raise InvalidFormat(f"Invalid hex. {cls.__qualname__}, {value!r}")

        return cls(bytes.fromhex(contents))


class VarBytes(Bytes):
    prefix = '0x'

    def hex_0x(self):
        return self.prefix + self.hex()


class Hash32(VarBytes):
    size = 32


class BlockRef(VarBytes):
    size = 8

    @property
    def number(self) -> int:
        """Block number held by the first four bytes."""
        return int.from_bytes(self[:4], 'big')


class Address(VarBytes):
    size = 20

    @classmethod
    def fromhex_address(cls, value: str):
        if not is_address(value):
            raise InvalidAddress(f"Invalid address. {value!r}")

        return cls(bytes.fromhex(value[2:]))

    @classmethod
    def from_(cls, value) -> 'Address':
        if isinstance(value, Address):
            return value
        if isinstance(value, (bytes, bytearray)):
            if len(value) != cls.size:
                raise InvalidAddress(f"Invalid address. {bytes(value)!r}")
            return cls(value)
        return cls.fromhex_address(value)


class Signature(VarBytes):
    """Recoverable secp256k1 signature, ``r || s || recovery id``."""
    size = 65

    def signature(self):
        return self[:-1]

    def recover_id(self):
        return self[-1]


def is_address(value) -> bool:
    if not isinstance(value, str) or len(value) != 42 or value[:2] not in ("0x", "0X"):
        return False
    return utils.is_hex(value[2:])
