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
"""Utilities shared by thorchain modules."""

import logging
import re
from typing import Union

import verboselogs

# registered with the logging manager so root level changes reach it
verboselogs.install()
logger: verboselogs.VerboseLogger = logging.getLogger("thorchain")

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


def strip_0x(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def is_hex(value: str) -> bool:
    """True for an even-length string of hex digits, prefix already stripped."""
    return isinstance(value, str) and len(value) % 2 == 0 and _HEX_PATTERN.fullmatch(value) is not None


def bytes_to_hex(value: bytes, prefix: str = "0x") -> str:
    return prefix + bytes(value).hex()


def to_bytes(value: Union[str, bytes, bytearray]) -> bytes:
    """Bytes of a ``0x`` hex string, or the value itself when it is already bytes."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return bytes.fromhex(strip_0x(value))
