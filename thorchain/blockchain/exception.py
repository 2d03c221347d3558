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
"""A module of exceptions for errors on transactions"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from thorchain.blockchain.transactions import Transaction


class CodecError(ValueError):
    """Raise when a field value cannot be converted to its canonical form.
    """
    pass


class OutOfRange(CodecError):
    def __init__(self, value, max_bytes: int):
        super().__init__(f"Value out of range. {value!r} does not fit in {max_bytes} bytes")
        self.value = value
        self.max_bytes = max_bytes


class InvalidLength(CodecError):
    def __init__(self, value, expected: int, actual: int):
        super().__init__(f"Invalid length. {value!r}, expected {expected} bytes, got {actual}")
        self.value = value
        self.expected = expected
        self.actual = actual


class InvalidFormat(CodecError):
    pass


class InvalidAddress(CodecError):
    pass


class DecodeError(ValueError):
    """Raise when encoded bytes are not a canonical transaction.
    """
    pass


class TransactionBuildError(RuntimeError):
    """Raise when a builder misses an attribute that must be assigned.
    """
    pass


class TransactionVerifyError(Exception):
    def __init__(self, tx: 'Transaction', message=''):
        super().__init__(message)
        self.tx = tx
        self.message = message

    def __str__(self):
        results = []
        if self.message:
            results.append(self.message)
        results.append(f"tx: {self.tx}")
        return ' '.join(results)


class TransactionInvalidSignatureShapeError(TransactionVerifyError):
    def __init__(self, tx: 'Transaction', expected: int, actual: int):
        super().__init__(tx, f"Invalid signature length. expected({expected}) actual({actual})")
        self.expected = expected
        self.actual = actual


class TransactionInvalidSignatureError(TransactionVerifyError):
    pass


class TransactionInvalidDelegatorError(TransactionVerifyError):
    pass


class TransactionOriginMismatchError(TransactionVerifyError):
    def __init__(self, tx: 'Transaction', expected: str, actual: str):
        super().__init__(tx, f"Origin not match. expected({expected}) actual({actual})")
        self.expected = expected
        self.actual = actual
