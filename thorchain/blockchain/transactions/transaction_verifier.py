from typing import Optional

from thorchain.blockchain.exception import (
    TransactionInvalidSignatureShapeError, TransactionInvalidSignatureError, TransactionInvalidDelegatorError,
    TransactionOriginMismatchError
)
from thorchain.blockchain.types import Address, Signature
from thorchain.blockchain.transactions.transaction import Transaction


class TransactionVerifier:
    def __init__(self, raise_exceptions=True):
        self.exceptions = []
        self._raise_exceptions = raise_exceptions

    def verify(self, tx: Transaction, expected_origin: Optional[str] = None):
        if not self.verify_signature_shape(tx):
            return
        self.verify_origin(tx)
        if expected_origin is not None:
            self.verify_expected_origin(tx, expected_origin)
        if tx.is_delegated():
            self.verify_delegator(tx)

    def verify_signature_shape(self, tx: Transaction) -> bool:
        if tx.is_signature_valid():
            return True

        expected = Signature.size * 2 if tx.is_delegated() else Signature.size
        actual = 0 if tx.signature is None else len(tx.signature)
        self._handle_exceptions(TransactionInvalidSignatureShapeError(tx, expected, actual))
        return False

    def verify_origin(self, tx: Transaction):
        if tx.origin_public_key is None:
            self._handle_exceptions(TransactionInvalidSignatureError(tx, "Cannot recover origin."))

    def verify_expected_origin(self, tx: Transaction, expected_origin: str):
        origin = tx.origin_address_bytes
        if origin != Address.from_(expected_origin):
            actual = origin.hex_0x() if origin is not None else None
            self._handle_exceptions(TransactionOriginMismatchError(tx, expected_origin, actual))

    def verify_delegator(self, tx: Transaction):
        if tx.delegator_public_key is None:
            self._handle_exceptions(TransactionInvalidDelegatorError(tx, "Cannot recover delegator."))

    def _handle_exceptions(self, exception: Exception):
        if self._raise_exceptions:
            raise exception
        else:
            self.exceptions.append(exception)
