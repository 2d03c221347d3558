import dataclasses
from typing import TYPE_CHECKING, List, Optional, Union

from thorchain import utils
from thorchain.blockchain.exception import TransactionBuildError
from thorchain.blockchain.types import Hash32, Signature
from thorchain.blockchain.transactions.clause import Clause
from thorchain.blockchain.transactions.gas import calc_intrinsic_gas
from thorchain.blockchain.transactions.reserved import Reserved
from thorchain.blockchain.transactions.transaction import Transaction

if TYPE_CHECKING:
    from thorchain.crypto.signature import Signer


class TransactionBuilder:
    def __init__(self):
        # Attributes that must be assigned
        self.chain_tag: Union[int, str] = None
        self.block_ref: Union[str, bytes] = None
        self.expiration: Union[int, str] = None
        self.nonce: Union[int, str] = None

        # Attributes to be assigned(optional)
        self.clauses: List[Union[Clause, dict]] = []
        self.gas_price_coef: Union[int, str] = 0
        self.gas: Union[int, str] = None
        self.depends_on: Optional[Union[str, bytes]] = None
        self.features: Union[int, str] = 0
        self.unused: List[bytes] = []
        self.signer: 'Signer' = None
        self.delegator: 'Signer' = None

        # Attributes to be generated
        self.hash: Hash32 = None
        self.signature: bytes = None

    def reset_cache(self):
        self.hash = None
        self.signature = None

    def build(self, is_signing=True) -> Transaction:
        tx = self.build_transaction()
        self.build_hash(tx)
        if is_signing:
            tx = self.sign_transaction(tx)
        return tx

    def build_clauses(self) -> List[Clause]:
        return [c if isinstance(c, Clause) else Clause.from_dict(c) for c in self.clauses]

    def build_transaction(self) -> Transaction:
        for name in ("chain_tag", "block_ref", "expiration", "nonce"):
            if getattr(self, name) is None:
                raise TransactionBuildError(f"'{name}' is required.")

        clauses = self.build_clauses()
        gas = self.gas
        if gas is None:
            gas = calc_intrinsic_gas(clauses)

        return Transaction(
            chain_tag=self.chain_tag,
            block_ref=self.block_ref,
            expiration=self.expiration,
            clauses=clauses,
            gas_price_coef=self.gas_price_coef,
            gas=gas,
            depends_on=self.depends_on,
            nonce=self.nonce,
            reserved=Reserved(features=self.features, unused=tuple(self.unused))
        )

    def build_hash(self, tx: Transaction) -> Hash32:
        self.hash = tx.get_signing_hash()
        return self.hash

    def sign_transaction(self, tx: Transaction) -> Transaction:
        """Copy of ``tx`` signed by the origin and, when delegated, the delegator."""
        if self.signer is None:
            raise TransactionBuildError("'signer' is required to sign.")

        signature = bytes(self.signer.sign_hash(tx.get_signing_hash()))
        if tx.is_delegated():
            if self.delegator is None:
                raise TransactionBuildError("'delegator' is required to sign a delegated transaction.")
            signature += self.sign_as_delegator(tx, self.signer.address)

        utils.logger.debug(f"tx signed by origin({self.signer.address}) delegated({tx.is_delegated()})")
        self.signature = signature
        return dataclasses.replace(tx, signature=signature)

    def sign_as_delegator(self, tx: Transaction, origin: Union[str, bytes]) -> Signature:
        """The delegator's half of the signature, bound to ``origin``."""
        if self.delegator is None:
            raise TransactionBuildError("'delegator' is required.")
        return self.delegator.sign_hash(tx.get_signing_hash(origin))
