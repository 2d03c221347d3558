from typing import Callable, List

import pytest

from thorchain.blockchain.transactions import Clause, Transaction, TransactionBuilder
from thorchain.crypto.signature import Signer

# ----- Type Hints
TxBuilderFactory = Callable[..., TransactionBuilder]
TxFactory = Callable[..., Transaction]

TO_ADDRESS = "0x7567d83b7b8d80addcb281a71d54fc7b3364ffed"
BLOCK_REF = "0x00000000aabbccdd"


# ----- Global variables
def pytest_configure():
    signers = [Signer.new() for _ in range(4)]

    pytest.SIGNERS: List[Signer] = signers


# ----- Transactions
@pytest.fixture
def tx_builder_factory() -> TxBuilderFactory:
    def _tx_builder_factory(delegated=False, signer=None, delegator=None) -> TransactionBuilder:
        tx_builder = TransactionBuilder()

        # Attributes that must be assigned
        tx_builder.chain_tag = 1
        tx_builder.block_ref = BLOCK_REF
        tx_builder.expiration = 32
        tx_builder.nonce = 12345678

        tx_builder.clauses = [
            Clause(to=TO_ADDRESS, value=10000, data="0x000000606060"),
            Clause(to=TO_ADDRESS, value=20000, data="0x000000606060")
        ]
        tx_builder.gas_price_coef = 128
        tx_builder.gas = 21000
        tx_builder.features = 1 if delegated else 0
        tx_builder.signer = signer or pytest.SIGNERS[0]
        tx_builder.delegator = delegator or pytest.SIGNERS[1]

        return tx_builder

    return _tx_builder_factory


@pytest.fixture
def tx_factory(tx_builder_factory) -> TxFactory:
    def _tx_factory(delegated=False, is_signing=True, **kwargs) -> Transaction:
        tx_builder = tx_builder_factory(delegated=delegated, **kwargs)
        return tx_builder.build(is_signing=is_signing)

    return _tx_factory
