import pytest

from thorchain.blockchain.exception import TransactionBuildError, InvalidFormat
from thorchain.blockchain.transactions import Clause, Transaction, TransactionBuilder
from tests.unit.conftest import TxBuilderFactory, TO_ADDRESS


class TestTransactionBuilder:
    def test_build_unsigned(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory()
        tx = tx_builder.build(is_signing=False)

        assert isinstance(tx, Transaction)
        assert tx.signature is None
        assert tx_builder.hash == tx.get_signing_hash()
        assert tx.block_ref.hex_0x() == "0x00000000aabbccdd"

    def test_build_signed(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory()
        tx = tx_builder.build()

        assert len(tx.signature) == 65
        assert tx_builder.signature == tx.signature
        assert tx.origin == tx_builder.signer.address

    def test_build_delegated(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory(delegated=True)
        tx = tx_builder.build()

        assert tx.is_delegated()
        assert len(tx.signature) == 130
        assert tx.delegator == tx_builder.delegator.address

    def test_delegated_needs_delegator(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory(delegated=True)
        tx_builder.delegator = None

        with pytest.raises(TransactionBuildError):
            tx_builder.build()

    def test_signing_needs_signer(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory()
        tx_builder.signer = None

        with pytest.raises(TransactionBuildError):
            tx_builder.build()

    @pytest.mark.parametrize("name", ["chain_tag", "block_ref", "expiration", "nonce"])
    def test_required_attributes(self, tx_builder_factory: TxBuilderFactory, name):
        tx_builder = tx_builder_factory()
        setattr(tx_builder, name, None)

        with pytest.raises(TransactionBuildError):
            tx_builder.build(is_signing=False)

    def test_string_inputs(self):
        tx_builder = TransactionBuilder()
        tx_builder.chain_tag = "0x27"
        tx_builder.block_ref = "00000000aabbccdd"
        tx_builder.expiration = "720"
        tx_builder.nonce = "0xbc614e"
        tx_builder.gas_price_coef = "128"
        tx_builder.clauses = [{"to": TO_ADDRESS, "value": "1000000000000000000", "data": "0x"}]
        tx = tx_builder.build(is_signing=False)

        assert tx.chain_tag == 0x27
        assert tx.expiration == 720
        assert tx.nonce == 12345678
        assert tx.gas_price_coef == 128
        assert tx.clauses == [Clause(to=TO_ADDRESS, value=10 ** 18)]

    def test_gas_defaults_to_intrinsic(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory()
        tx_builder.gas = None

        assert tx_builder.build(is_signing=False).gas == 37432

    def test_invalid_input_fails_loudly(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory()
        tx_builder.nonce = "twelve"

        with pytest.raises(InvalidFormat):
            tx_builder.build(is_signing=False)

    def test_sign_as_delegator(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory(delegated=True)
        tx = tx_builder.build(is_signing=False)

        origin_signature = tx_builder.signer.sign_hash(tx.get_signing_hash())
        delegator_signature = tx_builder.sign_as_delegator(tx, tx_builder.signer.address)
        tx.signature = origin_signature + delegator_signature

        assert tx.origin == tx_builder.signer.address
        assert tx.delegator == tx_builder.delegator.address

    def test_reset_cache(self, tx_builder_factory: TxBuilderFactory):
        tx_builder = tx_builder_factory()
        tx_builder.build()
        tx_builder.reset_cache()

        assert not tx_builder.hash
        assert not tx_builder.signature
