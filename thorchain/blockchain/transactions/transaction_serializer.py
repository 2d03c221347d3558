from thorchain import utils
from thorchain.blockchain.exception import DecodeError
from thorchain.blockchain.transactions.clause import Clause
from thorchain.blockchain.transactions.reserved import Reserved
from thorchain.blockchain.transactions.transaction import (
    Transaction, CHAIN_TAG_KIND, BLOCK_REF_KIND, EXPIRATION_KIND, GAS_PRICE_COEF_KIND, GAS_KIND,
    DEPENDS_ON_KIND, NONCE_KIND
)
from thorchain.crypto import rlp_decode

_UNSIGNED_BODY_LENGTH = 9


def _is_list(item) -> bool:
    return isinstance(item, (list, tuple))


class TransactionSerializer:
    def serialize(self, tx: Transaction) -> bytes:
        return tx.encode()

    def deserialize(self, data: bytes) -> Transaction:
        body = rlp_decode(data)
        if not _is_list(body) or len(body) not in (_UNSIGNED_BODY_LENGTH, _UNSIGNED_BODY_LENGTH + 1):
            raise DecodeError(f"Not a transaction body. {bytes(data).hex()}")

        chain_tag, block_ref, expiration, clauses, gas_price_coef, gas, depends_on, nonce, reserved = \
            body[:_UNSIGNED_BODY_LENGTH]

        if not _is_list(clauses) or not all(_is_list(c) and len(c) == 3 for c in clauses):
            raise DecodeError(f"Invalid clauses. {clauses!r}")
        if not _is_list(reserved) or any(_is_list(r) for r in reserved):
            raise DecodeError(f"Invalid reserved. {reserved!r}")

        signature = None
        if len(body) > _UNSIGNED_BODY_LENGTH:
            signature = body[_UNSIGNED_BODY_LENGTH]
            if _is_list(signature):
                raise DecodeError("Signature must be bytes.")

        for item in (chain_tag, block_ref, expiration, gas_price_coef, gas, depends_on, nonce):
            if _is_list(item):
                raise DecodeError(f"Scalar field expected. {item!r}")

        return Transaction(
            chain_tag=CHAIN_TAG_KIND.deserialize(chain_tag),
            block_ref=BLOCK_REF_KIND.deserialize(block_ref),
            expiration=EXPIRATION_KIND.deserialize(expiration),
            clauses=[Clause.unpack(list(c)) for c in clauses],
            gas_price_coef=GAS_PRICE_COEF_KIND.deserialize(gas_price_coef),
            gas=GAS_KIND.deserialize(gas),
            depends_on=DEPENDS_ON_KIND.deserialize(depends_on),
            nonce=NONCE_KIND.deserialize(nonce),
            reserved=Reserved.unpack(list(reserved)),
            signature=signature
        )

    def to_origin_data(self, tx: Transaction) -> dict:
        origin_data = {
            "chainTag": tx.chain_tag,
            "blockRef": tx.block_ref.hex_0x(),
            "expiration": tx.expiration,
            "clauses": [clause.to_dict() for clause in tx.clauses],
            "gasPriceCoef": tx.gas_price_coef,
            "gas": tx.gas,
            "dependsOn": tx.depends_on.hex_0x() if tx.depends_on is not None else None,
            "nonce": tx.nonce
        }

        if tx.reserved != Reserved.null():
            origin_data["reserved"] = tx.reserved.to_dict()
        return origin_data

    def to_full_data(self, tx: Transaction) -> dict:
        full_data = self.to_origin_data(tx)
        if tx.signature is not None:
            full_data["signature"] = utils.bytes_to_hex(tx.signature)
            full_data["id"] = tx.id_hex
            full_data["origin"] = tx.origin
            if tx.is_delegated():
                full_data["delegator"] = tx.delegator
        return full_data

    def from_(self, tx_data: dict) -> Transaction:
        reserved = tx_data.get("reserved")
        if reserved is None:
            reserved = Reserved.null()
        else:
            reserved = Reserved(
                features=reserved.get("features", 0),
                unused=tuple(utils.to_bytes(item) for item in reserved.get("unused", ()))
            )

        signature = tx_data.get("signature")
        if signature is not None:
            signature = utils.to_bytes(signature)

        return Transaction(
            chain_tag=tx_data["chainTag"],
            block_ref=tx_data["blockRef"],
            expiration=tx_data["expiration"],
            clauses=[Clause.from_dict(c) for c in tx_data.get("clauses", [])],
            gas_price_coef=tx_data["gasPriceCoef"],
            gas=tx_data["gas"],
            depends_on=tx_data.get("dependsOn"),
            nonce=tx_data["nonce"],
            reserved=reserved,
            signature=signature
        )
