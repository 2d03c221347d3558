from dataclasses import dataclass, field, fields
from typing import Iterable, List, Optional, Union

from thorchain import utils
from thorchain.blockchain.exception import InvalidFormat
from thorchain.blockchain.kinds import NumericKind, CompactFixedBlobKind, NullableFixedBlobKind
from thorchain.blockchain.types import Address, BlockRef, Hash32, Signature
from thorchain.blockchain.transactions.clause import Clause
from thorchain.blockchain.transactions.gas import calc_intrinsic_gas
from thorchain.blockchain.transactions.reserved import Reserved
from thorchain.crypto import blake2b256, rlp_encode, recover, address_bytes_from_pubkey

CHAIN_TAG_KIND = NumericKind(1)
BLOCK_REF_KIND = CompactFixedBlobKind(BlockRef.size, BlockRef)
EXPIRATION_KIND = NumericKind(4)
GAS_PRICE_COEF_KIND = NumericKind(1)
GAS_KIND = NumericKind(8)
DEPENDS_ON_KIND = NullableFixedBlobKind(Hash32.size, Hash32)
NONCE_KIND = NumericKind(8)


@dataclass
class Transaction:
    chain_tag: int
    block_ref: BlockRef
    expiration: int
    clauses: List[Clause]
    gas_price_coef: int
    gas: int
    depends_on: Optional[Hash32]
    nonce: int
    reserved: Reserved = field(default_factory=Reserved)

    # 65 bytes, or 130 bytes (origin then delegator) when delegated
    signature: Optional[bytes] = None

    def __post_init__(self):
        self.chain_tag = CHAIN_TAG_KIND.to_int(self.chain_tag)
        self.block_ref = BLOCK_REF_KIND.to_bytes(self.block_ref)
        self.expiration = EXPIRATION_KIND.to_int(self.expiration)
        self.clauses = self._to_clauses(self.clauses)
        self.gas_price_coef = GAS_PRICE_COEF_KIND.to_int(self.gas_price_coef)
        self.gas = GAS_KIND.to_int(self.gas)
        self.depends_on = DEPENDS_ON_KIND.to_bytes(self.depends_on)
        self.nonce = NONCE_KIND.to_int(self.nonce)
        if self.reserved is None:
            self.reserved = Reserved.null()
        elif not isinstance(self.reserved, Reserved):
            raise InvalidFormat(f"Reserved must be a Reserved. {self.reserved!r}")
        if self.signature is not None:
            self.signature = bytes(self.signature)

    @staticmethod
    def _to_clauses(clauses) -> List[Clause]:
        if isinstance(clauses, (str, bytes, bytearray, dict)) or not isinstance(clauses, Iterable):
            raise InvalidFormat(f"Clauses must be a list of clauses. {clauses!r}")

        result = []
        for clause in clauses:
            if isinstance(clause, dict):
                clause = Clause.from_dict(clause)
            elif not isinstance(clause, Clause):
                raise InvalidFormat(f"Not a clause. {clause!r}")
            result.append(clause)
        return result

    def __str__(self):
        fields_str = ', '.join(f"{f.name}={getattr(self, f.name)}" for f in fields(self))
        return f"{self.__class__.__qualname__}({fields_str})"

    @property
    def intrinsic_gas(self) -> int:
        return calc_intrinsic_gas(self.clauses)

    def is_delegated(self) -> bool:
        return self.reserved.is_delegated()

    def is_signed(self) -> bool:
        return self.signature is not None

    def is_signature_valid(self) -> bool:
        """Checks the signature length only. 65 bytes, or 130 when delegated."""
        if self.signature is None:
            return False

        expected = Signature.size * 2 if self.is_delegated() else Signature.size
        return len(self.signature) == expected

    def pack_unsigned_body(self) -> list:
        return [
            CHAIN_TAG_KIND.serialize(self.chain_tag),
            BLOCK_REF_KIND.serialize(self.block_ref),
            EXPIRATION_KIND.serialize(self.expiration),
            [clause.pack() for clause in self.clauses],
            GAS_PRICE_COEF_KIND.serialize(self.gas_price_coef),
            GAS_KIND.serialize(self.gas),
            DEPENDS_ON_KIND.serialize(self.depends_on),
            NONCE_KIND.serialize(self.nonce),
            self.reserved.pack()
        ]

    def get_signing_hash(self, delegate_for: Optional[Union[str, bytes]] = None) -> Hash32:
        """Hash to be signed by the origin or, given the origin address, by the delegator.

        :param delegate_for: origin address the delegator pays for
        """
        h = blake2b256(rlp_encode(self.pack_unsigned_body()))
        if delegate_for is None:
            return Hash32(h)

        return Hash32(blake2b256(h, Address.from_(delegate_for)))

    def encode(self) -> bytes:
        body = self.pack_unsigned_body()
        if self.signature is not None:
            body.append(self.signature)
        return rlp_encode(body)

    @classmethod
    def decode(cls, data: bytes) -> 'Transaction':
        from thorchain.blockchain.transactions import TransactionSerializer
        return TransactionSerializer().deserialize(data)

    @property
    def origin_public_key(self) -> Optional[bytes]:
        if not self.is_signature_valid():
            return None

        try:
            return recover(self.get_signing_hash(), self.signature[:Signature.size])
        except Exception as e:
            utils.logger.debug(f"Fail to recover origin of tx. signature({self.signature.hex()}): {e}")
            return None

    @property
    def origin(self) -> Optional[str]:
        pubkey = self.origin_public_key
        return None if pubkey is None else address_bytes_from_pubkey(pubkey).hex_0x()

    @property
    def origin_address_bytes(self) -> Optional[Address]:
        pubkey = self.origin_public_key
        return None if pubkey is None else address_bytes_from_pubkey(pubkey)

    @property
    def delegator_public_key(self) -> Optional[bytes]:
        if not self.is_delegated() or not self.is_signature_valid():
            return None

        origin = self.origin_address_bytes
        if origin is None:
            return None

        try:
            return recover(self.get_signing_hash(origin), self.signature[Signature.size:])
        except Exception as e:
            utils.logger.debug(f"Fail to recover delegator of tx. signature({self.signature.hex()}): {e}")
            return None

    @property
    def delegator(self) -> Optional[str]:
        pubkey = self.delegator_public_key
        return None if pubkey is None else address_bytes_from_pubkey(pubkey).hex_0x()

    @property
    def delegator_address_bytes(self) -> Optional[Address]:
        pubkey = self.delegator_public_key
        return None if pubkey is None else address_bytes_from_pubkey(pubkey)

    @property
    def id(self) -> Optional[Hash32]:
        """Hash of the signing hash and the origin address."""
        if not self.is_signature_valid():
            return None

        try:
            h = self.get_signing_hash()
            pubkey = recover(h, self.signature[:Signature.size])
            return Hash32(blake2b256(h, address_bytes_from_pubkey(pubkey)))
        except Exception as e:
            utils.logger.debug(f"Fail to compute id of tx. signature({self.signature.hex()}): {e}")
            return None

    @property
    def id_hex(self) -> Optional[str]:
        tx_id = self.id
        return None if tx_id is None else tx_id.hex_0x()
