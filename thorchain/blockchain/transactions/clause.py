from dataclasses import dataclass, field
from typing import List, Optional

from thorchain.blockchain.kinds import NumericKind, BlobKind, NullableFixedBlobKind
from thorchain.blockchain.types import Address

TO_KIND = NullableFixedBlobKind(Address.size, Address)
VALUE_KIND = NumericKind(32)
DATA_KIND = BlobKind()


@dataclass(frozen=True)
class Clause:
    """One transfer or contract call. ``to`` is None for contract creation."""
    to: Optional[Address]
    value: int = 0
    data: bytes = field(default=b'')

    def __post_init__(self):
        object.__setattr__(self, "to", TO_KIND.to_bytes(self.to))
        object.__setattr__(self, "value", VALUE_KIND.to_int(self.value))
        object.__setattr__(self, "data", DATA_KIND.to_bytes(self.data))

    def is_contract_creation(self) -> bool:
        return self.to is None

    def pack(self) -> List[bytes]:
        return [
            TO_KIND.serialize(self.to),
            VALUE_KIND.serialize(self.value),
            DATA_KIND.serialize(self.data)
        ]

    @classmethod
    def unpack(cls, packed: List[bytes]) -> 'Clause':
        to, value, data = packed
        return cls(
            to=TO_KIND.deserialize(to),
            value=VALUE_KIND.deserialize(value),
            data=DATA_KIND.deserialize(data)
        )

    def to_dict(self) -> dict:
        return {
            "to": self.to.hex_0x() if self.to is not None else None,
            "value": self.value,
            "data": "0x" + self.data.hex()
        }

    @classmethod
    def from_dict(cls, clause: dict) -> 'Clause':
        return cls(to=clause.get("to"), value=clause.get("value", 0), data=clause.get("data", b''))
