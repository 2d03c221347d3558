from dataclasses import dataclass, field
from typing import List, Tuple

from thorchain.blockchain.exception import DecodeError, InvalidFormat
from thorchain.blockchain.kinds import NumericKind

FEATURES_KIND = NumericKind(4)

# VIP-191 fee delegation bit
DELEGATED_MASK = 1


@dataclass(frozen=True)
class Reserved:
    """Feature bits plus fields not interpreted yet, kept as-is."""
    features: int = 0
    unused: Tuple[bytes, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "features", FEATURES_KIND.to_int(self.features))
        unused = list(self.unused)
        for item in unused:
            if not isinstance(item, bytes):
                raise InvalidFormat(f"Unused reserved field must be bytes. {item!r}")

        # trailing empty fields are dropped when packed
        while unused and not unused[-1]:
            unused.pop()
        object.__setattr__(self, "unused", tuple(unused))

    @classmethod
    def null(cls) -> 'Reserved':
        return cls()

    @classmethod
    def delegated(cls) -> 'Reserved':
        return cls(features=DELEGATED_MASK)

    def is_delegated(self) -> bool:
        # Only the exact mask counts. Unassigned bits make it non-delegated.
        return self.features == DELEGATED_MASK

    def pack(self) -> List[bytes]:
        packed = [FEATURES_KIND.serialize(self.features), *self.unused]

        # right trim empty elements
        while packed and not packed[-1]:
            packed.pop()
        return packed

    @classmethod
    def unpack(cls, packed: List[bytes]) -> 'Reserved':
        if not packed:
            return cls()
        if not packed[-1]:
            raise DecodeError("invalid reserved fields: not trimmed")
        return cls(features=FEATURES_KIND.deserialize(packed[0]), unused=tuple(packed[1:]))

    def to_dict(self) -> dict:
        return {
            "features": self.features,
            "unused": ["0x" + item.hex() for item in self.unused]
        }
