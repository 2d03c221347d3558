import pytest

from thorchain.blockchain.exception import DecodeError, InvalidFormat, OutOfRange
from thorchain.blockchain.transactions import Reserved


class TestReserved:
    def test_null_packs_to_empty_list(self):
        assert Reserved().pack() == []
        assert Reserved.null() == Reserved(features=0, unused=())

    def test_delegated(self):
        assert Reserved.delegated().pack() == [b'\x01']

    def test_unused_kept(self):
        reserved = Reserved(features=0, unused=(b'\x01',))
        assert reserved.pack() == [b'', b'\x01']
        assert Reserved.unpack(reserved.pack()) == reserved

    def test_trailing_empty_trimmed(self):
        reserved = Reserved(features=1, unused=(b'', b''))
        assert reserved.unused == ()
        assert reserved == Reserved.delegated()
        assert reserved.pack() == [b'\x01']

    def test_inner_empty_kept(self):
        reserved = Reserved(features=1, unused=(b'', b'\x02', b''))
        assert reserved.unused == (b'', b'\x02')
        assert Reserved.unpack(reserved.pack()) == reserved

    def test_unused_must_be_bytes(self):
        with pytest.raises(InvalidFormat):
            Reserved(features=0, unused=("0x01",))

    def test_unpack_rejects_untrimmed(self):
        with pytest.raises(DecodeError):
            Reserved.unpack([b'\x01', b''])

    # Exact mask match. Bits other than bit 0, alone or combined, are not delegation.
    @pytest.mark.parametrize("features, delegated", [(0, False), (1, True), (2, False), (3, False)])
    def test_is_delegated_exact_match(self, features, delegated):
        assert Reserved(features=features).is_delegated() is delegated

    def test_features_width(self):
        with pytest.raises(OutOfRange):
            Reserved(features=2 ** 32)
