"""Tests for descriptor checksums — descriptor/checksum.py."""

from __future__ import annotations

import pytest

from btc_descriptors.descriptor.checksum import (
    CHECKSUM_CHARSET,
    add_checksum,
    desc_checksum,
    verify_checksum,
)
from btc_descriptors.errors.descriptor_errors import ChecksumError

_KNOWN = "addr(2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5)#h5yn9eq4"


class TestDescChecksum:
    def test_known_vectors(self) -> None:
        assert desc_checksum("raw(deadbeef)") == "89f8spxm"
        assert add_checksum("addr(2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5)") == _KNOWN

    def test_invalid_character(self) -> None:
        with pytest.raises(ChecksumError, match="Invalid character in checksum"):
            desc_checksum("addr(é)")

    def test_checksum_shape(self) -> None:
        checksum = desc_checksum("addr(1JQheacLPdM5ySCkrZkV66G2ApAXe1mqLj)")
        assert len(checksum) == 8
        assert set(checksum) <= set(CHECKSUM_CHARSET)


class TestVerifyChecksum:
    def test_strips_valid_checksum(self) -> None:
        assert verify_checksum(_KNOWN) == "addr(2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5)"

    def test_no_checksum_is_accepted(self) -> None:
        assert verify_checksum("addr(xyz)") == "addr(xyz)"

    def test_no_checksum_rejected_when_required(self) -> None:
        with pytest.raises(ChecksumError, match="Missing"):
            verify_checksum("addr(xyz)", require=True)

    def test_required_checksum_present(self) -> None:
        assert verify_checksum(_KNOWN, require=True).startswith("addr(")

    def test_mismatch_message(self) -> None:
        with pytest.raises(ChecksumError, match="Invalid checksum 'aaaaaaaa', expected 'h5yn9eq4'"):
            verify_checksum("addr(2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5)#aaaaaaaa")

    def test_empty_checksum(self) -> None:
        with pytest.raises(ChecksumError):
            verify_checksum("addr(2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5)#")

    @pytest.mark.parametrize("position", range(8))
    def test_any_flipped_character_fails(self, position: int) -> None:
        desc, _, checksum = _KNOWN.partition("#")
        replacement = "q" if checksum[position] != "q" else "p"
        tampered = checksum[:position] + replacement + checksum[position + 1 :]
        with pytest.raises(ChecksumError) as exc_info:
            verify_checksum(f"{desc}#{tampered}")
        assert exc_info.value.code == "checksum-mismatch"

    def test_unprintable_character(self) -> None:
        with pytest.raises(ChecksumError, match="Unprintable"):
            verify_checksum("addr(\n)")
