"""Tests for the descriptor CLI — tools/descriptor_tool.py."""

from __future__ import annotations

import json

import pytest

from btc_descriptors.descriptor.checksum import add_checksum
from btc_descriptors.tools.descriptor_tool import main
from conftest import P2PKH, P2SH_TESTNET, P2TR

_KNOWN = "addr(2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5)#h5yn9eq4"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NETWORK", "REQUIRE_CHECKSUM", "LOG_LEVEL", "CONFIG_PATH"):
        monkeypatch.delenv(f"BTCDESC_{name}", raising=False)


class TestInspect:
    def test_prints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["inspect", add_checksum(f"addr({P2TR[0]})")]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["address_type"] == "p2tr"
        assert data["script_pubkey"] == P2TR[1]
        assert data["script_code"] is None

    def test_checksum_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["inspect", _KNOWN[:-1] + "x"]) == 1
        assert "checksum-mismatch" in capsys.readouterr().err

    def test_required_checksum(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BTCDESC_REQUIRE_CHECKSUM", "true")
        assert main(["inspect", f"addr({P2PKH[0]})"]) == 1
        assert "Missing descriptor checksum" in capsys.readouterr().err

    def test_network_mismatch(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BTCDESC_NETWORK", "bitcoin")
        assert main(["inspect", _KNOWN]) == 1
        assert "invalid-address" in capsys.readouterr().err


class TestSettingsErrors:
    def test_unknown_network_reported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BTCDESC_NETWORK", "litecoin")
        assert main(["inspect", _KNOWN]) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("error: invalid-settings: network:")
        assert captured.out == ""

    def test_bad_log_level_reported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BTCDESC_LOG_LEVEL", "LOUD")
        assert main(["checksum", "raw(deadbeef)"]) == 1
        assert "invalid-settings: log_level:" in capsys.readouterr().err


class TestFromAddress:
    def test_builds_descriptor(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["from-address", "2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5"]) == 0
        assert capsys.readouterr().out.strip() == _KNOWN

    def test_network_accepted(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BTCDESC_NETWORK", "regtest")
        assert main(["from-address", P2SH_TESTNET[0]]) == 0
        assert capsys.readouterr().out.startswith(f"addr({P2SH_TESTNET[0]})#")

    def test_invalid_address(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["from-address", "nope"]) == 1
        assert "invalid-address" in capsys.readouterr().err


class TestChecksum:
    def test_adds_checksum(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["checksum", "addr(2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5)"]) == 0
        assert capsys.readouterr().out.strip() == _KNOWN

    def test_existing_checksum_verified(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["checksum", _KNOWN]) == 0
        assert capsys.readouterr().out.strip() == _KNOWN


class TestUsage:
    def test_missing_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 1
        assert "Descriptor Tool" in capsys.readouterr().out

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["explode", "x"]) == 1
        assert "Unknown command: explode" in capsys.readouterr().out
