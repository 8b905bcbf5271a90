"""Shared test fixtures and known address vectors for the btc-descriptors test suite.

Vectors come from BIP173, BIP350 and the libwally address tests.
"""

from __future__ import annotations

import pytest

from btc_descriptors.bitcoin.address import Address


# Compressed secp256k1 generator point and its hash160
GENERATOR_PUBKEY = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
GENERATOR_HASH160 = "751e76e8199196d454941c45d1b3a323f1433bd6"

# (address, script pubkey hex)
P2PKH = ("1JQheacLPdM5ySCkrZkV66G2ApAXe1mqLj", "76a914bef5a2f9a56a94aab12459f72ad9cf8cf19c7bbe88ac")
P2PKH_TESTNET = ("mxvewdhKCenLkYgNa8irv1UM2omEWPMdEE", "76a914bef5a2f9a56a94aab12459f72ad9cf8cf19c7bbe88ac")
P2SH = ("3DymAvEWH38HuzHZ3VwLus673bNZnYwNXu", "a91486cc442a97817c245ce90ed0d31d6dbcde3841f987")
P2SH_TESTNET = ("2N5XyEfAXtVde7mv6idZDXp5NFwajYEj9TD", "a91486cc442a97817c245ce90ed0d31d6dbcde3841f987")
P2WPKH = ("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", "0014751e76e8199196d454941c45d1b3a323f1433bd6")
P2WSH_TESTNET = (
    "tb1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3q0sl5k7",
    "00201863143c14c5166804bd19203356da136c985678cd4d27a1b8c6329604903262",
)
P2TR = (
    "bc1p0xlxvlhemja6c4dqv22uapctqupfhlxm9h8z3k2e72q4k9hcz7vqzk5jj0",
    "512079be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
)
WITNESS_V16 = ("bc1sw50qgdz25j", "6002751e")

ALL_VECTORS = [P2PKH, P2PKH_TESTNET, P2SH, P2SH_TESTNET, P2WPKH, P2WSH_TESTNET, P2TR, WITNESS_V16]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def p2pkh_address() -> Address:
    return Address.from_string(P2PKH[0])


@pytest.fixture
def p2sh_address() -> Address:
    return Address.from_string(P2SH[0])


@pytest.fixture
def p2wpkh_address() -> Address:
    return Address.from_string(P2WPKH[0])


@pytest.fixture
def p2wsh_address() -> Address:
    return Address.from_string(P2WSH_TESTNET[0])


@pytest.fixture
def p2tr_address() -> Address:
    return Address.from_string(P2TR[0])
