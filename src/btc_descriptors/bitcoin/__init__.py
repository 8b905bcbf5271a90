"""Bitcoin primitives — addresses, output scripts, Base58 and Bech32."""
