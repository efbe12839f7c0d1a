"""Wallet app build orchestration for CI."""
