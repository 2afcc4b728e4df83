"""Loyalty miles: per-user balance, tier and transaction ledger."""
