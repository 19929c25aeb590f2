"""Wallet ledger service: balance transfers and history over a relational store."""

__version__ = "0.1.0"
