"""Domain layer: ledger models, services and repository protocols."""
