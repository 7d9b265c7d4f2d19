"""Core Layer: domain types, errors, repository contracts. No IO, no async."""
