"""Application layer: domain rules and services."""
