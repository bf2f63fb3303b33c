"""Core pipeline logic and domain exceptions."""
