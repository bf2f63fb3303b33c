"""External system adapters: cache stores and LLM transformers."""
