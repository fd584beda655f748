"""Application layer — use cases and boundary formatting."""
