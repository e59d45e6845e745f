"""Application layer - Use cases and ports."""
