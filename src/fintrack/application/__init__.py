"""Application layer: commands, queries and ports."""
