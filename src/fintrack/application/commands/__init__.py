"""Application commands (write side)."""
