"""Fintrack - personal finance tracking backend."""
