"""FastAPI application for fintrack."""
