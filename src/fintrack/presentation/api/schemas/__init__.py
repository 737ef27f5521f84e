"""Request and response schemas for the fintrack API."""
