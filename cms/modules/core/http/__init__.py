"""Core module HTTP layer."""
