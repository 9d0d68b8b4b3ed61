"""Core module console commands."""
