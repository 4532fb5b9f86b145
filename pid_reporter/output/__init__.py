"""Output formatting and destinations."""
