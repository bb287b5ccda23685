"""Desktop window (pygame)."""
