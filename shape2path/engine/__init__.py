"""Shape-to-path conversion engine."""
