"""lcovbridge CLI package."""
