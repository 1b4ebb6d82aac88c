"""Application services for the health profile."""
