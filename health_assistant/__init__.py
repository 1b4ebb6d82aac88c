"""Body-composition and nutrition metrics for a roster of users."""

__version__ = "1.0.0"
