"""Domain layer - shared kernel used by every pattern module."""
