"""Infrastructure layer - logging and the pattern catalog registry."""
