"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
PACKAGE_NAME_SHORT = "patternkit"
__version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Reusable, testable implementations of the classic object-oriented design patterns"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
