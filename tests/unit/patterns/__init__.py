"""Design pattern tests package.

This package contains tests for every pattern implementation, grouped by
creational, structural and behavioral families.
"""
