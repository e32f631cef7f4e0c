"""Structural pattern tests."""
