"""Behavioral pattern tests."""
