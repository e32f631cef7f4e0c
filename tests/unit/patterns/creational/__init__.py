"""Creational pattern tests."""
