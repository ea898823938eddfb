"""Structural consistency checks for locale translation files."""
