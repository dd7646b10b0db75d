"""Locale tables for the kivi UI namespace."""
