"""Authored ``setupLocale`` sources, one file per locale."""
