"""Vocabulary module: word lookup, seed import and level tags."""
