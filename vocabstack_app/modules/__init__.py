"""Feature modules of the VocabStack application."""
