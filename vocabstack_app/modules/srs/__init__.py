"""Spaced repetition scheduler: pure interval, ease and mastery calculations."""
