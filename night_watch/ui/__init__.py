"""Pygame rendering for night_watch."""
