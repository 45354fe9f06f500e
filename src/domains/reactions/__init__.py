"""Emoji reactions on messages."""
