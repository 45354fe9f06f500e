"""Workspace members and presence."""
