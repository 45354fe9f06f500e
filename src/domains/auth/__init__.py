"""Workspace credentials: log in, switch, list and log out."""
