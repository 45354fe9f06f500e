"""Slack tools for Model Context Protocol clients, served over stdio.

Importing :mod:`mcp_server.slack_mcp_server` switches logging to file-only output, so
the CLI imports it only when ``slacktoolkit mcp serve`` runs.
"""
