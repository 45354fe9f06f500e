"""Channel history, search and message posting."""
