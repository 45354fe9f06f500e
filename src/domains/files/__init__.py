"""File listing, upload, download and deletion."""
