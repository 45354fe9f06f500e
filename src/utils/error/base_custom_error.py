class BaseCustomError(Exception):
    """Root of the project's exceptions: a user-facing message plus debugging metadata.

    ``str()`` is the message alone; the metadata only goes to the logs.
    """

    def __init__(self, message: str, **metadata):
        """
        :param message: Message shown to the user.
        :param metadata: Context for the logs; None values are dropped.
        """
        super().__init__(message)
        self.message = message
        self.metadata = {k: v for k, v in metadata.items() if v is not None}

    def __str__(self):
        return self.message

    def log_message(self) -> str:
        """The message followed by the metadata, for log records."""
        if not self.metadata:
            return self.message
        metadata_info = ", ".join(f"{k}={v}" for k, v in self.metadata.items())
        return f"{self.message} | Metadata: {metadata_info}"
