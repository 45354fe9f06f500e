import os
from typing import Any

from utils.file_manager import FileManager

from .base_tools import BaseSlackTools


class FileTools(BaseSlackTools):
    """MCP Tools for Slack files.

    Upload and download paths are resolved on the machine running the server.
    """

    TOOL_DESCRIPTIONS = {
        "list_files": "List files in Slack",
        "get_file_info": "Get information about a file",
        "upload_file": "Upload a local file to a channel",
        "download_file": "Download a file to a local path",
        "delete_file": "Delete a file",
    }

    WRITE_TOOLS = frozenset({"upload_file", "delete_file"})

    def _run(self, name: str, args: Any) -> Any:
        if name == "list_files":
            return self.service.list_files(
                args.pagination_request(), channel_id=args.channel_id, user_id=args.user_id
            )
        elif name == "get_file_info":
            return self.service.get_file_info(args.file_id)
        elif name == "upload_file":
            FileManager.validate_file(args.file_path)
            filename = args.filename or os.path.basename(args.file_path)
            return self.service.upload_file(args.channel_id, args.file_path, filename=filename, title=args.title)
        elif name == "download_file":
            file = self.service.get_file_info(args.file_id)
            path = self.service.download_file(file.url_private, args.destination or file.name)
            return {"status": "downloaded", "file_id": args.file_id, "path": path}
        elif name == "delete_file":
            self.service.delete_file(args.file_id)
            return {"status": "deleted", "file_id": args.file_id}
        raise ValueError(f"Unknown file tool '{name}'")
