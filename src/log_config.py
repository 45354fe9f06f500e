import logging

from config import Config
from utils.logging.logging_manager import LogLevel, LogManager

# Libraries that log every HTTP request at DEBUG
THIRD_PARTY_LOGGERS = ("slack_sdk", "urllib3", "httpx", "mcp")

log_manager = LogManager(
    log_dir=Config.LOG_DIR,
    log_file=Config.LOG_FILE,
    log_retention_hours=Config.LOG_RETENTION_HOURS,
    default_level=LogLevel[Config.LOG_LEVEL],
    use_filter=Config.USE_FILTER,
    log_output=Config.LOG_OUTPUT,
)

for name in THIRD_PARTY_LOGGERS:
    logging.getLogger(name).setLevel(max(LogLevel[Config.LOG_LEVEL].value, logging.WARNING))
