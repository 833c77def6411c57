# ads_online/core/logger.py
from loguru import logger
import sys
import os

from ads_online.config import settings

LOG_DIR = settings.log_dir
os.makedirs(LOG_DIR, exist_ok=True)

# Drop the default sink
logger.remove()

# Records logged outside a request have no correlation id
logger.configure(extra={"correlation_id": "-"})

# Console
logger.add(
    sys.stdout,
    colorize=True,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <yellow>{extra[correlation_id]}</yellow> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level=settings.log_level
)

# File (everything)
logger.add(
    f"{LOG_DIR}/ads_online.log",
    rotation="10 MB",
    retention="30 days",
    compression="zip",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[correlation_id]} | {name}:{function}:{line} - {message}",
    level="DEBUG"
)

# Errors only
logger.add(
    f"{LOG_DIR}/error.log",
    rotation="10 MB",
    retention="30 days",
    compression="zip",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[correlation_id]} | {name}:{function}:{line} - {message}",
    level="ERROR"
)
