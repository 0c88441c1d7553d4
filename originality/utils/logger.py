import logging
import sys
from originality.utils.config import config

# Configure root logger - set to ERROR by default to suppress all non-originality logs
logging.basicConfig(level=logging.ERROR, format=config.log_format, stream=sys.stdout)

# Configure only the originality logger to show logs at the configured level
originality_logger = logging.getLogger('originality')
originality_logger.setLevel(config.log_level)

# Create a dedicated handler for originality logs
originality_handler = logging.StreamHandler(sys.stdout)
originality_handler.setFormatter(logging.Formatter(config.log_format))

# Remove any existing handlers to avoid duplicate logs
for handler in list(originality_logger.handlers):
    originality_logger.removeHandler(handler)

originality_logger.addHandler(originality_handler)

# Keep analyzer logs out of the root logger
originality_logger.propagate = False

# Get our specific module logger
logger = logging.getLogger(__name__)
