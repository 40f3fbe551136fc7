import logging
import os
from datetime import datetime
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level=logging.INFO, log_dir: Optional[str] = None):
    """Setup basic logging configuration, optionally also writing a dated log file"""
    handlers = [logging.StreamHandler()]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                os.path.join(
                    log_dir, f"profiles_{datetime.now().strftime('%Y-%m-%d')}.log"
                )
            )
        )

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    return logging.getLogger("github_profiles")
