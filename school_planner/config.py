import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("SCHOOL_PLANNER_LOG_LEVEL", "INFO")
REPORT_OUTPUT_DIR = os.getenv("SCHOOL_PLANNER_REPORT_DIR", "reports")
DATA_AS_OF = os.getenv("SCHOOL_PLANNER_DATA_AS_OF", "Dec 2024")
APP_NAME = os.getenv("SCHOOL_PLANNER_APP_NAME", "Vancouver Education Decision Tool")


def configure_logging(level: str = None):
    """basicConfig at LOG_LEVEL; unknown level names fall back to INFO."""
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO))
