"""Environment settings for todebug (logger defaults only)."""

import os

from dotenv import find_dotenv, load_dotenv

# Load environment variables from the .env of the project using todebug
load_dotenv(find_dotenv(usecwd=True))

LOG_DIR = os.environ.get("TODEBUG_LOG_DIR", "logs")
LOG_FILE = os.environ.get("TODEBUG_LOG_FILE", "debug.log")
