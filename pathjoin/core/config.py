"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    PATH_FLAVOUR  — Path rules used by join_path when no flavour is passed:
                    native (default), posix or windows
    LOG_LEVEL     — Root log level name (default: INFO)
    LOG_DIR       — Directory for the dated log file; empty disables it

Flavour:
    "native" follows the rules of the running platform (os.path).
    "posix" and "windows" pin the rules regardless of platform, which is
    what tests and cross-platform tooling want.
"""
import os
from dotenv import load_dotenv

load_dotenv()

PATH_FLAVOUR = os.getenv("PATH_FLAVOUR", "native").strip().lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_DIR = os.getenv("LOG_DIR", "")
