from datetime import datetime, timezone
import os
import re
import sys
import platform
import unicodedata
from dotenv import load_dotenv
from ReleaseHub.utils.env_creator import get_env_file_path


def _normalize_for_logging(text: str) -> str:
    """
    Unicode normalization for logging to prevent encoding errors.
    Release names often carry non-ASCII titles.
    """
    if not isinstance(text, str) or not text:
        return str(text) if text is not None else ""

    replacements = {
        '\u2013': '-',  # EN DASH -> HYPHEN
        '\u2014': '-',  # EM DASH -> HYPHEN
        '\u2018': "'",  # LEFT SINGLE QUOTATION MARK -> APOSTROPHE
        '\u2019': "'",  # RIGHT SINGLE QUOTATION MARK -> APOSTROPHE
        '\u201c': '"',  # LEFT DOUBLE QUOTATION MARK -> QUOTATION MARK
        '\u201d': '"',  # RIGHT DOUBLE QUOTATION MARK -> QUOTATION MARK
        '\u00a0': ' ',  # NON-BREAKING SPACE -> REGULAR SPACE
        '\u2026': '...',  # HORIZONTAL ELLIPSIS -> THREE DOTS
    }

    for unicode_char, replacement in replacements.items():
        text = text.replace(unicode_char, replacement)

    try:
        text.encode('ascii')
        return text
    except UnicodeEncodeError:
        text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')

    # Remove empty brackets left behind by stripped non-ASCII content
    text = re.sub(r'\(\s*\)', '', text)
    text = re.sub(r'\[\s*\]', '', text)
    text = re.sub(r'\{\s*\}', '', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


# Load environment variables from .env file
load_dotenv(get_env_file_path())

LOG_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50
}

_STARTED_AT = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H-%M-%S')

IS_WINDOWS = platform.system().lower() == 'windows'

if IS_WINDOWS:
    COLOR_CODES = {
        "DEFAULT": "",
        "RED_BOLD": "",
        "RED": "",
        "YELLOW": "",
        "MAGENTA": "",
        "END": ""
    }
else:
    COLOR_CODES = {
        "DEFAULT": "\033[0m",
        "RED_BOLD": "\033[1;31m",
        "RED": "\033[31m",
        "YELLOW": "\033[93m",
        "MAGENTA": "\033[35m",
        "END": "\033[0m",
    }


def get_log_level():
    """Current numeric log level, read from LOG_LEVEL on every call."""
    return LOG_LEVELS.get(os.getenv('LOG_LEVEL', 'INFO').upper(), 20)


def get_log_file():
    """
    Path of the log file, or None when file logging is disabled.
    The log directory is created on first use.
    """
    if os.getenv('LOG_TO_FILE', 'false').lower() not in ['true', '1', 'yes']:
        return None
    log_dir = os.getenv('LOG_DIR') or os.path.join(os.getcwd(), "logs")
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, f"{_STARTED_AT}.log")


def get_color(level):
    """
    Determines the colour for a log entry of the given level.
    Returns empty string on Windows.
    """
    if IS_WINDOWS:
        return ""

    if level == "CRITICAL":
        return COLOR_CODES["RED_BOLD"]
    elif level == "ERROR":
        return COLOR_CODES["RED"]
    elif level == "WARNING":
        return COLOR_CODES["YELLOW"]
    elif level == "DEBUG":
        return COLOR_CODES["MAGENTA"]
    return COLOR_CODES["DEFAULT"]


def log_message(message, level="INFO", output="stderr"):
    """
    Logs messages to the console and optionally to a log file.
    Colors are disabled on Windows.
    """
    if LOG_LEVELS.get(level, 20) < get_log_level():
        return

    timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    safe_message = _normalize_for_logging(str(message))
    log_entry = f"{timestamp} [{level}] {safe_message}"

    colored_message = log_entry if IS_WINDOWS else f"{get_color(level)}{log_entry}{COLOR_CODES['END']}"

    try:
        if output == "stdout":
            print(colored_message, flush=True)
        elif output == "stderr":
            print(colored_message, file=sys.stderr, flush=True)
    except (ValueError, OSError):
        pass

    log_file_path = get_log_file()
    if log_file_path:
        try:
            with open(log_file_path, 'a', encoding='utf-8') as log_file:
                log_file.write(log_entry + '\n')
        except (OSError, IOError):
            pass


def log_critical_error(error_message):
    """
    Logs a critical error.
    """
    log_message(f"CRITICAL error: {error_message}", level="CRITICAL")


def log_error(error_message):
    """
    Logs an error.
    """
    log_message(f"ERROR: {error_message}", level="ERROR")
