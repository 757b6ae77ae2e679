import os
from multiprocessing import cpu_count
from dotenv import load_dotenv
from ReleaseHub.utils.logging_utils import log_message
from ReleaseHub.utils.env_creator import get_env_file_path

DEFAULT_PREFERRED_RESOLUTIONS = ['4k', '1080p', '720p']

# Load .env file
dotenv_path = get_env_file_path()
load_dotenv(dotenv_path)


def get_env_int(key, default):
    """Safely get an integer environment variable with a default value."""
    try:
        value = os.getenv(key)
        if value is None or value.strip() == '':
            return default
        return int(value)
    except (ValueError, TypeError):
        log_message(f"Invalid integer value for {key}: '{os.getenv(key)}'. Using default.", level="WARNING")
        return default


def get_env_bool(key, default):
    """Get a boolean environment variable; accepts true/1/yes."""
    value = os.getenv(key)
    if value is None or value.strip() == '':
        return default
    return value.lower() in ['true', '1', 'yes']


def get_env_list(key, default):
    """Get a comma-separated environment variable as a list of stripped items."""
    value = os.getenv(key)
    if value is None or value.strip() == '':
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


def get_max_processes():
    """Maximum number of worker threads used for bulk parsing."""
    max_processes = get_env_int('MAX_PROCESSES', cpu_count())
    if max_processes < 1:
        log_message(f"MAX_PROCESSES must be positive, got {max_processes}. Using 1.", level="WARNING")
        return 1
    return max_processes


def get_preferred_resolutions():
    return get_env_list('PREFERRED_RESOLUTIONS', DEFAULT_PREFERRED_RESOLUTIONS)


def get_output_indent():
    return get_env_int('OUTPUT_INDENT', 2)
