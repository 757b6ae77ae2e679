import os


def get_env_file_path():
    """Get the path to the .env file."""
    if os.path.exists('/.dockerenv') or os.getenv('CONTAINER') == 'docker':
        return '/app/db/.env'

    cwd = os.getcwd()
    basename = os.path.basename(cwd)

    # Running from inside the package directory
    if basename == 'ReleaseHub':
        parent_dir = os.path.dirname(cwd)
        return os.path.join(parent_dir, 'db', '.env')

    return os.path.join(cwd, 'db', '.env')
