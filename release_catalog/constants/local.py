"""Module for defining paths that depend on the local environment.

Nothing is created on disk here; directories are only made when something is written to them.
"""
from release_catalog.utils import get_app_dir, get_env_path

APP_DIR = get_app_dir()

# Both locations can be redirected through environment variables (useful for CI and tests).
LOG_DIR_PATH = get_env_path('RELEASE_CATALOG_LOG_DIR', default=APP_DIR)
SETTINGS_PATH = get_env_path('RELEASE_CATALOG_SETTINGS', default=APP_DIR / 'settings.toml')

ERROR_LOG_PATH = LOG_DIR_PATH / 'error.log'
