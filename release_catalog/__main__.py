"""Build the release catalog from the configured source and print a summary.

    python -m release_catalog

The settings file is `$RELEASE_CATALOG_SETTINGS` (default: the app state directory).
"""
import sys
from pathlib import Path

from rich.table import Table

from release_catalog.catalog import load_catalog_from_settings
from release_catalog.constants.local import ERROR_LOG_PATH, SETTINGS_PATH
from release_catalog.logging_setup import console, setup_logging
from release_catalog.query import ReleaseKind
from release_catalog.settings import load_settings


def main(*, settings_path: Path | str = SETTINGS_PATH, log_file: Path | str = ERROR_LOG_PATH) -> int:
    """Load the catalog once and print its versions; returns the process exit code."""
    logger = setup_logging(log_file=log_file)

    try:
        query = load_catalog_from_settings(load_settings(settings_path))
    except Exception:
        logger.exception('Failed to build the release catalog')
        return 1

    table = Table(title='Release catalog')
    table.add_column('Kind')
    table.add_column('Count', justify='right')
    table.add_column('Newest')

    for kind, newest in ((ReleaseKind.RELEASE, query.latest()), (ReleaseKind.PRERELEASE, query.latest_prerelease())):
        table.add_row(kind.value, str(len(query.list_versions(kind))), str(newest) if newest is not None else '-')

    console.print(table)
    return 0


if __name__ == '__main__':
    sys.exit(main())
