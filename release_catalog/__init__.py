"""In-memory catalog of language runtime releases.

Typical use:

    from release_catalog import load_catalog

    catalog = load_catalog(raw_records)
    catalog.latest()
    catalog.release_data_matching('~> 1.12', allow_pre=False)
"""

from .catalog import get_catalog, is_catalog_loaded, load_catalog, load_catalog_from_settings
from .normalizer import Asset, ReleaseDetail, ReleaseIndex, build_index
from .query import ReleaseKind, ReleaseQuery
from .versioning import VersionRequirement, is_prerelease_version, parse_requirement, parse_version

__all__ = [
    'Asset',
    'ReleaseDetail',
    'ReleaseIndex',
    'ReleaseKind',
    'ReleaseQuery',
    'VersionRequirement',
    'build_index',
    'get_catalog',
    'is_catalog_loaded',
    'is_prerelease_version',
    'load_catalog',
    'load_catalog_from_settings',
    'parse_requirement',
    'parse_version',
]
