"""
Common database for procedural mission generation.

Loads the shared settings documents (names, enemy air defense tuning,
objective distances, included assets) into an immutable CommonSettings
table that the mission generator reads from.
"""

from .validation import (
    DatabaseLoadError,
    MissingDocumentError,
    MalformedValueError,
    MissingKeyError,
    InvalidTemplateError,
    InvalidIntervalError,
    MissingCategoryMemberError,
    AdvisoryAssetMissing,
)
from .tables import CategoryTable
from .paths import DatabasePaths
from .common import (
    MISSION_NAMES_PART_COUNT,
    AirDefenseInfo,
    WaypointNames,
    CommonSettings,
    load_common_settings,
)

__all__ = [
    "DatabaseLoadError",
    "MissingDocumentError",
    "MalformedValueError",
    "MissingKeyError",
    "InvalidTemplateError",
    "InvalidIntervalError",
    "MissingCategoryMemberError",
    "AdvisoryAssetMissing",
    "CategoryTable",
    "DatabasePaths",
    "MISSION_NAMES_PART_COUNT",
    "AirDefenseInfo",
    "WaypointNames",
    "CommonSettings",
    "load_common_settings",
]
