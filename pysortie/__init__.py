__version__ = "0.1.0"

# --- Common Database ---
from .database import (
    CommonSettings,
    DatabasePaths,
    CategoryTable,
    AirDefenseInfo,
    WaypointNames,
    load_common_settings,
    DatabaseLoadError,
    MissingDocumentError,
    MalformedValueError,
    InvalidIntervalError,
    MissingCategoryMemberError,
    AdvisoryAssetMissing,
)

# --- Category Enumerations ---
from .classes.enums import Amount, AmountN, AirDefenseRange, UnitFamily
from .classes.intervals import MinMaxD, MinMaxI

# --- Settings Reader ---
from .parsers.ini_reader import SettingsDocument

# --- Diagnostics ---
from .misc.diagnostics import DiagnosticsLog

from .misc.logger import create_logger
_logger = create_logger(verbose=False, name="pysortie")
_logger.info(f"pysortie {__version__} loaded.")
