from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..classes.enums import AirDefenseRange, Amount, AmountN, UnitFamily
from ..classes.intervals import MinMaxD, MinMaxI
from ..misc.diagnostics import DiagnosticsLog
from ..misc.logger import SortieLogger, create_logger
from ..misc.math_utils import clamp_min, percent_to_fraction
from ..parsers.ini_reader import SettingsDocument
from .paths import (
    AIR_DEFENSE_DOCUMENT,
    COMMON_DOCUMENT,
    NAMES_DOCUMENT,
    OBJECTIVES_DOCUMENT,
    DatabasePaths,
)
from .tables import CategoryTable
from .validation import (
    AdvisoryAssetMissing,
    DatabaseLoadError,
    InvalidTemplateError,
    validate_mission_name_template,
    validate_non_empty,
    validate_non_empty_sequence,
    validate_waypoint_template,
)

# Number of $Pn$ parts in random mission names
MISSION_NAMES_PART_COUNT = 4

# Unit briefing names are (singular, plural)
UNIT_BRIEFING_NAME_COUNT = 2


@dataclass(frozen=True)
class AirDefenseInfo:
    """
    Enemy surface-to-air defense density for one AmountN level.

    groups_in_area: how many groups of each range tier to spawn around the
    objectives. skip_chance: probability (0..1) that a group is skipped.
    """
    groups_in_area: CategoryTable[AirDefenseRange, MinMaxI]
    skip_chance: float

    @classmethod
    def from_document(cls, ini: SettingsDocument, level: AmountN) -> "AirDefenseInfo":
        groups = CategoryTable.build(
            AirDefenseRange,
            lambda tier: ini.get_value(
                "EnemyAirDefense", f"{level.key}.GroupsInArea.{tier.key}", MinMaxI
            ),
        )
        skip_chance = percent_to_fraction(
            ini.get_value("EnemyAirDefense", f"{level.key}.SkipChance", int)
        )
        return cls(groups_in_area=groups, skip_chance=skip_chance)


@dataclass(frozen=True)
class WaypointNames:
    """Names of the player flight plan waypoints."""
    final: str
    initial: str
    navigation: str
    objectives: Tuple[str, ...]

    def objective_name(self, index: int) -> str:
        """Name for the index-th objective, wrapping around the list."""
        return self.objectives[index % len(self.objectives)]


@dataclass(frozen=True)
class CommonSettings:
    """
    Resolved common settings for mission generation.

    Built once by :func:`load_common_settings` and never modified after;
    share it freely between readers. Distances are in nautical miles.
    """
    objective_spacing: CategoryTable[Amount, int]
    takeoff_to_first_objective: CategoryTable[Amount, int]
    air_defense_presence: CategoryTable[AmountN, AirDefenseInfo]
    air_defense_min_distance_from_takeoff: CategoryTable[AirDefenseRange, int]
    air_defense_distance_from_objectives: CategoryTable[AirDefenseRange, MinMaxD]
    cap_distance_from_objectives: MinMaxD
    cap_min_distance_from_takeoff: int
    cap_relative_power: CategoryTable[AmountN, float]
    mission_name_template: str
    mission_name_parts: Tuple[Tuple[str, ...], ...]
    unit_family_display_names: CategoryTable[UnitFamily, Tuple[str, str]]
    unit_family_group_name_template: CategoryTable[UnitFamily, str]
    waypoint_names: WaypointNames
    included_audio_assets: Tuple[str, ...]

    @classmethod
    def load(cls, paths: Optional[DatabasePaths] = None,
             diagnostics: Optional[DiagnosticsLog] = None,
             verbose: bool = False) -> "CommonSettings":
        return load_common_settings(paths, diagnostics, verbose)

    def get_unit_display_name(self, family: UnitFamily, plural: bool = False) -> str:
        singular_name, plural_name = self.unit_family_display_names[family]
        return plural_name if plural else singular_name


def _load_included_assets(ini: SettingsDocument, paths: DatabasePaths,
                          diagnostics: DiagnosticsLog) -> Tuple[str, ...]:
    assets = tuple(ini.get_value_array("Include", "CommonOgg"))
    for asset in assets:
        if not paths.ogg_file(asset).is_file():
            diagnostics.warning(
                f"File \"Include/Ogg/{asset}.ogg\" doesn't exist.", indent=1,
                category=AdvisoryAssetMissing,
            )
    return assets


def _load_air_defense(ini: SettingsDocument) -> dict:
    cap_section = "EnemyCombatAirPatrols"
    range_section = "EnemyAirDefenseRange"

    def relative_power(level: AmountN) -> float:
        # No CAP means no relative power, whatever the document says
        if level is AmountN.NONE:
            return 0.0
        return percent_to_fraction(ini.get_value(cap_section, f"RelativePower.{level.key}", int))

    return dict(
        cap_distance_from_objectives=ini.get_value(cap_section, "DistanceFromObjectives", MinMaxD),
        cap_min_distance_from_takeoff=clamp_min(
            ini.get_value(cap_section, "MinDistanceFromTakeOffLocation", int)
        ),
        air_defense_presence=CategoryTable.build(
            AmountN, lambda level: AirDefenseInfo.from_document(ini, level)
        ),
        cap_relative_power=CategoryTable.build(AmountN, relative_power),
        air_defense_min_distance_from_takeoff=CategoryTable.build(
            AirDefenseRange,
            lambda tier: clamp_min(
                ini.get_value(range_section, f"{tier.key}.MinDistanceFromTakeOffLocation", int)
            ),
        ),
        air_defense_distance_from_objectives=CategoryTable.build(
            AirDefenseRange,
            lambda tier: ini.get_value(range_section, f"{tier.key}.DistanceFromObjectives", MinMaxD),
        ),
    )


def _load_names(ini: SettingsDocument) -> dict:
    document = ini.name

    template = ini.get_value("Mission", "Template", str)
    validate_mission_name_template(template, MISSION_NAMES_PART_COUNT).raise_if_invalid(
        InvalidTemplateError, document, "Mission", "Template"
    )

    parts = []
    for i in range(MISSION_NAMES_PART_COUNT):
        key = f"Part{i + 1}"
        candidates = tuple(ini.get_value_array("Mission", key))
        validate_non_empty_sequence(candidates, f"Mission name part {key}").raise_if_invalid(
            document=document, section="Mission", key=key
        )
        parts.append(candidates)

    def briefing_names(family: UnitFamily) -> Tuple[str, str]:
        names = ini.get_value_array("UnitBriefing", family.key)
        # Exactly (singular, plural); missing entries stay empty
        names = (names + [""] * UNIT_BRIEFING_NAME_COUNT)[:UNIT_BRIEFING_NAME_COUNT]
        return names[0], names[1]

    def group_name(family: UnitFamily) -> str:
        pattern = ini.get_value("UnitGroup", family.key, str)
        validate_non_empty(pattern, f"Group name pattern for {family.key}").raise_if_invalid(
            document=document, section="UnitGroup", key=family.key
        )
        return pattern

    labels = {}
    for key in ("Final", "Initial"):
        labels[key] = ini.get_value("Waypoints", key, str)
        validate_non_empty(labels[key], f"{key} waypoint name").raise_if_invalid(
            document=document, section="Waypoints", key=key
        )

    navigation = ini.get_value("Waypoints", "Navigation", str)
    validate_waypoint_template(navigation).raise_if_invalid(
        InvalidTemplateError, document, "Waypoints", "Navigation"
    )

    objectives = tuple(ini.get_value_array("Waypoints", "Objectives"))
    validate_non_empty_sequence(objectives, "Objective waypoint names").raise_if_invalid(
        document=document, section="Waypoints", key="Objectives"
    )

    return dict(
        mission_name_template=template,
        mission_name_parts=tuple(parts),
        unit_family_display_names=CategoryTable.build(UnitFamily, briefing_names),
        unit_family_group_name_template=CategoryTable.build(UnitFamily, group_name),
        waypoint_names=WaypointNames(
            final=labels["Final"],
            initial=labels["Initial"],
            navigation=navigation,
            objectives=objectives,
        ),
    )


def _load_objectives(ini: SettingsDocument) -> dict:
    section = "DistanceToObjective"
    return dict(
        objective_spacing=CategoryTable.build(
            Amount,
            lambda level: clamp_min(ini.get_value(section, f"{level.key}.DistanceBetweenObjectives", int)),
        ),
        takeoff_to_first_objective=CategoryTable.build(
            Amount,
            lambda level: clamp_min(ini.get_value(section, f"{level.key}.DistanceFromTakeOffLocation", int)),
        ),
    )


def _log_document_read(logger: SortieLogger, ini: SettingsDocument):
    sections = ini.sections()
    key_count = sum(len(ini.keys(section)) for section in sections)
    logger.debug(f"{ini.name}: {key_count} keys in {len(sections)} sections", indent=1)


def load_common_settings(paths: Optional[DatabasePaths] = None,
                         diagnostics: Optional[DiagnosticsLog] = None,
                         verbose: bool = False) -> CommonSettings:
    """
    Load and validate the common settings documents.

    Each document is opened, read and released before the next one. Any
    missing or malformed required value aborts the whole load: the error is
    reported once on the diagnostics log and re-raised, and no settings
    object is returned. Missing audio assets are only reported as warnings.

    Args:
        paths: Database layout; defaults to DatabasePaths.resolve()
        diagnostics: Sink for warnings and errors; a private one is created if None
        verbose: Print progress lines

    Returns:
        Fully populated CommonSettings

    Raises:
        DatabaseLoadError: Any fatal load failure (missing document, missing
            key, malformed value, invalid interval, invalid template)
    """
    if paths is None:
        paths = DatabasePaths.resolve()
    if diagnostics is None:
        diagnostics = DiagnosticsLog(verbose=verbose)
    logger = create_logger(verbose=verbose, name="Database")
    fields = {}

    try:
        logger.info("Loading common global settings...")
        with SettingsDocument.open(paths.document(COMMON_DOCUMENT)) as ini:
            fields["included_audio_assets"] = _load_included_assets(ini, paths, diagnostics)
            _log_document_read(logger, ini)

        logger.info("Loading common enemy air defense settings...")
        with SettingsDocument.open(paths.document(AIR_DEFENSE_DOCUMENT)) as ini:
            fields.update(_load_air_defense(ini))
            _log_document_read(logger, ini)

        logger.info("Loading common names settings...")
        with SettingsDocument.open(paths.document(NAMES_DOCUMENT)) as ini:
            fields.update(_load_names(ini))
            _log_document_read(logger, ini)

        logger.info("Loading common objective settings...")
        with SettingsDocument.open(paths.document(OBJECTIVES_DOCUMENT)) as ini:
            fields.update(_load_objectives(ini))
            _log_document_read(logger, ini)
    except DatabaseLoadError as e:
        diagnostics.error(str(e))
        raise

    settings = CommonSettings(**fields)
    logger.info(f"Common settings loaded from {paths.database_dir}")
    return settings
