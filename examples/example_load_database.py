"""
Example: Loading the common settings database.

This example loads the settings documents shipped with pysortie (or the ones
under $PYSORTIE_ROOT), prints a few resolved values and shows how load
failures and asset warnings are reported.
"""

import sys

from pysortie import (
    AirDefenseRange,
    Amount,
    AmountN,
    DatabaseLoadError,
    DatabasePaths,
    DiagnosticsLog,
    UnitFamily,
    load_common_settings,
)
from pysortie.misc.math_utils import nautical_miles_to_meters


def main(root=None):
    paths = DatabasePaths.resolve(root)
    diagnostics = DiagnosticsLog()

    try:
        settings = load_common_settings(paths, diagnostics, verbose=True)
    except DatabaseLoadError as e:
        print(f"❌ Database load failed: {e}")
        return 1

    if diagnostics.warning_count:
        print(f"⚠️  Loaded with {diagnostics.warning_count} warning(s)")
    else:
        print("✅ Loaded without warnings")

    print("\nEnemy CAP relative power:")
    for level, power in settings.cap_relative_power.items():
        print(f"  {level.key:<9} {power:.0%}")

    spacing = settings.objective_spacing[Amount.AVERAGE]
    print(f"\nAverage objective spacing: {spacing} nm ({nautical_miles_to_meters(spacing):.0f} m)")

    long_range = settings.air_defense_distance_from_objectives[AirDefenseRange.LONG]
    print(f"Long range SAMs: {long_range.min:g}-{long_range.max:g} nm from objectives")

    heavy = settings.air_defense_presence[AmountN.VERY_HIGH]
    print(f"Very high air defense skip chance: {heavy.skip_chance:.0%}")

    print(f"\nMission name template: {settings.mission_name_template}")
    print(f"SAM briefing name: {settings.get_unit_display_name(UnitFamily.VEHICLE_SAM_LONG, plural=True)}")

    diagnostics.export("./output/database_load.log")
    print("\nDiagnostics written to ./output/database_load.log")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
