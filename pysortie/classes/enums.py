"""
Category enumerations used to index the common database tables.

Every enumeration is closed and ordered: a member's value is its canonical
settings-key name (e.g. "VeryLow") and its definition order is its ordinal.
Members of the same enumeration compare by ordinal, so consumers can write
``level >= AmountN.AVERAGE``.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Type, TypeVar

C = TypeVar("C", bound="OrderedCategory")


class OrderedCategory(Enum):
    """Base for categories whose definition order is significant."""

    @property
    def key(self) -> str:
        """Name used to build settings keys (``RelativePower.{key}``)."""
        return self.value

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal >= other.ordinal

    @classmethod
    def from_key(cls: Type[C], key: str) -> C:
        """Look up a member by its settings-key name (case-insensitive)."""
        wanted = key.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"'{key}' is not a valid {cls.__name__}")


class AmountN(OrderedCategory):
    """Relative amount, from nothing at all to very high."""
    NONE = "None"
    VERY_LOW = "VeryLow"
    LOW = "Low"
    AVERAGE = "Average"
    HIGH = "High"
    VERY_HIGH = "VeryHigh"

    def to_amount(self) -> "Amount":
        if self is AmountN.NONE:
            raise ValueError("AmountN.NONE has no Amount counterpart")
        return Amount(self.value)


class Amount(OrderedCategory):
    """Relative amount where "none" is meaningless."""
    VERY_LOW = "VeryLow"
    LOW = "Low"
    AVERAGE = "Average"
    HIGH = "High"
    VERY_HIGH = "VeryHigh"

    def to_amount_n(self) -> AmountN:
        return AmountN(self.value)


class AirDefenseRange(OrderedCategory):
    """Engagement range tier of surface-to-air defenses."""
    SHORT = "Short"
    MEDIUM = "Medium"
    LONG = "Long"


class UnitFamily(OrderedCategory):
    """Family tag of a unit, used for briefing names and group names."""
    HELICOPTER_ATTACK = "HelicopterAttack"
    HELICOPTER_TRANSPORT = "HelicopterTransport"
    HELICOPTER_UTILITY = "HelicopterUtility"
    PLANE_AWACS = "PlaneAWACS"
    PLANE_BOMBER = "PlaneBomber"
    PLANE_FIGHTER = "PlaneFighter"
    PLANE_INTERCEPTOR = "PlaneInterceptor"
    PLANE_SEAD = "PlaneSEAD"
    PLANE_STRIKE = "PlaneStrike"
    PLANE_TANKER = "PlaneTanker"
    PLANE_TRANSPORT = "PlaneTransport"
    SHIP_CARRIER = "ShipCarrier"
    SHIP_CRUISER = "ShipCruiser"
    SHIP_FRIGATE = "ShipFrigate"
    SHIP_SPEEDBOAT = "ShipSpeedboat"
    SHIP_TRANSPORT = "ShipTransport"
    STATIC_STRUCTURE_MILITARY = "StaticStructureMilitary"
    STATIC_STRUCTURE_PRODUCTION = "StaticStructureProduction"
    VEHICLE_AAA = "VehicleAAA"
    VEHICLE_APC = "VehicleAPC"
    VEHICLE_ARTILLERY = "VehicleArtillery"
    VEHICLE_INFANTRY = "VehicleInfantry"
    VEHICLE_MBT = "VehicleMBT"
    VEHICLE_MISSILE = "VehicleMissile"
    VEHICLE_SAM_LONG = "VehicleSAMLong"
    VEHICLE_SAM_MEDIUM = "VehicleSAMMedium"
    VEHICLE_SAM_SHORT = "VehicleSAMShort"
    VEHICLE_TRANSPORT = "VehicleTransport"


def enum_count(category: Type[OrderedCategory]) -> int:
    """Number of members in a category enumeration."""
    return len(category)


def ordered_members(category: Type[C]) -> List[C]:
    """Members of a category enumeration in ordinal order."""
    return list(category)
