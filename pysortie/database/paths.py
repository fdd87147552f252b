"""Locations of the settings documents and included assets."""
from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional, Union

ROOT_ENV_VAR = "PYSORTIE_ROOT"

COMMON_DOCUMENT = "Common.ini"
AIR_DEFENSE_DOCUMENT = "EnemyAirDefense.ini"
NAMES_DOCUMENT = "Names.ini"
OBJECTIVES_DOCUMENT = "Objectives.ini"


def get_bundled_root() -> Path:
    """Root of the default database shipped inside the package."""
    return Path(str(resources.files("pysortie") / "resources"))


@dataclass(frozen=True)
class DatabasePaths:
    """
    Directory layout under a database root::

        <root>/Database/*.ini
        <root>/Include/Ogg/*.ogg
    """
    root: Path

    def __post_init__(self):
        object.__setattr__(self, "root", Path(self.root))

    @classmethod
    def resolve(cls, root: Optional[Union[str, Path]] = None) -> "DatabasePaths":
        """
        Pick the database root.

        Order: explicit root, then the PYSORTIE_ROOT environment variable,
        then the defaults bundled with the package.
        """
        if root:
            return cls(Path(root))
        env_root = os.getenv(ROOT_ENV_VAR)
        if env_root:
            return cls(Path(os.path.normpath(env_root)))
        return cls(get_bundled_root())

    @property
    def database_dir(self) -> Path:
        return self.root / "Database"

    @property
    def include_dir(self) -> Path:
        return self.root / "Include"

    @property
    def include_ogg_dir(self) -> Path:
        return self.include_dir / "Ogg"

    def document(self, name: str) -> Path:
        return self.database_dir / name

    def ogg_file(self, asset: str) -> Path:
        return self.include_ogg_dir / f"{asset}.ogg"
