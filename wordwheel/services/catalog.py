"""
Level catalog backed by a YAML or JSON level file.

Levels are validated on load; a level that breaks the level invariants never
reaches the engine. Fetching an unknown id (or fetching from a catalog that
failed to load) falls back to the built-in bootstrap level so there is always
something playable.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from ..engine.models import Level


logger = logging.getLogger(__name__)

_DATA_FILE = Path(__file__).parent / "data" / "levels.yaml"


class LevelInvariantError(ValueError):
    """A level definition violates the level invariants."""


BOOTSTRAP_LEVEL = Level(
    id=1000001,
    realm="Tree Library",
    base_letters="RETAIN",
    solutions={
        "RETAIN": [0, 1, 2, 3, 4, 5],
        "TRAIN": [2, 0, 3, 4, 5],
        "INTER": [4, 5, 2, 1, 0],
        "INERT": [4, 5, 1, 0, 2],
        "RAIN": [0, 3, 4, 5],
        "RATE": [0, 3, 2, 1],
        "TEAR": [2, 1, 3, 0],
        "TIRE": [2, 4, 0, 1],
        "NEAR": [5, 1, 3, 0],
        "NEAT": [5, 1, 3, 2],
        "ANT": [3, 5, 2],
        "ART": [3, 0, 2],
        "ATE": [3, 2, 1],
        "EAR": [1, 3, 0],
        "EAT": [1, 3, 2],
        "NET": [5, 1, 2],
        "RAN": [0, 3, 5],
        "RAT": [0, 3, 2],
        "TAN": [2, 3, 5],
        "TAR": [2, 3, 0],
        "TEA": [2, 1, 3],
        "TEN": [2, 1, 5],
        "TIE": [2, 4, 1],
    },
    bonus_words=["RET", "REI", "ETA", "ERA", "ANE", "ANI", "IRE", "NIT"],
)


def parse_level(data: Dict[str, Any]) -> Level:
    """Build a Level from raw catalog data, raising LevelInvariantError if it is malformed."""
    try:
        return Level(**data)
    except ValidationError as e:
        level_id = data.get("id", "?")
        raise LevelInvariantError(f"Level {level_id} rejected: {e}") from e


def read_level_file(path: Path) -> List[Dict[str, Any]]:
    """Read raw level entries from a `.json` or YAML file."""
    with open(path) as f:
        if path.suffix == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("levels", [])
    if not isinstance(data, list):
        raise ValueError(f"Level file {path} must contain a list of levels")
    return data


class StaticLevelCatalog:
    """
    Catalog holding a fixed, ordered set of levels.

    Attributes:
        levels: Levels by id, in catalog declaration order
        bootstrap: Level served when a fetch cannot be satisfied
    """

    def __init__(self, levels: Iterable[Level] = (), bootstrap: Level = BOOTSTRAP_LEVEL):
        self.bootstrap = bootstrap
        self.levels: Dict[int, Level] = {}
        for level in levels:
            if level.id in self.levels:
                logger.warning("Duplicate level id %d; keeping the first definition", level.id)
                continue
            self.levels[level.id] = level

    @classmethod
    def from_file(cls, path: Optional[str] = None, strict: bool = False) -> "StaticLevelCatalog":
        """
        Load a catalog from a level file (the bundled file by default).

        Invalid levels are dropped with a warning, or raise LevelInvariantError
        when `strict` is set. A file that cannot be read yields an empty
        catalog that only serves the bootstrap level.
        """
        source = Path(path) if path else _DATA_FILE
        try:
            entries = read_level_file(source)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error("Could not load level catalog %s: %s", source, e)
            return cls()

        levels: List[Level] = []
        for entry in entries:
            try:
                levels.append(parse_level(entry))
            except LevelInvariantError as e:
                if strict:
                    raise
                logger.warning("%s", e)

        logger.info("Loaded %d levels from %s", len(levels), source)
        return cls(levels)

    @property
    def ordered_level_ids(self) -> List[int]:
        return list(self.levels)

    def validate_level_id(self, level_id: int) -> bool:
        return level_id in self.levels or level_id == self.bootstrap.id

    def fetch_level(self, level_id: int) -> Level:
        """Return the level with `level_id`, or the bootstrap level if it is unknown."""
        if level_id == self.bootstrap.id:
            return self.bootstrap
        level = self.levels.get(level_id)
        if level is None:
            logger.warning("Level %d not in catalog; using bootstrap level", level_id)
            return self.bootstrap
        return level

    def next_level_id(self, after: int) -> Optional[int]:
        """Id following `after` in catalog order; None at the end or for unknown ids."""
        ids = self.ordered_level_ids
        if after not in self.levels:
            return ids[0] if ids and after == self.bootstrap.id else None
        position = ids.index(after)
        return ids[position + 1] if position + 1 < len(ids) else None
