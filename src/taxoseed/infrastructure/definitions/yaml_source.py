"""YAML definition source - reads the taxonomy data directory."""

from pathlib import Path
from typing import Any

import structlog
import yaml

from taxoseed.domain.exceptions import NotFound, ValidationError

logger = structlog.get_logger(__name__)

ATTRIBUTES_FILE = Path("attributes") / "attributes.yml"
CATEGORIES_DIR = "categories"


def _load_list(path: Path) -> list[Any]:
    """Load a YAML document that must be a list of records."""
    if not path.is_file():
        raise NotFound(f"Definition file not found: {path}")
    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValidationError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(data, list):
        raise ValidationError(f"{path}: expected a list of definitions")
    return data


class YamlDefinitionSource:
    """Definition source over ``<data_dir>/attributes`` and ``<data_dir>/categories``.

    Category files are read in file-name order, one file per vertical.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def attributes_path(self) -> Path:
        return self._data_dir / ATTRIBUTES_FILE

    def category_paths(self) -> list[Path]:
        return sorted((self._data_dir / CATEGORIES_DIR).glob("*.yml"))

    def load_properties(self) -> list[dict[str, Any]]:
        data = _load_list(self.attributes_path)
        logger.debug("definitions_loaded", path=str(self.attributes_path), records=len(data))
        return data

    def load_category_files(self) -> list[list[dict[str, Any]]]:
        paths = self.category_paths()
        if not paths:
            raise NotFound(f"No category definitions in {self._data_dir / CATEGORIES_DIR}")
        files = [_load_list(p) for p in paths]
        logger.debug(
            "definitions_loaded",
            path=str(self._data_dir / CATEGORIES_DIR),
            files=len(files),
            records=sum(len(f) for f in files),
        )
        return files
