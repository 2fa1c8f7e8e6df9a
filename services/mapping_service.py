# ============================================================================
# MAPPING SERVICE
# ============================================================================
# STATUS: Services - Mapping document loading
# PURPOSE: Load and cache mapping documents from YAML
# CREATED: 16 OCT 2026
# ============================================================================
"""
Mapping Service

Loads mapping documents from YAML files or strings and validates them
into MappingDocument models. Loaded files are cached by resolved path.

Every failure (unreadable file, malformed YAML, schema violation,
structural problem) is raised as MappingLoadError naming the source.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from core.errors import MappingLoadError
from core.models import MappingDocument

logger = logging.getLogger(__name__)


class MappingService:
    """Service for loading mapping documents."""

    def __init__(self, mappings_dir: Optional[str] = None):
        """
        Initialize mapping service.

        Args:
            mappings_dir: Directory searched by load_all(). Defaults to ./mappings/
        """
        if mappings_dir:
            self.mappings_dir = Path(mappings_dir)
        else:
            self.mappings_dir = Path.cwd() / "mappings"

        self._cache: Dict[str, MappingDocument] = {}

    def load(self, path: Union[str, Path]) -> MappingDocument:
        """
        Load a mapping document from a YAML file.

        Args:
            path: Path to YAML file

        Returns:
            MappingDocument instance

        Raises:
            MappingLoadError: file missing or invalid
        """
        path = Path(path)
        key = str(path.resolve())
        if key in self._cache:
            return self._cache[key]

        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise MappingLoadError(f"Cannot read mapping file {path}: {e}", source=str(path)) from e

        document = self.loads(text, source=str(path))
        self._cache[key] = document
        logger.info(
            f"Loaded mapping {path.name}: {len(document.classes)} classes, "
            f"{len(document.key_generators)} key generators"
        )
        return document

    def loads(self, text: str, source: str = "<string>") -> MappingDocument:
        """
        Parse a mapping document from YAML text.

        Args:
            text: YAML content
            source: Name used in error messages

        Returns:
            MappingDocument instance

        Raises:
            MappingLoadError: malformed YAML or invalid document
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MappingLoadError(f"Malformed YAML in {source}: {e}", source=source) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise MappingLoadError(
                f"Mapping in {source} must be a YAML mapping, got {type(data).__name__}",
                source=source,
            )

        try:
            document = MappingDocument(**data)
        except ValidationError as e:
            raise MappingLoadError(f"Invalid mapping in {source}: {e}", source=source) from e

        # Validate structure
        errors = document.validate_structure()
        if errors:
            raise MappingLoadError(f"Invalid mapping in {source}: {errors}", source=source)

        return document

    def load_all(self) -> List[MappingDocument]:
        """
        Load every *.yaml / *.yml file of the mappings directory.

        Returns:
            Loaded documents, sorted by file name

        Raises:
            MappingLoadError: on the first invalid file
        """
        if not self.mappings_dir.exists():
            logger.warning(f"Mappings directory not found: {self.mappings_dir}")
            return []

        files = sorted(
            list(self.mappings_dir.glob("*.yaml")) + list(self.mappings_dir.glob("*.yml"))
        )
        documents = [self.load(path) for path in files]
        logger.info(f"Loaded {len(documents)} mappings from {self.mappings_dir}")
        return documents

    def clear_cache(self) -> None:
        self._cache.clear()


__all__ = ["MappingService"]
