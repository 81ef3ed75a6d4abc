"""Settings for reading, writing and editing SLA documents.

Settings live in a small dataclass with sensible defaults. A YAML file can
override any of them:

    # slakit.yaml
    indent: "  "
    keep_unknown: true
    text_frame_types: ["4"]
    picture_frame_types: ["2"]

Usage:
    >>> config = SLAConfig.from_yaml(Path("slakit.yaml"))
    >>> doc = SLAParser(config).parse_file(Path("flyer.sla"))
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

# Scribus item types (PageItem::ItemType)
PTYPE_IMAGE_FRAME = "2"
PTYPE_TEXT_FRAME = "4"


@dataclass(frozen=True)
class SLAConfig:
    """
    Parser, writer and editor settings.

    Attributes:
        indent: Indentation unit for written files (Scribus writes one space)
        keep_unknown: Keep attributes and elements the schema does not declare
        text_frame_types: PTYPE values accepted by text operations
        picture_frame_types: PTYPE values accepted by image operations
        encoding: Encoding of written files
    """

    indent: str = " "
    keep_unknown: bool = True
    text_frame_types: Tuple[str, ...] = (PTYPE_TEXT_FRAME,)
    picture_frame_types: Tuple[str, ...] = (PTYPE_IMAGE_FRAME,)
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SLAConfig":
        """
        Build settings from a plain dictionary.

        Args:
            data: Mapping of setting name to value

        Returns:
            SLAConfig with the given overrides applied

        Raises:
            ValueError: If a key is not a known setting or a value has the
                wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown config keys: {', '.join(unknown)}. "
                f"Supported: {', '.join(sorted(known))}"
            )

        values = dict(data)
        for key in ("indent", "encoding"):
            if key in values and not isinstance(values[key], str):
                raise ValueError(f"{key} must be a string, got {values[key]!r}")
        if "indent" in values and values["indent"].strip():
            raise ValueError(f"indent must be whitespace only, got {values['indent']!r}")
        if "encoding" in values:
            try:
                codecs.lookup(values["encoding"])
            except LookupError as e:
                raise ValueError(f"Unknown encoding: {values['encoding']!r}") from e
        if "keep_unknown" in values and not isinstance(values["keep_unknown"], bool):
            raise ValueError(f"keep_unknown must be true or false, got {values['keep_unknown']!r}")
        for key in ("text_frame_types", "picture_frame_types"):
            if key in values:
                values[key] = _ptype_list(key, values[key])
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Path) -> "SLAConfig":
        """
        Load settings from a YAML file.

        An empty file yields the defaults.

        Args:
            path: YAML file path

        Returns:
            SLAConfig

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file holds anything but a mapping of settings
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        logger.debug(f"Loaded config from {path}")
        return cls.from_dict(data)

    def with_overrides(self, **overrides: Any) -> "SLAConfig":
        """Return a copy with some settings replaced."""
        return replace(self, **overrides)

    def is_text_frame(self, ptype: Optional[str]) -> bool:
        return ptype in self.text_frame_types

    def is_picture_frame(self, ptype: Optional[str]) -> bool:
        return ptype in self.picture_frame_types


def _ptype_list(key: str, value: Any) -> Tuple[str, ...]:
    """Normalise a list of PTYPE values (YAML may give ints) to strings."""
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key} must be a list of PTYPE values, got {value!r}")
    ptypes = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            raise ValueError(f"{key} entries must be strings or integers, got {item!r}")
        ptypes.append(str(item))
    return tuple(ptypes)


DEFAULT_CONFIG = SLAConfig()
