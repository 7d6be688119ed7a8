"""
pnpm-lock.yaml parser.

Turns raw lockfile content into a validated ``Lockfile``. Only schema
major version 9 is accepted; any other version is rejected before the
importers are looked at.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..config import SUPPORTED_LOCKFILE_MAJOR
from ..core.errors import (
    LockfileNotFoundError,
    LockfileParseError,
    UnsupportedSchemaError,
)
from ..core.types import Lockfile, major_version

logger = logging.getLogger(__name__)


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def parse_lockfile(content: str, source: str = "<string>") -> Lockfile:
    """
    Parse lockfile content.

    Args:
        content: Raw YAML text of a pnpm-lock.yaml file.
        source: Label used in error messages.

    Returns:
        Lockfile: Validated lockfile with importer paths bound.

    Raises:
        LockfileParseError: If the content is not YAML or does not match
            the expected structure.
        UnsupportedSchemaError: If ``lockfileVersion`` is not 9.x.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise LockfileParseError(source, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise LockfileParseError(source, "expected a mapping at the document root")

    # Check the schema version before validating anything else
    raw_version = data.get("lockfileVersion")
    if raw_version is None:
        raise LockfileParseError(source, "missing 'lockfileVersion'")
    version = str(raw_version).strip()
    if major_version(version) != str(SUPPORTED_LOCKFILE_MAJOR):
        raise UnsupportedSchemaError(version, SUPPORTED_LOCKFILE_MAJOR)

    try:
        lock = Lockfile.model_validate(data)
    except ValidationError as e:
        raise LockfileParseError(source, _format_validation_error(e)) from e

    logger.debug(
        f"Parsed {source} (v{lock.lockfile_version}) with {len(lock.importers)} importers"
    )
    return lock


def load_lockfile(path: Path) -> Lockfile:
    """
    Read and parse a lockfile from disk.

    Raises:
        LockfileNotFoundError: If ``path`` does not exist.
        LockfileParseError: If the file cannot be read or parsed.
        UnsupportedSchemaError: If the schema version is not supported.
    """
    if not path.exists():
        raise LockfileNotFoundError(str(path))

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LockfileParseError(str(path), f"unreadable: {e}") from e

    return parse_lockfile(content, source=str(path))
