"""
Function Package Builder for Terraform Deployment.

This module builds ZIP packages for the echo function on every registered
hosting trigger BEFORE Terraform runs, so Terraform can reference the
pre-built packages.

Each package holds the adapter entry file at the archive root plus the
shared `multicloud_echo.core` sources, so every cloud runs the same Handler:

    lambda_function.py | main.py
    multicloud_echo/__init__.py
    multicloud_echo/core/*.py
    requirements.txt            (only when the trigger declares requirements)

Entries are written with a fixed timestamp so unchanged sources produce
byte-identical archives (stable source hashes for Terraform).
"""

import logging
import zipfile
from pathlib import Path
from typing import Dict, Iterator, Tuple

from multicloud_echo import constants as CONSTANTS
from multicloud_echo.core.exceptions import ConfigurationError
from multicloud_echo.core.protocols import HostingTrigger
from multicloud_echo.providers import get_trigger, list_triggers

logger = logging.getLogger(__name__)

FIXED_ZIP_DATE = (1980, 1, 1, 0, 0, 0)


def _is_excluded(path: Path) -> bool:
    if path.suffix in CONSTANTS.PACKAGE_EXCLUDE_SUFFIXES:
        return True
    return any(part in CONSTANTS.PACKAGE_EXCLUDE_DIRS for part in path.parts)


def _iter_core_files() -> Iterator[Tuple[Path, str]]:
    """Yield (source path, archive name) for the shared core sources."""
    package_root = CONSTANTS.PACKAGE_ROOT
    yield package_root / "__init__.py", "multicloud_echo/__init__.py"

    for file_path in sorted(CONSTANTS.CORE_PACKAGE_DIR.rglob("*.py")):
        if _is_excluded(file_path.relative_to(package_root)):
            continue
        arcname = f"multicloud_echo/{file_path.relative_to(package_root).as_posix()}"
        yield file_path, arcname


def _write_entry(zf: zipfile.ZipFile, arcname: str, data: bytes) -> None:
    info = zipfile.ZipInfo(arcname, date_time=FIXED_ZIP_DATE)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    zf.writestr(info, data)


def get_package_path(build_dir: Path, trigger: HostingTrigger) -> Path:
    """Get the path of a trigger's ZIP (for Terraform variable references)."""
    return Path(build_dir) / trigger.provider / f"{trigger.name}.zip"


def build_trigger_package(trigger: HostingTrigger, build_dir: Path) -> Path:
    """
    Build the deployment ZIP for one hosting trigger.

    Args:
        trigger: The hosting trigger to package
        build_dir: Root build directory (packages go to <build_dir>/<provider>/)

    Returns:
        Path to the written ZIP

    Raises:
        ConfigurationError: If the trigger's adapter source is missing
    """
    source_file = trigger.source_file
    if not source_file.is_file():
        raise ConfigurationError("Adapter source not found", config_file=str(source_file))

    zip_path = get_package_path(build_dir, trigger)
    zip_path.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zf:
        _write_entry(zf, trigger.archive_entry_name, source_file.read_bytes())

        for file_path, arcname in _iter_core_files():
            _write_entry(zf, arcname, file_path.read_bytes())

        if trigger.requirements:
            requirements = "\n".join(trigger.requirements) + "\n"
            _write_entry(zf, CONSTANTS.REQUIREMENTS_FILE, requirements.encode("utf-8"))

    logger.info(f"  ✓ Built: {zip_path.name} ({trigger.provider})")
    return zip_path


def build_all_packages(build_dir: Path) -> Dict[str, Path]:
    """
    Build packages for every registered hosting trigger.

    Returns:
        Dict mapping trigger names to ZIP paths
    """
    build_dir = Path(build_dir)
    build_dir.mkdir(parents=True, exist_ok=True)

    packages = {}
    for name in list_triggers():
        packages[name] = build_trigger_package(get_trigger(name), build_dir)

    logger.info(f"✓ Built {len(packages)} function packages")
    return packages
