"""
E2E Test Fixtures.

Provides fixtures for end-to-end testing of the deployed echo function.
These tests deploy REAL resources and incur costs.

Run with: pytest -m live -s
"""
from pathlib import Path

import pytest

from multicloud_echo.package_builder import build_all_packages


@pytest.fixture(scope="session")
def repo_root():
    """Repository root holding the infrastructure/ Terraform modules."""
    return Path(__file__).parent.parent.parent


@pytest.fixture(scope="session")
def built_packages(tmp_path_factory):
    """
    Build every function ZIP once per session.

    Returns:
        Dict mapping trigger names to ZIP paths
    """
    build_dir = tmp_path_factory.mktemp("packages")
    packages = build_all_packages(build_dir)
    print(f"\n[E2E] Built packages: {', '.join(str(p) for p in packages.values())}")
    return packages
