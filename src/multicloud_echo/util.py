"""
Small helpers shared by the tooling and the live tests.
"""

import random
import string
from typing import Iterable, Optional

# Lowercase only: GCP function and bucket names reject uppercase letters
UNIQUE_ID_ALPHABET = string.digits + string.ascii_lowercase


def unique_id(length: int = 6) -> str:
    """
    Return a short random ID for resource names.

    Example:
        >>> f"multicloud-echo-aws-{unique_id()}"
        'multicloud-echo-aws-a7bx9q'
    """
    if length < 1:
        raise ValueError("length must be positive")
    return "".join(random.choice(UNIQUE_ID_ALPHABET) for _ in range(length))


def get_random_region(
    candidates: Iterable[str],
    exclude: Optional[Iterable[str]] = None
) -> str:
    """
    Pick a random region from candidates, skipping excluded ones.

    Args:
        candidates: Region names to choose from
        exclude: Region names that must not be picked

    Returns:
        One of the remaining regions

    Raises:
        ValueError: If no region is left after exclusion
    """
    excluded = set(exclude or [])
    remaining = [region for region in candidates if region not in excluded]
    if not remaining:
        raise ValueError("No region left to choose from after applying exclusions")
    return random.choice(remaining)
