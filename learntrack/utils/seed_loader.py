"""
Seed data loader for the learning tracker.

Loads the sample catalog and starting progress from a YAML file.
"""

from pathlib import Path
from typing import Any
import yaml

from learntrack.schemas import Resource, ProgressRecord


# Default seed file (shipped inside the package)
SEED_PATH = Path(__file__).parent.parent / "data" / "seed.yaml"


def load_seed(seed_path: Path | None = None) -> dict[str, Any]:
    """
    Load the raw seed document.

    Args:
        seed_path: Optional custom seed file

    Returns:
        Dict with "resources" and "progress" lists (empty if missing)

    Raises:
        FileNotFoundError: If the seed file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    file_path = seed_path or SEED_PATH

    if not file_path.exists():
        raise FileNotFoundError(f"Seed file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return {
        "resources": data.get("resources") or [],
        "progress": data.get("progress") or [],
    }


def load_resources(seed_path: Path | None = None) -> list[Resource]:
    """Load and validate the catalog resources."""
    seed = load_seed(seed_path)
    return [Resource.model_validate(item) for item in seed["resources"]]


def load_progress(seed_path: Path | None = None) -> list[ProgressRecord]:
    """Load and validate the starting progress records."""
    seed = load_seed(seed_path)
    return [ProgressRecord.model_validate(item) for item in seed["progress"]]
