"""Learning tracker utilities."""

from .seed_loader import load_seed, load_resources, load_progress, SEED_PATH

__all__ = ["load_seed", "load_resources", "load_progress", "SEED_PATH"]
