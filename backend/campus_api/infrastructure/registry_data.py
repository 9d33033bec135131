"""Registry Data File — loads and saves the course registry as a JSON snapshot.

Invariants:
    - No path, or a path that does not exist yet → built-in seed catalogue
    - Saving writes to a temp file first, then replaces the target
"""

import json
import logging
from pathlib import Path

from campus_api.core.registry_seed import build_seed_departments
from campus_api.core.registry_store import RegistryStore

logger = logging.getLogger(__name__)


def load_registry(path: str | None) -> RegistryStore:
    """Build the registry store from a data file or the seed catalogue."""
    if not path or not Path(path).is_file():
        store = RegistryStore(build_seed_departments())
        logger.info(f"Registry loaded from seed catalogue ({len(store)} departments)")
        return store

    with open(path, encoding="utf-8") as f:
        snapshot = json.load(f)
    store = RegistryStore.from_snapshot(snapshot)
    logger.info(f"Registry loaded from {path} ({len(store)} departments)")
    return store


def save_registry(store: RegistryStore, path: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_suffix(target.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(store.to_snapshot(), f, ensure_ascii=False, indent=2)
    tmp.replace(target)
    logger.info(f"Registry saved to {path}")
