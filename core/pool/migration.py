"""
Progress record (de)serialization and schema migration.

Records are JSON-shaped dicts stored by the progress store. Two shapes are
accepted on load:

- version 2: the current record written by progress_to_record()
- version 1 / unversioned: the browser-era record (`studiedIdxs`,
  `selectedIdxs`, `nextNewPtr`, ...), where chunk mode was implied by a
  pool larger than CHUNK_CAP or by existing groups

Missing or malformed fields are backfilled with defaults (empty lists,
poolSize 0, display flags True, round 1); loading never fails.
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from core.pool.constants import CHUNK_CAP, SCHEMA_VERSION
from core.pool.pool_types import ChunkRotation, ProgressState, Regime, SmallPool


# Current key -> legacy key
_LEGACY_KEYS = {
    "studiedIndices": "studiedIdxs",
    "selectedIndices": "selectedIdxs",
    "newItemCursor": "nextNewPtr",
}


def progress_to_record(state: ProgressState) -> dict[str, Any]:
    """
    Serialize a progress state to its persisted record.
    """
    regime = state.regime
    if isinstance(regime, ChunkRotation):
        current_set = list(regime.current_set) if regime.current_set is not None else None
        selected: list[int] = []
        pool_size = len(current_set or [])
        groups = [list(group) for group in regime.groups]
        cursor = regime.new_item_cursor
        new_item_pool = list(regime.new_item_pool)
    else:
        current_set = None
        selected = list(regime.selected)
        pool_size = regime.pool_size
        groups = []
        cursor = 0
        new_item_pool = []

    return {
        "version": SCHEMA_VERSION,
        "studiedIndices": list(state.studied),
        "selectedIndices": selected,
        "poolSize": pool_size,
        "groups": groups,
        "reservoir": state.reservoir,
        "newItemCursor": cursor,
        "newItemPool": new_item_pool,
        "currentSet": current_set,
        "chunkModeEnabled": state.chunk_mode_enabled,
        "round": state.round,
        "showReading": state.show_reading,
        "showMeaning": state.show_meaning,
    }


def migrate_progress(raw: Any) -> ProgressState:
    """
    Build a ProgressState from any stored record shape.

    Args:
        raw: Record as read from the store (may be None or malformed)

    Returns:
        ProgressState with every field backfilled
    """
    if raw is None:
        return ProgressState()
    if not isinstance(raw, dict):
        logger.warning("Discarding malformed progress record of type {}", type(raw).__name__)
        return ProgressState()

    version = raw.get("version")
    if version != SCHEMA_VERSION:
        logger.info("Migrating progress record from version {} to {}", version or 1, SCHEMA_VERSION)

    studied = _index_list(_get(raw, "studiedIndices"), "studiedIndices")
    selected = _index_list(_get(raw, "selectedIndices"), "selectedIndices")
    groups = _group_list(raw.get("groups"))
    current_set = _optional_index_list(raw.get("currentSet"))
    pool_size = _int(raw.get("poolSize"), "poolSize", default=0)
    cursor = _int(_get(raw, "newItemCursor"), "newItemCursor", default=0)

    chunk_flag = raw.get("chunkModeEnabled")
    if isinstance(chunk_flag, bool):
        chunk_mode = chunk_flag
    else:
        # Browser records fall back to poolSize when nothing is selected
        chunk_mode = max(len(selected), pool_size) > CHUNK_CAP or bool(groups) or bool(current_set)

    if chunk_mode:
        regime: Regime = ChunkRotation(
            groups=groups,
            current_set=current_set[:CHUNK_CAP] if current_set else None,
            new_item_cursor=cursor,
            new_item_pool=_index_list(raw.get("newItemPool"), "newItemPool"),
        )
    else:
        regime = SmallPool(
            selected=selected,
            pool_size=len(selected) if selected else pool_size,
        )

    state = ProgressState(
        studied=studied,
        regime=regime,
        round=_int(raw.get("round"), "round", default=1, minimum=1),
        show_reading=_bool(raw.get("showReading"), "showReading"),
        show_meaning=_bool(raw.get("showMeaning"), "showMeaning"),
    )
    if chunk_mode:
        # Grouped items are studied by definition
        state.mark_studied([i for group in groups for i in group])
    return state


def _get(raw: dict, key: str) -> Any:
    if key in raw:
        return raw[key]
    return raw.get(_LEGACY_KEYS.get(key, key))


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _index_list(value: Any, field: str) -> list[int]:
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Backfilling progress field {} (not a list)", field)
        return []
    unique = list(dict.fromkeys(i for i in value if _is_index(i)))
    if len(unique) != len(value):
        logger.warning("Dropped {} invalid or duplicate entries from {}", len(value) - len(unique), field)
    return unique


def _optional_index_list(value: Any) -> Optional[list[int]]:
    if value is None:
        return None
    indices = _index_list(value, "currentSet")
    return indices or None


def _group_list(value: Any) -> list[list[int]]:
    if not isinstance(value, list):
        if value is not None:
            logger.warning("Backfilling progress field groups (not a list)")
        return []
    groups = [_index_list(group, "groups") for group in value]
    return [group for group in groups if group]


def _int(value: Any, field: str, default: int, minimum: int = 0) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        logger.warning("Backfilling progress field {} (invalid value {!r})", field, value)
        return default
    return value


def _bool(value: Any, field: str, default: bool = True) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        logger.warning("Backfilling progress field {} (invalid value {!r})", field, value)
        return default
    return value
