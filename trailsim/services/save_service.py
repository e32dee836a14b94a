"""Save slot Service: engine snapshots <-> DB

Service -> Core, Service -> DB allowed. The snapshot itself stays opaque:
the service only reads the theme identity to index it.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from trailsim.core.engine import TrailEngine
from trailsim.db.models import SaveSlotModel

logger = logging.getLogger(__name__)


class SaveService:
    """Named save slots"""

    def __init__(self, db: Session):
        self._db = db

    def save(self, engine: TrailEngine, slot_name: str) -> SaveSlotModel:
        """Write (or overwrite) a slot with the engine's current snapshot."""
        snapshot = engine.serialize_snapshot()
        orm = self._db.get(SaveSlotModel, slot_name)
        if orm is None:
            orm = SaveSlotModel(slot_name=slot_name)
            self._db.add(orm)
        orm.theme_name = snapshot["theme_name"]
        orm.theme_version = snapshot["theme_version"]
        orm.snapshot = snapshot
        orm.saved_at = datetime.now(timezone.utc)
        self._db.commit()
        logger.info("Saved slot %s (%s)", slot_name, orm.theme_name)
        return orm

    def load(self, engine: TrailEngine, slot_name: str) -> None:
        """Restore a slot into the engine. Theme mismatch propagates."""
        orm = self._db.get(SaveSlotModel, slot_name)
        if orm is None:
            raise ValueError(f"Save slot not found: {slot_name}")
        engine.restore_snapshot(orm.snapshot)
        logger.info("Loaded slot %s", slot_name)

    def list_slots(self, theme_name: Optional[str] = None) -> list[SaveSlotModel]:
        """Newest first."""
        query = self._db.query(SaveSlotModel)
        if theme_name is not None:
            query = query.filter(SaveSlotModel.theme_name == theme_name)
        return query.order_by(SaveSlotModel.saved_at.desc()).all()

    def delete(self, slot_name: str) -> bool:
        orm = self._db.get(SaveSlotModel, slot_name)
        if orm is None:
            return False
        self._db.delete(orm)
        self._db.commit()
        logger.info("Deleted slot %s", slot_name)
        return True
