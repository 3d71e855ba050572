"""Schema workspace state, one per editor session."""

from typing import Dict, Any, Iterable, Optional
from datetime import datetime, UTC
import threading
import uuid

from GYSQL.ir.models import SplitMode
from GYSQL.registry import SchemaRegistry


class WorkspaceManager:
    """Manages per-session schema registries.

    Re-parsing builds a new registry outside the lock and publishes it by
    swapping the reference, so readers never see a half-built table set.
    """

    def __init__(self):
        self.workspaces: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def parse_into(
        self,
        sql: str,
        session_id: Optional[str] = None,
        split_mode: Optional[SplitMode] = None,
    ) -> str:
        """Parse ``sql`` into the session's workspace, creating it if needed."""
        registry = SchemaRegistry.from_sql(sql, split_mode)
        session_id = session_id or str(uuid.uuid4())
        now = datetime.now(UTC).isoformat()

        with self._lock:
            existing = self.workspaces.get(session_id)
            self.workspaces[session_id] = {
                "session_id": session_id,
                "created_at": existing["created_at"] if existing else now,
                "updated_at": now,
                "sql": sql,
                "registry": registry,
            }
        return session_id

    def get_workspace(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Get workspace by session ID."""
        return self.workspaces.get(session_id)

    def get_registry(self, session_id: str) -> Optional[SchemaRegistry]:
        workspace = self.workspaces.get(session_id)
        return workspace["registry"] if workspace else None

    def toggle_selection(self, session_id: str, table_name: str) -> Optional[SchemaRegistry]:
        with self._lock:
            registry = self.get_registry(session_id)
            if registry is not None:
                registry.toggle_selection(table_name)
            return registry

    def toggle_all(self, session_id: str) -> Optional[SchemaRegistry]:
        with self._lock:
            registry = self.get_registry(session_id)
            if registry is not None:
                registry.toggle_all()
            return registry

    def select_only(self, session_id: str, table_names: Iterable[str]) -> Optional[SchemaRegistry]:
        """Replace the selection; raises UnknownTableError for names not parsed."""
        with self._lock:
            registry = self.get_registry(session_id)
            if registry is not None:
                registry.select_only(table_names)
            return registry

    def snapshot(self, session_id: str) -> Optional[SchemaRegistry]:
        """Independent copy of the session's registry for generation."""
        with self._lock:
            registry = self.get_registry(session_id)
            return registry.snapshot() if registry is not None else None

    def delete_workspace(self, session_id: str) -> bool:
        with self._lock:
            return self.workspaces.pop(session_id, None) is not None
