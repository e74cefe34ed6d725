"""Per-user JSON file history store for local device storage."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

from ..engine.history_filter import order_by_recency
from ..errors import HistoryStoreError
from ..models.record import HistoricalRecord
from .base import HistoryStore

FORMAT_VERSION = 1


class JsonFileHistoryStore(HistoryStore):
    """Stores each user's history as one JSON document in ``directory``.

    Records are kept oldest first on disk. Writes replace the whole file
    atomically so readers never observe a partial document.
    """

    def __init__(self, directory: Union[str, Path], logger: Optional[logging.Logger] = None):
        self.directory = Path(directory)
        self.logger = logger or logging.getLogger(__name__)

    def path_for(self, user_id: str) -> Path:
        """Return the file path holding a user's history."""
        if not user_id:
            raise HistoryStoreError("user_id must not be empty")
        return self.directory / f"{quote(user_id, safe='')}.json"

    def fetch_recent_history(self, user_id: str, max_count: int) -> List[HistoricalRecord]:
        document = self._read(user_id)
        try:
            records = [HistoricalRecord.from_dict(item) for item in document['records']]
            records.reverse()
            ordered = order_by_recency(records)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise HistoryStoreError(f"Corrupt history file for {user_id}: {e}") from e
        return ordered[:max(0, max_count)]

    def append_record(self, user_id: str, record: HistoricalRecord) -> None:
        document = self._read(user_id)
        document.setdefault('records', []).append(record.to_dict())
        self._write(user_id, document)
        self.logger.debug(f"Appended record for {user_id} ({len(document['records'])} total)")

    def _read(self, user_id: str) -> Dict[str, Any]:
        path = self.path_for(user_id)
        if not path.exists():
            return {'version': FORMAT_VERSION, 'user_id': user_id, 'records': []}
        try:
            with open(path, 'r') as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise HistoryStoreError(f"Failed to read history for {user_id}: {e}") from e
        if not isinstance(document, dict):
            raise HistoryStoreError(f"Corrupt history file for {user_id}: expected an object")
        return document

    def _write(self, user_id: str, document: Dict[str, Any]) -> None:
        path = self.path_for(user_id)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix='.tmp')
            try:
                with os.fdopen(fd, 'w') as f:
                    json.dump(document, f, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise HistoryStoreError(f"Failed to write history for {user_id}: {e}") from e
