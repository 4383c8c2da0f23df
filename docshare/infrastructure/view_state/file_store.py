"""JSON-file view-state store with atomic writes."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from docshare.application.dtos.view_state import ViewState
from docshare.infrastructure.exceptions import ViewStateStorageError

logger = logging.getLogger(__name__)


class InMemoryViewStateStore:
    """View state kept only for the lifetime of the process."""

    def __init__(self) -> None:
        self._states: dict[str, ViewState] = {}

    async def load(self) -> None:
        return None

    async def get(self, user_id: str) -> ViewState:
        return self._states.get(user_id, ViewState())

    async def save(self, user_id: str, state: ViewState) -> None:
        self._states[user_id] = state

    async def close(self) -> None:
        return None


class FileViewStateStore(InMemoryViewStateStore):
    """View state held in memory and mirrored to one JSON file.

    load() reads the file once at startup; each save() rewrites it through a
    temp file and rename so a crash never leaves a truncated file.
    """

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def load(self) -> None:
        if not self.path.exists():
            logger.info("No view state file at %s; starting empty", self.path)
            return
        try:
            async with aiofiles.open(self.path, "r") as f:
                raw = json.loads(await f.read() or "{}")
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable view state file %s: %s", self.path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("Ignoring view state file %s: not an object", self.path)
            return
        self._states = {
            str(user_id): ViewState.from_dict(data)
            for user_id, data in raw.items()
            if isinstance(data, dict)
        }
        logger.info("Loaded view state for %d users", len(self._states))

    async def save(self, user_id: str, state: ViewState) -> None:
        """Persist first; memory only changes once the file has been replaced."""
        async with self._lock:
            states = {**self._states, user_id: state}
            await self._write(states)
            self._states = states

    async def _write(self, states: dict[str, ViewState]) -> None:
        payload = json.dumps(
            {user_id: s.to_dict() for user_id, s in states.items()},
            indent=2,
            sort_keys=True,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=".tmp_", suffix=".json"
            )
            os.close(temp_fd)
            try:
                async with aiofiles.open(temp_path, "w") as f:
                    await f.write(payload)
                await aiofiles.os.replace(temp_path, self.path)
            finally:
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
        except OSError as e:
            raise ViewStateStorageError(str(self.path), str(e)) from e
