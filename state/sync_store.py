import asyncio
import json
import os
from pathlib import Path

from search.results import StorageError

STORE_DIR = Path(__file__).parent
STORE_FILE = STORE_DIR / "sync_store.json"


# =========================
# STORE SU FILE JSON
# =========================

class JsonFileStore:
    """
    Store chiave-valore persistito come un unico oggetto JSON.
    get/set sono awaitable: l'I/O gira in un thread separato.
    """

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else STORE_FILE

    async def get(self, key: str):
        data = await asyncio.to_thread(self._read)
        return data.get(key)

    async def set(self, key: str, value) -> None:
        await asyncio.to_thread(self._write_key, key, value)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Lettura fallita da {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Contenuto non valido in {self.path}")
        return data

    def _write_key(self, key: str, value) -> None:
        data = self._read()
        data[key] = value

        # scrittura atomica: file temporaneo + replace
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StorageError(f"Scrittura fallita su {self.path}: {exc}") from exc


# =========================
# STORE IN MEMORIA
# =========================

class MemoryStore:
    def __init__(self, data: dict | None = None):
        self.data = dict(data or {})

    async def get(self, key: str):
        return self.data.get(key)

    async def set(self, key: str, value) -> None:
        self.data[key] = value
