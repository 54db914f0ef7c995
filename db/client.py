import asyncio
import json
import os
import shutil
import tempfile
from pathlib import Path
from contextlib import asynccontextmanager
from typing import List, Optional, Type, TypeVar

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel

from db.models import Customer, Hotel, Visitation

# Load environment variables from .env file
load_dotenv()

M = TypeVar("M", bound=BaseModel)

# collection name -> (file name, model)
COLLECTIONS = {
    "customers": ("customers.json", Customer),
    "hotels": ("hotels.json", Hotel),
    "visitations": ("visitations.json", Visitation),
}


def _default_data_dir() -> Path:
    """Resolve the data folder from VISITS_DATA_DIR, falling back to ./data."""
    return Path(os.getenv("VISITS_DATA_DIR", "data"))


class JsonStore:
    """Whole-collection JSON record store.

    Each collection lives in its own file wrapped in a single key, e.g.
    ``{"customers": [...]}``. Reads always return freshly parsed models so
    callers get a point-in-time snapshot they are free to keep.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, collection: str) -> Path:
        filename, _ = COLLECTIONS[collection]
        return self.data_dir / filename

    def _read(self, collection: str, model: Type[M]) -> List[M]:
        path = self._path(collection)
        if not path.exists():
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            rows = (data or {}).get(collection) or []
            return [model.model_validate(row) for row in rows]
        except (ValueError, TypeError, AttributeError) as e:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and ValidationError
            logger.error(f"Could not read {path}, treating as empty: {e}")
            self._set_aside(path)
            return []

    def _set_aside(self, path: Path) -> Optional[Path]:
        """Copy an unreadable file to <name>.corrupt before a write can replace it.

        An existing .corrupt copy is kept, so the first bad version survives.
        """
        backup = path.with_name(path.name + ".corrupt")
        if backup.exists():
            return None
        shutil.copy2(path, backup)
        logger.warning(f"Saved unreadable {path.name} as {backup}")
        return backup

    def _write(self, collection: str, records: List[BaseModel]) -> None:
        path = self._path(collection)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {collection: [r.model_dump(mode="json", by_alias=True) for r in records]}

        # Write to a sibling temp file then swap, so readers never see half a file
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def read_customers(self) -> List[Customer]:
        return self._read("customers", Customer)

    def write_customers(self, customers: List[Customer]) -> None:
        self._write("customers", customers)

    def read_hotels(self) -> List[Hotel]:
        return self._read("hotels", Hotel)

    def write_hotels(self, hotels: List[Hotel]) -> None:
        self._write("hotels", hotels)

    def read_visitations(self) -> List[Visitation]:
        return self._read("visitations", Visitation)

    def write_visitations(self, visitations: List[Visitation]) -> None:
        self._write("visitations", visitations)


# Global store and write lock
_store: Optional[JsonStore] = None
_lock: Optional[asyncio.Lock] = None


async def init_db(data_dir: Optional[str] = None) -> JsonStore:
    """Initialize the record store once at startup."""
    global _store, _lock
    if _store is None:
        path = Path(data_dir) if data_dir else _default_data_dir()
        _store = JsonStore(path)
        _lock = asyncio.Lock()
        logger.info(f"Record store ready at {path.resolve()}")
    return _store


@asynccontextmanager
async def get_conn():
    """Get the store with writes serialised for the duration of the block."""
    if _store is None:
        raise RuntimeError("Record store not initialized, call init_db() first")
    async with _lock:
        yield _store


async def close_db():
    """Drop the store reference (nothing to flush, writes are immediate)."""
    global _store, _lock
    _store = None
    _lock = None
