"""Key-value storage of JSON-serializable blobs."""

import json
from typing import Any, Dict, Optional, Protocol


class KeyValueStore(Protocol):
    """String keys to JSON blobs. get() returns None for missing keys."""

    def get(self, key: str) -> Optional[Any]: ...

    def put(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> bool: ...


class InMemoryKeyValueStore:
    """Process-local store used for guests and tests.

    Values are kept as JSON text so reads behave like a real backend: callers
    get a fresh copy and corrupt entries fail to decode.
    """

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value, ensure_ascii=False)

    def put_raw(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
