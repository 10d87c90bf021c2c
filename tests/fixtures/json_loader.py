import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    """Request payloads shared by the API tests, read once from test_data.json"""

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        return cls.load().get(key)

    @classmethod
    def payload(cls, key: str, **overrides) -> Dict[str, Any]:
        # Tests mutate payloads freely, so each call hands out a fresh copy
        data = copy.deepcopy(cls.get(key))
        data.update(overrides)
        return data

    @property
    def operator_email(self) -> str:
        return self.get("operator")["email"]
