from dataclasses import asdict, dataclass
from typing import Any, Dict

from .exceptions import DecodeError

FIELDS = ("username", "email", "real_name")


@dataclass
class Document:
    username: str
    email: str
    real_name: str

    def to_source(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_source(cls, source: Any) -> "Document":
        # 누락 필드와 null은 빈 문자열, 타입 불일치는 디코드 실패
        if not isinstance(source, dict):
            raise DecodeError(f"cannot decode document from {type(source).__name__}")
        values = {}
        for field in FIELDS:
            value = source.get(field)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise DecodeError(f"field {field!r} must be a string, got {type(value).__name__}")
            values[field] = value
        return cls(**values)
