"""Input records: documents, their metadata and base categories."""

import math
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Mapping, Optional, Tuple

# Spanish keys used by transcript headers and metadata sheets
_META_ALIASES = {
    "pais": "country",
    "país": "country",
    "genero": "gender",
    "género": "gender",
    "edad": "age",
    "localidad": "locality",
    "ciudad": "locality",
    "municipio": "locality",
    "rol": "role",
}
_META_FIELDS = ("country", "gender", "age", "locality", "role")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _coerce_age(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


@dataclass(frozen=True)
class DocumentMeta:
    """Optional descriptive fields of a document."""

    country: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    locality: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DocumentMeta":
        """Build metadata from a loosely shaped mapping, dropping unusable values."""
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = str(key).strip().lower()
            name = _META_ALIASES.get(name, name)
            if name not in _META_FIELDS or _is_missing(value):
                continue
            if name == "age":
                value = _coerce_age(value)
                if value is None:
                    continue
            else:
                value = str(value).strip()
            values[name] = value
        return cls(**values)

    def get(self, key: str) -> Any:
        """Get a field by name, None when absent or unknown."""
        return getattr(self, key, None)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting absent fields."""
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class Document:
    """A decoded transcript supplied to the pipeline."""

    id: int
    name: str
    text: str
    meta: DocumentMeta = field(default_factory=DocumentMeta)

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"Document {self.name!r} text must be str, got {type(self.text).__name__}")
        if isinstance(self.meta, Mapping):
            object.__setattr__(self, "meta", DocumentMeta.from_dict(self.meta))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "text": self.text,
            "meta": self.meta.to_dict(),
        }


@dataclass(frozen=True)
class BaseCategory:
    """A researcher-defined category with optional synonyms."""

    label: str
    synonyms: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.label or not self.label.strip():
            raise ValueError("Base category label must not be empty")
        # A blank synonym would match every code
        synonyms = tuple(s.strip() for s in self.synonyms if s and s.strip())
        object.__setattr__(self, "synonyms", synonyms)

    @classmethod
    def from_line(cls, line: str) -> "BaseCategory":
        """Parse a 'label | synonym | synonym' line."""
        parts = [part.strip() for part in line.split("|") if part.strip()]
        if not parts:
            raise ValueError(f"Invalid base category line: {line!r}")
        return cls(label=parts[0], synonyms=tuple(parts[1:]))

    @property
    def keys(self) -> Tuple[str, ...]:
        """Lowercased label followed by lowercased synonyms."""
        return (self.label.lower(),) + tuple(s.lower() for s in self.synonyms)
