"""Data models for loaded content documents"""

from dataclasses import dataclass
import datetime
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Document(BaseModel):
    """A single published post: validated metadata plus its body."""
    model_config = ConfigDict(frozen=True)

    slug:        str
    title:       str
    date:        datetime.date
    tags:        tuple[str, ...] = ()
    body:        str = ""               # markdown body without frontmatter
    html:        str = ""               # rendered body
    source_path: str = ""               # relative to the content root
    frontmatter: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("frontmatter")
    @classmethod
    def freeze_frontmatter(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))


class NotFound(BaseModel):
    """Lookup miss for a slug. Falsy, so `if not result:` reads naturally."""
    model_config = ConfigDict(frozen=True)

    slug: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class RawDocument:
    """Internal parse result: frontmatter and body before validation."""
    source_path: str                    # posix path relative to the content root
    file_name:   str
    frontmatter: dict[str, Any]
    body:        str
