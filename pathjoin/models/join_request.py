"""
Join Request Model
==================
Pydantic models for a join described as data (e.g. loaded from JSON).

Fields:
    origin      — base path, text or bytes-like (decoded with os.fsdecode)
    segments    — ordered segments, at least one
    flavour     — native / posix / windows; None means config.PATH_FLAVOUR

JoinResult:
    request     — the JoinRequest that produced it
    path        — rendered joined path
    is_absolute — whether the joined path is absolute under its flavour
"""
from pathlib import PurePath
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from pathjoin.core.constants import ALL_FLAVOURS
from pathjoin.utils.path_utils import as_text, join_path, path_class


class JoinRequest(BaseModel):
    origin: str
    segments: List[str] = Field(min_length=1)
    flavour: Optional[str] = None

    @field_validator("origin", mode="before")
    @classmethod
    def _read_origin(cls, v: Any) -> Any:
        if isinstance(v, (bytes, bytearray, memoryview, PurePath)):
            return as_text(v)
        return v

    @field_validator("segments", mode="before")
    @classmethod
    def _read_segments(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return [
                as_text(s) if isinstance(s, (bytes, bytearray, memoryview, PurePath)) else s
                for s in v
            ]
        return v

    @field_validator("flavour")
    @classmethod
    def _known_flavour(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().lower()
        if v not in ALL_FLAVOURS:
            raise ValueError(f"flavour must be one of {sorted(ALL_FLAVOURS)}")
        return v

    def join(self) -> str:
        return join_path(self.origin, *self.segments, flavour=self.flavour)

    def resolve(self) -> "JoinResult":
        path = self.join()
        is_absolute = path_class(self.flavour)(path).is_absolute()
        return JoinResult(request=self, path=path, is_absolute=is_absolute)


class JoinResult(BaseModel):
    request: JoinRequest
    path: str
    is_absolute: bool = False
