"""
Path Utils
==========
Path joining helpers.

Responsibilities:
    - Read any text-like segment (str, bytes, bytearray, memoryview,
      os.PathLike) as plain text
    - Resolve the os.path module and pure path class for a flavour
      (native / posix / windows)
    - Join a base path with one or more segments, keeping their text

Join rules (applied per segment, in order):
    - empty segment              → result unchanged
    - absolute segment           → result replaced by the segment
    - anything else              → appended with the flavour's separator,
                                   never doubling an existing separator

No filesystem access and no normalisation: the result is plain text.
"""
import logging
import os
from pathlib import PurePath
from types import ModuleType
from typing import Optional, Type, Union

from pathjoin.core import config
from pathjoin.core.constants import ALL_FLAVOURS, FLAVOUR_CLASSES, FLAVOUR_MODULES

logger = logging.getLogger(__name__)

TextLike = Union[str, bytes, bytearray, memoryview, os.PathLike]


def as_text(segment: TextLike) -> str:
    """
    Read a text-like value as a str.

    bytes-like values are decoded with the filesystem encoding
    (os.fsdecode). Decoding errors propagate unchanged.

    Raises
    ------
    TypeError
        If the value is not text-like.
    """
    if isinstance(segment, (bytearray, memoryview)):
        segment = bytes(segment)
    return os.fsdecode(segment)


def _flavour_name(flavour: Optional[str] = None) -> str:
    name = (flavour or config.PATH_FLAVOUR).strip().lower()
    if name not in ALL_FLAVOURS:
        raise ValueError(
            f"Unknown path flavour '{name}' (expected one of {sorted(ALL_FLAVOURS)})"
        )
    return name


def path_class(flavour: Optional[str] = None) -> Type[PurePath]:
    """
    Return the pure path class for a flavour name.

    Falls back to config.PATH_FLAVOUR when flavour is None.
    """
    return FLAVOUR_CLASSES[_flavour_name(flavour)]


def path_module(flavour: Optional[str] = None) -> ModuleType:
    """Return the os.path implementation (posixpath / ntpath) for a flavour name."""
    return FLAVOUR_MODULES[_flavour_name(flavour)]


def join_path(
    origin: TextLike,
    part: TextLike,
    *parts: TextLike,
    flavour: Optional[str] = None,
) -> str:
    """
    Join origin with one or more path segments.

    The text of origin and of every appended segment is kept as given:
    no "." removal, no collapsing of repeated separators, trailing
    separators survive.

    Parameters
    ----------
    origin : TextLike
        Base path.
    part, *parts : TextLike
        Segments, applied in order. At least one is required.
    flavour : str, optional
        "native", "posix" or "windows". Defaults to config.PATH_FLAVOUR.

    Returns
    -------
    str
        A new path string. Inputs are never modified.
    """
    flavour_path = path_module(flavour)
    result = as_text(origin)

    for segment in (part, *parts):
        text = as_text(segment)
        if not text:
            continue
        # join() itself discards the result for absolute (or, on windows,
        # rooted / other-drive) segments
        result = flavour_path.join(result, text)

    logger.debug(f"join_path({origin!r}, {len(parts) + 1} segment(s)) → {result!r}")
    return result
