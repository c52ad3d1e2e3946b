"""
Constants
Centralised storage for path flavour names, their os.path modules and
their pure-path classes.
"""
import ntpath
import os
import posixpath
from pathlib import PurePath, PurePosixPath, PureWindowsPath

FLAVOUR_NATIVE = "native"
FLAVOUR_POSIX = "posix"
FLAVOUR_WINDOWS = "windows"

# flavour name → os.path implementation used to join text
FLAVOUR_MODULES = {
    FLAVOUR_NATIVE: os.path,
    FLAVOUR_POSIX: posixpath,
    FLAVOUR_WINDOWS: ntpath,
}

# flavour name → pure path class (used for is_absolute checks only)
FLAVOUR_CLASSES = {
    FLAVOUR_NATIVE: PurePath,
    FLAVOUR_POSIX: PurePosixPath,
    FLAVOUR_WINDOWS: PureWindowsPath,
}

ALL_FLAVOURS = frozenset(FLAVOUR_MODULES)
