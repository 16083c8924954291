# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
import re
from contextlib import contextmanager
from typing import (
    ContextManager,
    Generator,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
)

from pyfstab.coerce import unsigned_int
from pyfstab.errors import FieldNotExist, FstabNotExist, NumParseError, TooManyFields
from pyfstab.schemas.fstab import (
    Device,
    FstabEntry,
    Label,
    MountPoint,
    PartLabel,
    PartUuid,
    Uuid,
)

logger = logging.getLogger(__name__)

FSTAB_PATH = "/etc/fstab"

# fs_spec, fs_file, fs_vfstype and fs_mntops; fs_freq and fs_passno are optional.
REQUIRED_FIELDS = 4
MAX_FIELDS = 6

# Unicode White_Space. Unlike str.split and str.strip, the information separators
# U+001C..U+001F are not included and stay part of a field.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)
_FIELD_RE = re.compile(f"[^{WHITESPACE}]+")


class FstabSource(Protocol):
    """Where fstab lines come from."""

    def open_lines(self, path: str) -> ContextManager[Iterable[str]]:
        """Open `path` and provide its lines. Raises `OSError` if it cannot be opened."""


class FstabFileSource(FstabSource):
    @contextmanager
    def open_lines(self, path: str) -> Generator[Iterable[str], None, None]:
        with open(path, "rb") as file:
            yield _decode_lines(file, path)


def _decode_lines(raw_lines: Iterable[bytes], path: str) -> Iterator[str]:
    for lineno, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning(f"{path}:{lineno}: skipping line which is not valid UTF-8")


def parse_device(name: str) -> Device:
    """Classify fs_spec by its prefix.

    The PARTUUID= and PARTLABEL= payloads keep part of their prefix, e.g.
    `PARTUUID=abc` gives `PartUuid('UID=abc')`. Existing consumers rely on this.

    Examples:
    >>> parse_device('UUID=F1C1-3AC0')
    Uuid(value='F1C1-3AC0')
    >>> parse_device('/dev/sda1')
    MountPoint(value='/dev/sda1')
    """
    if name.startswith("UUID="):
        return Uuid(name[5:])
    elif name.startswith("LABEL="):
        return Label(name[6:])
    elif name.startswith("PARTUUID="):
        return PartUuid(name[5:])
    elif name.startswith("PARTLABEL="):
        return PartLabel(name[6:])
    else:
        return MountPoint(name)


def _parse_num(field: str) -> int:
    try:
        return unsigned_int(field)
    except ValueError as e:
        raise NumParseError(str(e)) from e


def parse_line(line: str) -> FstabEntry:
    """Parse a single fstab line which is neither blank nor a comment.

    Raises:
        FieldNotExist if one of the four required fields is missing.
        NumParseError if dump or fsck is not an unsigned integer.
        TooManyFields if there is anything after fsck.
    """
    fields = _FIELD_RE.findall(line)
    if len(fields) < REQUIRED_FIELDS:
        # index of the first missing field
        raise FieldNotExist(len(fields))

    device, dir, device_type, options, *rest = fields
    dump = _parse_num(rest[0]) > 0 if len(rest) > 0 else False
    fsck = _parse_num(rest[1]) if len(rest) > 1 else 0
    if len(fields) > MAX_FIELDS:
        raise TooManyFields(line)

    return FstabEntry(
        device=parse_device(device),
        dir=dir,
        device_type=device_type,
        options=tuple(options.split(",")),
        dump=dump,
        fsck=fsck,
    )


def parse_fstab(lines: Iterable[str]) -> List[FstabEntry]:
    """Parse every entry in `lines`, skipping blank lines and comments.

    The first invalid line aborts parsing; its error is propagated.
    """
    entries = []
    for line in lines:
        line = line.strip(WHITESPACE)
        if not line or line.startswith("#"):
            continue
        entry = parse_line(line)
        logger.debug(f"Parsed fstab entry: {entry}")
        entries.append(entry)
    return entries


def open_fstab(
    path: Optional[str] = None, source: Optional[FstabSource] = None
) -> List[FstabEntry]:
    """Open a fstab file and read it into a list of `FstabEntry`.

    When `path` is None, `FSTAB_PATH` is used.

    Raises:
        FstabNotExist if the file could not be opened.
        `FstabError` subclasses from `parse_line` for the first invalid line.
    """
    if path is None:
        path = FSTAB_PATH
    if source is None:
        source = FstabFileSource()

    try:
        with source.open_lines(path) as lines:
            entries = parse_fstab(lines)
    except OSError as e:
        raise FstabNotExist(str(e)) from e

    logger.debug(f"Loaded {len(entries)} entries from {path}")
    return entries
