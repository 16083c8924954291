# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pyfstab.errors import (
    ErrorType,
    FieldNotExist,
    FstabError,
    FstabNotExist,
    NumParseError,
    TooManyFields,
)
from pyfstab.fstab import (
    FSTAB_PATH,
    FstabFileSource,
    FstabSource,
    open_fstab,
    parse_device,
    parse_fstab,
    parse_line,
)
from pyfstab.schemas.fstab import (
    Device,
    FstabEntry,
    Label,
    MountPoint,
    PartLabel,
    PartUuid,
    Uuid,
)

__all__ = [
    "Device",
    "ErrorType",
    "FSTAB_PATH",
    "FieldNotExist",
    "FstabEntry",
    "FstabError",
    "FstabFileSource",
    "FstabNotExist",
    "FstabSource",
    "Label",
    "MountPoint",
    "NumParseError",
    "PartLabel",
    "PartUuid",
    "TooManyFields",
    "Uuid",
    "open_fstab",
    "parse_device",
    "parse_fstab",
    "parse_line",
]
