# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Device:
    """fs_spec, the block special device or remote filesystem to be mounted.

    Only the subclasses below are ever constructed; see `parse_device`.
    """

    value: str

    def __post_init__(self) -> None:
        if type(self) is Device:
            raise TypeError("Device is abstract; use one of its variants")

    @property
    def kind(self) -> str:
        return _DEVICE_KINDS[type(self)]


@dataclass(frozen=True)
class Uuid(Device):
    pass


@dataclass(frozen=True)
class Label(Device):
    pass


@dataclass(frozen=True)
class PartUuid(Device):
    pass


@dataclass(frozen=True)
class PartLabel(Device):
    pass


@dataclass(frozen=True)
class MountPoint(Device):
    pass


_DEVICE_KINDS = {
    Uuid: "uuid",
    Label: "label",
    PartUuid: "partuuid",
    PartLabel: "partlabel",
    MountPoint: "mount_point",
}


@dataclass(frozen=True)
class FstabEntry:
    """https://man7.org/linux/man-pages/man5/fstab.5.html"""

    device: Device
    # fs_file
    dir: str
    # fs_vfstype
    device_type: str
    # fs_mntops
    options: Tuple[str, ...]
    # fs_freq
    dump: bool = False
    # fs_passno, 0 means no check at boot
    fsck: int = 0
