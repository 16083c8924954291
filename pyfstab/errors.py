# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Errors raised while reading an fstab file."""

from enum import Enum


class ErrorType(Enum):
    FSTAB_NOT_EXIST = "FstabNotExist"
    NUM_PARSE_ERROR = "NumParseError"
    FIELD_NOT_EXIST = "FieldNotExist"
    TOO_MANY_FIELDS = "TooManyFields"


class FstabError(Exception):
    """Base exception type for fstab errors that can be handled by the caller.

    `reason` identifies which kind of error occurred; each subclass also exposes
    its payload as an attribute.
    """

    reason: ErrorType

    @property
    def description(self) -> str:
        if self.reason is ErrorType.FSTAB_NOT_EXIST:
            return "can not open fstab"
        return "unknown error"

    def __str__(self) -> str:
        (payload,) = self.args
        return f"{self.reason.value}({payload})"


class FstabNotExist(FstabError):
    """The fstab file could not be opened."""

    reason = ErrorType.FSTAB_NOT_EXIST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NumParseError(FstabError):
    """The dump or fsck field is not an unsigned integer."""

    reason = ErrorType.NUM_PARSE_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class FieldNotExist(FstabError):
    """A required field (device, dir, device type or options) is missing."""

    reason = ErrorType.FIELD_NOT_EXIST

    def __init__(self, index: int):
        super().__init__(index)
        self.index = index


class TooManyFields(FstabError):
    """Extra fields after fsck."""

    reason = ErrorType.TOO_MANY_FIELDS

    def __init__(self, line: str):
        super().__init__(line)
        self.line = line
