"""Errors raised by filesystem operations."""

from __future__ import annotations


class FsError(Exception):
    """Base class of all filesystem errors."""

    default_message = "filesystem error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class DirNotFoundError(FsError):
    default_message = "directory not found"


class ObjectNotFoundError(FsError):
    default_message = "object not found"


class IsDirError(FsError):
    default_message = "is a directory not a file"


class NotDirError(FsError):
    default_message = "not a directory"


class CantUploadEmptyFilesError(FsError):
    default_message = "can't upload empty files"


class PermissionDeniedError(FsError):
    default_message = "permission denied"


class NotImplementedFeatureError(FsError):
    default_message = "optional feature not implemented"


class LimitExceededError(FsError):
    default_message = "limit exceeded"


class CantMoveError(FsError):
    default_message = "can't move"


class CantCopyError(FsError):
    default_message = "can't copy"


class CantDirMoveError(FsError):
    default_message = "can't move directory"


class DirExistsError(FsError):
    default_message = "directory already exists"


class CantShareDirectoriesError(FsError):
    default_message = "can't share directories"


class NotAnObjectError(FsError):
    default_message = "not an object"


class NotDeletedError(FsError):
    default_message = "not deleted"


class CantUpdateError(FsError):
    default_message = "can't update"


class DirectoryNotEmptyError(FsError):
    default_message = "directory not empty"


def is_dir(err: BaseException | None) -> bool:
    """Whether ``err``, or an error it was raised from, reports a directory."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, IsDirError):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False