import io
from datetime import datetime, timedelta, timezone

import pytest

from gdrivecore.hashtypes import HashType
from gdrivecore.interfaces import (
    Directory,
    Fs,
    IDer,
    MimeTyper,
    ModTimeSetter,
    Object,
)

WHEN = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class _MemObject(Object):
    def __init__(self, remote, data):
        self._remote = remote
        self._data = data
        self._mtime = WHEN

    def fs(self):
        return None

    def remote(self):
        return self._remote

    def mod_time(self):
        return self._mtime

    def size(self):
        return len(self._data)

    def hash(self, ht):
        return ht.sum(self._data)

    def storable(self):
        return True

    def set_mod_time(self, t):
        self._mtime = t

    def open(self, *args):
        return io.BytesIO(self._data)

    def update(self, stream, src, *args):
        self._data = stream.read()

    def remove(self):
        self._data = b""

    def mime_type(self):
        return "text/plain"


class _MemDir(Directory):
    def fs(self):
        return None

    def remote(self):
        return "folder/sub"

    def mod_time(self):
        return WHEN

    def size(self):
        return 0

    def items(self):
        return -1

    def id(self):
        return "dir-1"


class _MemFs(Fs):
    def __init__(self):
        self.objects = {}

    def name(self):
        return "mem"

    def root(self):
        return ""

    def precision(self):
        return timedelta(seconds=1)

    def hashes(self):
        return {HashType.MD5: ""}

    def features(self):
        return None

    def list(self, dir):
        return [o for r, o in sorted(self.objects.items()) if r.startswith(dir)]

    def new_object(self, remote):
        return self.objects[remote]

    def put(self, stream, src, *args):
        obj = _MemObject(src.remote(), stream.read())
        self.objects[obj.remote()] = obj
        return obj

    def mkdir(self, dir):
        pass

    def rmdir(self, dir):
        pass


def test_entry_str_defaults_to_remote():
    obj = _MemObject("a/b.txt", b"data")
    assert Object.__str__(obj) == "a/b.txt"
    assert Directory.__str__(_MemDir()) == "folder/sub"


def test_incomplete_object_cannot_be_instantiated():
    class Partial(Object):
        def fs(self):
            return None

    with pytest.raises(TypeError):
        Object()
    with pytest.raises(TypeError):
        Partial()


def test_incomplete_fs_cannot_be_instantiated():
    class Partial(Fs):
        def name(self):
            return "x"

    with pytest.raises(TypeError):
        Fs()
    with pytest.raises(TypeError):
        Partial()


def test_fs_round_trip_through_interface():
    fs = _MemFs()
    src = _MemObject("docs/note.txt", b"payload")
    put = fs.put(io.BytesIO(b"payload"), src)
    assert Object.__str__(fs.new_object("docs/note.txt")) == "docs/note.txt"
    assert put.open().read() == b"payload"
    assert [Object.__str__(e) for e in fs.list("docs")] == ["docs/note.txt"]


def test_protocols_detect_optional_methods():
    obj = _MemObject("x", b"")
    assert isinstance(obj, MimeTyper) and obj.mime_type() == "text/plain"
    assert isinstance(obj, ModTimeSetter)
    assert not isinstance(obj, IDer)
    assert Object.__str__(obj) == "x"
    directory = _MemDir()
    assert isinstance(directory, IDer) and directory.id() == "dir-1"
    assert not isinstance(directory, MimeTyper)
    assert Directory.__str__(directory) == "folder/sub"