# gdrivecore

Building blocks for a Google Drive client. The package holds the parts such a
client is built from. It has no network code of its own.

## Modules

- `gdrivecore.interfaces`: the abstract file system model. It has `Info`, `Fs`,
  `DirEntry`, `ObjectInfo`, `Object` and `Directory`. It also has the runtime
  checkable protocols `IDer`, `MimeTyper` and `ModTimeSetter`, and the
  constants `MOD_TIME_NOT_SUPPORTED`, `MAX_LEVEL` and `LINK_SUFFIX`.
- `gdrivecore.features`: `Features` holds the capability flags of a file
  system and its optional operations. `Features.fill(f)` copies in the
  operations that `f` provides through the protocols `Purger`, `Copier`,
  `Mover`, `DirMover`, `ChangeNotifier`, `UnWrapper`, `PutUncheckeder`,
  `PutStreamer` and `MergeDirser`. The module also defines `EntryType`
  (`DIRECTORY`, `OBJECT`).
- `gdrivecore.errors`: one exception class per file system failure, all
  derived from `FsError` (`DirNotFoundError`, `ObjectNotFoundError`,
  `IsDirError` and the others). `is_dir(err)` reports whether an error, or an
  error it was raised from, is an `IsDirError`.
- `gdrivecore.hashtypes`: the `HashType` flags `MD5`, `SHA1` and `SHA256`.
  It has `from_string`, `new_hash_set` and the methods `width`, `new`, `sum`
  and `stream`.
- `gdrivecore.metadata`: `Metadata`, a `dict` of string keys and values, with
  `MetadataHelp` and `MetadataInfo`.
- `gdrivecore.objectinfo`: `StaticObjectInfo`, a plain description of an
  object that is about to be uploaded (`remote_name`, `file_size`,
  `file_mod_time`, `hashes`).
- `gdrivecore.open_options`: `RangeOption`, `SeekOption`,
  `GenericHTTPOption`, `NullOption` and `fix_range_option`.
- `gdrivecore.core`: `SizeSuffix` and its constants (`BYTE` to `EIBYTE`),
  a thread-safe `Counter` and `DirEntries`. It also has a simple retrying
  `Pacer` with `PacerState`, and `ConfigInfo` with `get_config`.
- `gdrivecore.registry`: backend descriptions (`Option`, `OptionExample`,
  `RegInfo`). `register(info)` prints a line announcing the backend.
- `gdrivecore.pacing`: the full pacer. It runs calls one at a time and retries
  them with exponential back-off. See `Pacer`, `State`, `Calculator`,
  `DefaultCalculator`, `default_invoker` and `new_google_drive`.
- `gdrivecore.readers`: `LimitedReadCloser`, `ReadSeeker`, `StdoutLogger` and
  `ByteCounter`.
- `gdrivecore.dircache`: `DirCache`, a two-way cache between directory paths
  and IDs. It works through a `DirCacher` backend.
- `gdrivecore.tokens`: `Token`, with JSON conversion, and its storage on disk.
  See `token_path`, `load_token`, `save_token` and `PersistentTokenSource`.
- `gdrivecore.obscure`: `obscure` and `reveal` obscure a string reversibly
  with AES-CTR. The module also has `is_token_encrypted` and
  `generate_random_password`.
- `gdrivecore.version`: `get_user_agent()` and `get_version_info()`.

The package needs Python 3.10 or later. Its one third-party dependency is
`cryptography`.

## Hashing

```python
from gdrivecore.hashtypes import HashType, from_string

combined = from_string("md5,sha1")
print(combined)                     # md5,sha1
print(HashType.MD5.width())         # 32
print(HashType.SHA256.sum(b"hello"))
```

`from_string` raises `ValueError` for a hash name it does not know.

## Range options

`fix_range_option` returns a new list. It does not change the one passed in.

```python
from gdrivecore.open_options import RangeOption, SeekOption, fix_range_option

options = fix_range_option([RangeOption(-1, 100), SeekOption(10)], 1000)
for option in options:
    print(option, option.header())
# RangeOption(900,999) ('Range', 'bytes=900-999')
# RangeOption(10,999) ('Range', 'bytes=10-999')
```

A range that counts from the end becomes an absolute range. A seek becomes a
range that runs to the last byte. For a size of 0, each range becomes a
`NullOption`. For a negative size, the options are returned unchanged.

## Directory cache

A backend supplies two operations. `find_leaf` returns the ID of one path
component under a parent ID, or `None` if it is absent. `create_dir` creates
a directory and returns its ID.

```python
from gdrivecore.dircache import DirCache, DirCacher


class Backend(DirCacher):
    def __init__(self):
        self.children = {}
        self.next_id = 0

    def find_leaf(self, path_id, leaf):
        return self.children.get((path_id, leaf))

    def create_dir(self, path_id, leaf):
        self.next_id += 1
        new_id = f"id{self.next_id}"
        self.children[(path_id, leaf)] = new_id
        return new_id


cache = DirCache("photos/2024", "root", Backend())
root_id = cache.find_root()         # creates photos and photos/2024
print(cache.find_path(root_id))     # photos/2024
```

Call `find_root()` before `find_dir()`. Otherwise `find_dir()` raises
`DirCacheError`. It raises the same error when a directory cannot be found.

## Pacing API calls

```python
from gdrivecore.pacing import DefaultCalculator, new_google_drive

pacer = new_google_drive(
    retries=5, calculator=DefaultCalculator(min_sleep=0.1, max_sleep=2.0, decay_constant=1)
)

def list_page():
    # Return (again, error). True asks the pacer to try again after a back-off.
    return False, None

pacer.call(list_page)
```

If the last call returned an error, `Pacer.call` raises it.

`gdrivecore.core.Pacer` is simpler. It calls a function and retries when the
function raises, at most three times. It returns the function's result. A
`threading.Event` passed as `cancel` aborts the waiting with
`concurrent.futures.CancelledError`.

## Tokens

```python
from datetime import datetime, timezone
from gdrivecore.tokens import Token, load_token, save_token

token = Token(access_token="token", token_type="Bearer",
              expiry=datetime(2030, 1, 1, tzinfo=timezone.utc))
save_token("/tmp/gdrive-config", "gdrive", token)   # writes gdrive.token, mode 0600
assert load_token("/tmp/gdrive-config", "gdrive") == token
```

A file that cannot be read or parsed raises `TokenError`.

## Obscuring strings

```python
from gdrivecore.obscure import obscure, reveal

hidden = obscure("some text")
assert reveal(hidden) == "some text"
```

`obscure` hides a value from a casual reader. It is not real encryption:
anyone who has this package can reverse it. `is_token_encrypted(path)` reads
a token file and classifies it:

- `False` if it is plain token JSON.
- `True` if it starts with `ENCRYPTED:` or is base64.
- Otherwise it raises `ObscureError`.

## What the package does not do

- It has no Google Drive backend. No class talks to the Drive API.
- It has no OAuth authorization flow and no HTTP client.
- It has no command-line program.
- It cannot encrypt or decrypt token files with a password. It can only tell
  whether a file looks encrypted.