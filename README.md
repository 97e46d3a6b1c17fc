# insound

Small building blocks for the Insound web service, usable on their own.

## Modules

- `insound.httpstatus` — the `HttpStatus` integer enum of HTTP status
  codes. `HttpStatus.NotFound.label()` gives `"404 Not Found"`, and
  `HttpStatus.from_label("404 Not Found")` reads a label back; an unknown
  label raises `ValueError`.
- `insound.util` — helpers:
  - `gen_hex_string(length=16)`: a random string of lower-case hex digits.
  - `gen_bytes(length=16)`: random bytes, each below 255.
  - `open_file(path)`: the whole file as `bytes`; raises `OSError` naming
    the path if it cannot be read.
  - `to_upper(text)`: upper-cases ASCII letters only, leaving other
    characters unchanged.
- `insound.fsbank` — constants of the FSB sound bank builder: the flag
  enums `InitFlags` and `BuildFlags` (with `OVERRIDE_MASK` and
  `CACHE_VALIDATION_MASK`), and the enums `Result`, `Format`,
  `FsbVersion` and `State`. `error_string(result)` returns the readable
  message for a result code, or `"Unknown error."` for a value it does not
  know.
- `insound.mongo_id` — `Id`, a MongoDB object id that may be empty. Build
  it from nothing, a hex string, a `bson.ObjectId` or another `Id`
  (an invalid string raises `ValueError`), or take it from a document with
  `Id.from_bson_document(doc)`. `created_at()` gives the creation time in
  seconds since the epoch, or `-1` when empty; `str(id)` gives the hex
  string, or `""` when empty. An `Id` compares equal to another `Id`, an
  `ObjectId` or a hex string, and is false when empty.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from bson import ObjectId

from insound.fsbank import Result, error_string
from insound.httpstatus import HttpStatus
from insound.mongo_id import Id
from insound.util import gen_hex_string, to_upper

print(HttpStatus.Unauthorized.label())          # "401 Unauthorized"
print(HttpStatus.from_label("200 OK") == 200)   # True

print(error_string(Result.ERR_MEMORY))          # "Run out of memory."
print(error_string(999))                        # "Unknown error."

oid = ObjectId()
doc_id = Id.from_bson_document({"_id": oid})
print(doc_id == str(oid), bool(Id()))           # True False

print(len(gen_hex_string()), to_upper("abc-é"))  # 16 "ABC-é"
```

## What this package does not do

It is a set of pieces, not a service. There is no HTTP server, no
routes or response objects, no JSON serialisation helpers, no track or user
models, and no database access: `Id` only wraps object ids and never
connects to MongoDB. The `fsbank` module holds the builder's constants and
messages only; it cannot build sound banks.