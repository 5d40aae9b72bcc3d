# labkit

A collection of small helpers for backend services.

| Module | What it gives you |
| --- | --- |
| `labkit.sqlescape` | `escape_like` and `escape_like_with_char`: escape `%`, `_` and the escape character for SQL `LIKE`. |
| `labkit.utf8bom` | `BOM`, `add_bom` and `remove_bom` for the UTF-8 byte order mark. |
| `labkit.osext` | `lookup_env`: read an environment variable, with a default. |
| `labkit.hashutil` | `hash_string`, `hash_bytes`, `hash_struct`: URL-safe base64 SHA-256 (44 characters). |
| `labkit.errgroup` | `Group`, `Context` and `with_context`: run callables in threads, collect the first failure, cancel on error, limit concurrency. |
| `labkit.ulid` | `ULID`, `new`, `parse`, `parse_strict`, `must_parse`: create, decode and inspect ULIDs. |
| `labkit.tspb` | `to_time` and `to_timestamp`: convert between `datetime` and protobuf `Timestamp`. |
| `labkit.envlookup` | `look_up_string`, `look_up_int`, `look_up_time`, `look_up_bool`: typed environment lookups that raise when a required value is missing or malformed. |
| `labkit.awslocal` | `ConfMock`, `with_context`, `is_local`, `get_conf` and `with_*` options: hold local mock endpoint settings for the current context. |
| `labkit.sqsoptions` | `receive_conf`, `send_conf` and `with_*` options: defaults and overrides for SQS send and receive settings. |

## Installation

```
pip install labkit
```

## Examples

```python
from labkit.sqlescape import escape_like, escape_like_with_char

escape_like("50%_off")                 # "50\\%\\_off"
escape_like_with_char("50%", "!")      # "50!%"
escape_like_with_char("x", "é")        # ValueError: not a one-byte character
```

```python
from labkit.utf8bom import add_bom, remove_bom

remove_bom(add_bom(b"name,age\n"))     # b"name,age\n"
```

```python
from labkit.hashutil import hash_string

hash_string("hello")                   # 44-character URL-safe base64 digest
```

```python
from labkit.errgroup import Group, with_context

group, ctx = with_context()
for url in urls:
    group.go(lambda url=url: fetch(url, ctx))
group.wait()   # re-raises the first exception; ctx is cancelled afterwards

limited = Group()
limited.set_limit(4)                   # go() blocks, try_go() returns False, at 4 active tasks
```

```python
from labkit import ulid

uid = ulid.new()
same = ulid.parse(str(uid))            # raises ULIDZeroError for "000...0"
uid.time()                             # creation time as an aware UTC datetime
```

```python
from labkit.tspb import to_time, to_timestamp, ZERO_TIME

to_timestamp(ZERO_TIME)                # None
to_time(None)                          # ZERO_TIME
```

```python
from labkit.envlookup import look_up_int, look_up_bool, look_up_time

workers = look_up_int("WORKERS")            # raises if unset or not an integer
debug = look_up_bool("DEBUG", False)        # False if unset or unparsable
start = look_up_time("START_AT")            # RFC 3339, e.g. "2022-01-02T03:04:05Z"
```

```python
from labkit import awslocal

with awslocal.with_context(awslocal.with_sqs_endpoint("http://127.0.0.1:29324")):
    awslocal.is_local()                # True
    awslocal.get_conf().sqs_endpoint   # "http://127.0.0.1:29324"
awslocal.is_local()                    # False
```

```python
from labkit import sqsoptions

conf = sqsoptions.receive_conf(sqsoptions.with_wait_time_seconds(0))
conf.max_number_of_messages, conf.wait_time_seconds, conf.visibility_timeout   # (1, 0, 30)
sqsoptions.send_conf().delay_seconds                                           # 0
```

## What it does not do

`labkit` makes no network calls. `awslocal` only records which endpoints and
credentials a client should use, and `sqsoptions` only builds settings
objects; neither creates an AWS client or sends, receives or deletes
messages. There is no error-code type or HTTP status mapping in the package,
and no command-line tool.

## Running the tests

```
pip install labkit[test]
pytest
```