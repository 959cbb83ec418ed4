# svckit

Building blocks for a small JSON-over-HTTP service. It has request-tagged
logging, declarative request validation, readers for `multipart/form-data`
uploads and helpers for MySQL records.

## Modules

### `svckit.model`

This module holds shared constants. `SUCCESS_CODE` is `"S"` and `ERROR_CODE`
is `"E"`. The log levels are `INFO`, `ERROR` and `DEBUG`. The database
operations are `SELECT`, `INSERT` and `UPDATE`.

`ClientDetailsResp(details_arr, status, err_msg)` is a response envelope.
Its `to_dict()` returns the wire form with the keys `respData`, `status`
and `errMsg`.

### `svckit.logger`

- `init_logger(log_dir="./log")` adds a file handler to the `svckit`
  logger and returns the path of the file. The file is named
  `logfile<DDMMYYYY.HH.MM.SS.nanoseconds>.txt`. If an earlier file handler
  was added, it is replaced. The directory must already exist.
- `generate_req_id()` returns a new random UUID string.
- `Logger(req_id="")` tags lines with a request id.
  - `set_req_id()` assigns a fresh request id.
  - `log(level, step, *args)` formats a line, emits it and returns it. The
    line looks like this:

    ```
    2024/01/02 15:04:05 [INFO] [ReqID: <id>] INFO [Step <step>] [arg1 arg2]
    ```

### `svckit.validation`

Declare the rules on the fields of a dataclass:

```python
from dataclasses import dataclass, field
from svckit.logger import Logger
from svckit.validation import required, validate_request, ValidationError

@dataclass
class Request:
    name: str = required(default="")
    count: int = required(default=0, metadata={"validate": "max=10"})
    kind: str = field(default="a", metadata={"validate": "oneof=a b"})

validate_request(Logger(), Request(name="x", count=3))
```

- `required(**kwargs)` returns a `dataclasses.field` whose value must not be
  zero. Zero means `None`, `0`, `False` or an empty string or container.
  Further rules can be given in `metadata["validate"]`.
- The supported rules are `required`, `oneof=<space separated values>`,
  `min=`, `max=` and `len=`. The last three compare a number or the length
  of a string or container. An unknown rule raises `ValueError`.
- Nested dataclass values are checked too.
- `validate_request(logger, request_data)` returns `request_data` when it
  is valid. Otherwise it raises `ValidationError`. The error's message
  joins one sentence per failed field, such as
  `The field 'name' failed validation: it must satisfy the 'required' rule.`
  Its `errors` attribute lists `(field, rule, parameter)` tuples. Passing
  something that is not a dataclass instance raises `TypeError`.

### `svckit.files`

- `get_file_details(body, content_type, form_name)` parses a multipart
  body. It returns the first part named `form_name` that carries a
  filename, as an `UploadedFile` with `filename`, `content_type`, `data`,
  `text` (UTF-8) and `size`. When the body is not multipart or no such file
  is found, it raises `FileUploadError` with a message starting with
  `GetFileDetails:001`.
- `read_delimited(text, delimiter=",")` splits delimited text into rows of
  fields and skips blank lines. A delimiter that is not a single character,
  or is a quote or a line break, raises `ValueError`.
- `read_csv(body, content_type, form_name, delimiter=",")` and
  `read_text(...)` combine the two. Their upload errors are prefixed with
  `ReadCSV:001` and `ReadText:001`.

### `svckit.records`

These are helpers over a DB-API connection. MySQL is reached through
`pymysql` by default.

- `db_connection(connector=None)` opens a connection with the module's
  `DB_HOST`, `DB_USER`, `PASSWORD` and `DB_NAME` settings. It pings the
  connection if the connection supports a ping. `connector` is called with
  the keywords `host`, `user`, `password` and `database`.
- `select_records(parameter, connection_factory=None)` runs the select
  query and returns the single string column of the last row. It returns
  `""` when there are no rows.
- `insert_update(parameter, flag, connection_factory=None)` runs the insert
  query for `INSERT` or the update query for `UPDATE`. Any other flag
  raises `ValueError`.
- `insert_records(parameter, connection_factory=None)` and
  `update_records(parameter, connection_factory=None)` run the insert and
  update queries.
- The write helpers commit and return the rows affected, or `None` when
  the count is not available.
- Failures raise `RecordError`. The message carries a stage code, such as
  `SelectRecordsMethod - (ASRM-003) ...` or `InsertRecords - (AIR-002) ...`.

The query strings are the module constants `SELECT_QUERY`, `INSERT_QUERY`,
`UPDATE_QUERY`, `INSERT_RECORDS_QUERY` and `UPDATE_RECORDS_QUERY`. They are
placeholders to replace with real SQL.

## What it does not do

The package has no HTTP server and no command to start one. It does not
load configuration files. It does not build connection strings for
database servers other than MySQL. It has no ready-made API endpoints.
These are parts for an application to build on, not a running service.

## Tests

```
pip install .[test]
pytest
```