"""Extraction of uploaded files from multipart form bodies and delimited parsing."""

from __future__ import annotations

import csv
import email.message
import email.utils
import io
import os
from dataclasses import dataclass
from email.parser import HeaderParser


class FileUploadError(Exception):
    """Raised when an uploaded file cannot be obtained or read."""


@dataclass(frozen=True)
class UploadedFile:
    """A file taken from a multipart form."""

    filename: str
    content_type: str
    data: bytes

    @property
    def text(self) -> str:
        """The file content decoded as UTF-8."""
        return self.data.decode("utf-8", errors="replace")

    @property
    def size(self) -> int:
        """The file length in bytes."""
        return len(self.data)


@dataclass(frozen=True)
class _Part:
    name: str | None
    filename: str | None
    content_type: str
    data: bytes


def _boundary(content_type: str) -> str:
    msg = email.message.Message()
    msg["Content-Type"] = content_type or ""
    if not content_type or msg.get_content_type() != "multipart/form-data":
        raise ValueError("request Content-Type isn't multipart/form-data")
    boundary = msg.get_param("boundary")
    if not boundary:
        raise ValueError("no multipart boundary param in Content-Type")
    return email.utils.collapse_rfc2231_value(boundary)


def _parse_multipart(body: bytes, content_type: str) -> list[_Part]:
    delimiter = b"\r\n--" + _boundary(content_type).encode("latin-1")
    segments = (b"\r\n" + body).split(delimiter)
    parts: list[_Part] = []
    for segment in segments[1:]:
        if segment.startswith(b"--"):
            return parts
        rest = segment.lstrip(b" \t")
        if not rest.startswith(b"\r\n"):
            raise ValueError("multipart: malformed boundary line")
        rest = rest[2:]
        if rest.startswith(b"\r\n"):
            head, content = b"", rest[2:]
        else:
            head, sep, content = rest.partition(b"\r\n\r\n")
            if not sep:
                raise ValueError("multipart: malformed part headers")
        headers = HeaderParser().parsestr(head.decode("utf-8", errors="replace"))
        name = headers.get_param("name", header="content-disposition")
        filename = headers.get_filename()
        parts.append(
            _Part(
                name=email.utils.collapse_rfc2231_value(name) if name else None,
                filename=os.path.basename(filename) if filename else None,
                content_type=headers.get("Content-Type", ""),
                data=content,
            )
        )
    raise ValueError("multipart: NextPart: EOF")


def get_file_details(body: bytes | str, content_type: str, form_name: str) -> UploadedFile:
    """Return the first file uploaded under ``form_name`` in a multipart body."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    try:
        parts = _parse_multipart(body, content_type)
    except ValueError as exc:
        raise FileUploadError("GetFileDetails:001" + str(exc)) from exc
    for part in parts:
        if part.name == form_name and part.filename:
            return UploadedFile(
                filename=part.filename, content_type=part.content_type, data=part.data
            )
    raise FileUploadError("GetFileDetails:001http: no such file")


def read_delimited(text: str, delimiter: str = ",") -> list[list[str]]:
    """Split delimited text into rows of fields, skipping blank lines."""
    if len(delimiter) != 1 or delimiter in {"\r", "\n", '"', "\ufffd"}:
        raise ValueError("csv: invalid field or comment delimiter")
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=False)
    return [row for row in reader if row]


def read_csv(
    body: bytes | str, content_type: str, form_name: str, delimiter: str = ","
) -> list[list[str]]:
    """Read the rows of an uploaded CSV file."""
    try:
        upload = get_file_details(body, content_type, form_name)
    except FileUploadError as exc:
        raise FileUploadError("ReadCSV:001" + str(exc)) from exc
    return read_delimited(upload.text, delimiter)


def read_text(
    body: bytes | str, content_type: str, form_name: str, delimiter: str = ","
) -> list[list[str]]:
    """Read the rows of an uploaded delimited text file."""
    try:
        upload = get_file_details(body, content_type, form_name)
    except FileUploadError as exc:
        raise FileUploadError("ReadText:001" + str(exc)) from exc
    return read_delimited(upload.text, delimiter)