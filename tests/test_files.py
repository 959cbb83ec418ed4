import pytest

from svckit.files import (
    FileUploadError,
    get_file_details,
    read_csv,
    read_delimited,
    read_text,
)

BOUNDARY = "FormBoundary42"
CONTENT_TYPE = f"multipart/form-data; boundary={BOUNDARY}"


def _multipart(*parts):
    chunks = []
    for name, filename, content in parts:
        disposition = f'form-data; name="{name}"'
        if filename:
            disposition += f'; filename="{filename}"'
        chunks.append(
            f"--{BOUNDARY}\r\nContent-Disposition: {disposition}\r\n"
            f"Content-Type: text/plain\r\n\r\n".encode()
            + content
            + b"\r\n"
        )
    chunks.append(f"--{BOUNDARY}--\r\n".encode())
    return b"".join(chunks)


def test_get_file_details_returns_content():
    content = b"a,b\r\n1,2\r\n"
    body = _multipart(("note", None, b"hello"), ("upload", "data.csv", content))
    upload = get_file_details(body, CONTENT_TYPE, "upload")
    assert upload.filename == "data.csv"
    assert upload.data == content
    assert upload.text == content.decode()
    assert upload.size == len(content)
    assert upload.content_type == "text/plain"


def test_field_without_filename_is_not_a_file():
    body = _multipart(("upload", None, b"plain value"))
    with pytest.raises(FileUploadError) as info:
        get_file_details(body, CONTENT_TYPE, "upload")
    assert str(info.value).startswith("GetFileDetails:001")


def test_missing_form_field_raises():
    body = _multipart(("other", "x.csv", b"1"))
    with pytest.raises(FileUploadError, match="^GetFileDetails:001"):
        get_file_details(body, CONTENT_TYPE, "upload")


def test_non_multipart_request_raises():
    with pytest.raises(FileUploadError, match="multipart/form-data"):
        get_file_details(b"{}", "application/json", "upload")


def test_unterminated_body_raises():
    body = _multipart(("upload", "x.csv", b"1")).replace(f"--{BOUNDARY}--".encode(), b"")
    with pytest.raises(FileUploadError, match="^GetFileDetails:001"):
        get_file_details(body, CONTENT_TYPE, "upload")


def test_filename_path_is_reduced_to_base_name():
    body = _multipart(("upload", "dir/sub/data.csv", b"1"))
    assert get_file_details(body, CONTENT_TYPE, "upload").filename == "data.csv"


def test_read_csv_returns_rows():
    body = _multipart(("upload", "data.csv", b"a,b\r\n1,2\r\n"))
    assert read_csv(body, CONTENT_TYPE, "upload") == [["a", "b"], ["1", "2"]]


def test_read_text_with_custom_delimiter():
    body = _multipart(("upload", "data.txt", b"a|b|c\nd|e|f\n"))
    assert read_text(body, CONTENT_TYPE, "upload", "|") == [["a", "b", "c"], ["d", "e", "f"]]


def test_read_csv_error_carries_prefixes():
    with pytest.raises(FileUploadError) as info:
        read_csv(_multipart(), CONTENT_TYPE, "upload")
    assert str(info.value).startswith("ReadCSV:001GetFileDetails:001")


def test_read_text_error_carries_prefixes():
    with pytest.raises(FileUploadError) as info:
        read_text(_multipart(), CONTENT_TYPE, "upload")
    assert str(info.value).startswith("ReadText:001GetFileDetails:001")


def test_read_delimited_skips_blank_lines_and_honours_quotes():
    rows = read_delimited('x;"y;z"\r\n\r\n1;2\r\n', ";")
    assert rows == [["x", "y;z"], ["1", "2"]]


def test_read_delimited_invalid_delimiter_raises():
    with pytest.raises(ValueError, match="invalid field or comment delimiter"):
        read_delimited("a,b", "\n")