import logging
import re
import uuid

import pytest

from svckit.logger import Logger, generate_req_id, init_logger


def test_generate_req_id_is_unique_uuid4():
    first = generate_req_id()
    second = generate_req_id()
    assert uuid.UUID(first).version == 4
    assert uuid.UUID(second).version == 4
    assert first != second


def test_set_req_id_assigns_new_identifier():
    logger = Logger()
    assert logger.req_id == ""
    logger.set_req_id()
    assert uuid.UUID(logger.req_id).version == 4


def test_log_line_format():
    line = Logger(req_id="abc").log("INFO", "Ready", "Started")
    assert re.match(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} ", line)
    assert line.endswith("[INFO] [ReqID: abc] INFO [Step Ready] [Started]")


def test_log_joins_multiple_arguments_with_spaces():
    line = Logger(req_id="x").log("DEBUG", "STATUS => ", 200, "done")
    assert line.endswith("[Step STATUS => ] [200 done]")


def test_log_without_messages_prints_empty_brackets():
    line = Logger(req_id="x").log("INFO", "GlobalDBInit (+)")
    assert line.endswith("[Step GlobalDBInit (+)] []")


def test_log_emits_record_with_matching_level(caplog):
    logger = Logger(req_id="r1")
    with caplog.at_level(logging.DEBUG, logger="svckit"):
        line = logger.log("ERROR", "Init", "failed")
    assert caplog.records[-1].getMessage() == line
    assert caplog.records[-1].levelno == logging.ERROR


def test_init_logger_writes_to_timestamped_file(tmp_path):
    path = init_logger(tmp_path)
    assert path.parent == tmp_path
    assert re.fullmatch(r"logfile\d{8}\.\d{2}\.\d{2}\.\d{2}\.\d{9}\.txt", path.name)
    line = Logger(req_id="file-test").log("INFO", "Ready", "Started")
    assert line in path.read_text(encoding="utf-8")


def test_init_logger_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        init_logger(tmp_path / "missing")