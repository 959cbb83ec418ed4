"""Declarative validation of request dataclasses."""

from __future__ import annotations

import dataclasses
from typing import Any

from .logger import Logger
from .model import ERROR, INFO


class ValidationError(Exception):
    """Raised when request data breaks one or more rules.

    ``errors`` holds ``(field, rule, parameter)`` tuples in field order.
    """

    def __init__(self, message: str, errors: list[tuple[str, str, str]]) -> None:
        super().__init__(message)
        self.errors = errors


def required(**kwargs: Any) -> Any:
    """Return a dataclass field that must hold a non-zero value."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    spec = metadata.get("validate", "")
    metadata["validate"] = "required" + ("," + spec if spec else "")
    return dataclasses.field(metadata=metadata, **kwargs)


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) > 0
    return True


def _measure(value: Any) -> float:
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value)
    return float(value)


def _check(tag: str, param: str, value: Any, name: str) -> bool:
    if tag == "required":
        return _has_value(value)
    if tag == "oneof":
        return str(value) in param.split()
    if tag in ("min", "max", "len"):
        if value is None:
            return tag == "max"
        limit = float(param)
        size = _measure(value)
        if tag == "min":
            return size >= limit
        if tag == "max":
            return size <= limit
        return size == limit
    raise ValueError(f"undefined validation function {tag!r} on field {name!r}")


def _rules(spec: str) -> list[tuple[str, str]]:
    rules = []
    for part in spec.split(","):
        part = part.strip()
        if part:
            tag, _, param = part.partition("=")
            rules.append((tag, param))
    return rules


def _collect(data: Any) -> list[tuple[str, str, str]]:
    failures: list[tuple[str, str, str]] = []
    for f in dataclasses.fields(data):
        value = getattr(data, f.name)
        for tag, param in _rules(f.metadata.get("validate", "")):
            if not _check(tag, param, value, f.name):
                failures.append((f.name, tag, param))
                break
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            failures.extend(_collect(value))
    return failures


def _describe(name: str, tag: str, param: str) -> str:
    suffix = f" with parameter '{param}'" if param else ""
    return f"The field '{name}' failed validation: it must satisfy the '{tag}' rule{suffix}."


def validate_request(logger: Logger, request_data: Any) -> Any:
    """Check ``request_data`` against its field rules and return it if valid."""
    logger.log(INFO, "ValidateRequest (+)")
    if not dataclasses.is_dataclass(request_data) or isinstance(request_data, type):
        raise TypeError("validator: (nil " + type(request_data).__name__ + ")")
    failures = _collect(request_data)
    if failures:
        message = "".join(_describe(*failure) for failure in failures)
        logger.log(ERROR, "Validation failed: ", message)
        logger.log(
            ERROR, "ValidateRequest : 001 (PCVR-001) request validation failed", message
        )
        raise ValidationError(message, failures)
    logger.log(INFO, "ValidateRequest (-)")
    return request_data