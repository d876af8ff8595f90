from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Union

import pytest

from argline.parser import ArgumentParser
from argline.parser.utils import coerce_bool, coerce_enum, coerce_value


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


class Status(Enum):
    SUCCESS = 0
    FAILURE = 1
    PENDING = 2


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
        ("x", None, "x"),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("123", Union[int, str], 123),
        ("abc", Union[int, str], "abc"),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_enum_coercion():
    assert coerce_value("dev", Mode) == Mode.DEV
    assert coerce_value("DEV", Mode) == Mode.DEV
    with pytest.raises(ValueError):
        coerce_value("staging", Mode)


def test_int_enum_coercion():
    assert coerce_enum("0", Status) == Status.SUCCESS
    assert coerce_enum(1, Status) == Status.FAILURE
    assert coerce_enum("PENDING", Status) == Status.PENDING
    assert coerce_enum(Status.SUCCESS, Status) == Status.SUCCESS
    with pytest.raises(ValueError):
        coerce_enum("3", Status)


def test_literal_coercion():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    with pytest.raises(ValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_path_coercion():
    result = coerce_value("/tmp/test.txt", Path)
    assert isinstance(result, Path)
    assert str(result) == "/tmp/test.txt"


def test_datetime_coercion():
    result = coerce_value("2023-10-01T13:00:00", datetime)
    assert isinstance(result, datetime)
    assert result.year == 2023 and result.month == 10

    with pytest.raises(ValueError):
        coerce_value("not-a-date", datetime)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("False", False),
        ("0", False),
        ("", False),
        ("1", True),
        ("yes", True),
        ("no", False),
        ("on", True),
        ("off", False),
        (True, True),
    ],
)
def test_bool_coercion(value, expected):
    assert coerce_bool(value) is expected


def test_parser_coerces_enum_and_path():
    parser = ArgumentParser()
    parser.add_argument("--mode", type=Mode, default="dev")
    parser.add_argument("path", type=Path)

    result = parser.parse_args(["config.yml"])
    assert result["mode"] == Mode.DEV
    assert result["path"] == Path("config.yml")

    result = parser.parse_args(["--mode", "prod", "config.yml"])
    assert result.pairs() == [("mode", Mode.PROD), ("path", Path("config.yml"))]
