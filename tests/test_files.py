import pytest

from handytools.files import (
    file_exists,
    read_bytes,
    read_json_file,
    read_lines,
    write_bytes,
    write_json_file,
    write_lines,
)


def test_file_exists(tmp_path):
    target = tmp_path / "present.txt"
    assert file_exists(target) is False
    write_bytes(target, b"")
    assert file_exists(target) is True


def test_lines_round_trip(tmp_path):
    target = tmp_path / "lines.txt"
    lines = ["first", "", "third line", "ünïcode"]
    write_lines(target, lines)
    assert read_lines(target) == lines


def test_write_lines_terminates_every_line(tmp_path):
    target = tmp_path / "lines.txt"
    write_lines(target, ["a", "b"])
    assert read_bytes(target) == b"a\nb\n"


def test_read_lines_handles_crlf_and_missing_final_newline(tmp_path):
    target = tmp_path / "crlf.txt"
    write_bytes(target, b"one\r\ntwo\r\nthree")
    assert read_lines(target) == ["one", "two", "three"]


def test_read_lines_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    write_bytes(target, b"")
    assert read_lines(target) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_bytes_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    payload = bytes(range(256)) * 5000
    write_bytes(target, payload)
    assert read_bytes(target) == payload


def test_write_bytes_replaces_content(tmp_path):
    target = tmp_path / "data.bin"
    write_bytes(target, b"long original content")
    write_bytes(target, b"short")
    assert read_bytes(target) == b"short"


def test_read_bytes_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_bytes(tmp_path / "missing.bin")


def test_json_round_trip(tmp_path):
    target = tmp_path / "data.json"
    data = {"name": "example", "values": [1, 2.5, None, True], "nested": {"k": "v"}}
    write_json_file(target, data)
    assert read_json_file(target) == data


def test_json_is_compact(tmp_path):
    target = tmp_path / "data.json"
    write_json_file(target, {"b": [1, 2], "a": 1})
    assert read_bytes(target) == b'{"a":1,"b":[1,2]}'


def test_json_unserialisable_data(tmp_path):
    with pytest.raises(TypeError):
        write_json_file(tmp_path / "bad.json", {"x": object()})


def test_read_json_invalid(tmp_path):
    target = tmp_path / "bad.json"
    write_bytes(target, b"{not json")
    with pytest.raises(ValueError):
        read_json_file(target)


def test_read_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_json_file(tmp_path / "missing.json")