from pathlib import Path

import pytest

from fcfs_cli.errors import InvalidProcessError
from fcfs_cli.models import Process
from fcfs_cli.workload_io import load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"name":"A","arrival":0,"burst":3},'
                 '{"arrival":1,"burst":2,"id":5}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0] == Process(1, "A", 0, 3)
    assert procs[1] == Process(5, "P2", 1, 2)


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("name,arrival,burst\nA,0,3\n,1,2\n")
    procs = load_workload(p)
    assert procs[0].name == "A"
    assert procs[1].name == "P2"
    assert procs[1].burst == 2


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("")
    with pytest.raises(InvalidProcessError, match="Unsupported"):
        load_workload(p)


def test_invalid_entries(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"name":"A","arrival":"soon","burst":3}]')
    with pytest.raises(InvalidProcessError):
        load_workload(p)

    p.write_text('{"arrival":0,"burst":1}')
    with pytest.raises(InvalidProcessError, match="list"):
        load_workload(p)


@pytest.mark.parametrize(
    "content",
    [
        '[{"arrival":1.7,"burst":2}]',
        '[{"arrival":0,"burst":2.9}]',
        '[{"arrival":true,"burst":3}]',
        '[{"arrival":0,"burst":3,"id":false}]',
    ],
)
def test_json_non_integer_times_are_rejected(tmp_path: Path, content):
    p = tmp_path / "w.json"
    p.write_text(content)
    with pytest.raises(InvalidProcessError, match="Invalid process entry"):
        load_workload(p)


def test_csv_non_integer_times_are_rejected(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("name,arrival,burst\nA,1.7,3\n")
    with pytest.raises(InvalidProcessError):
        load_workload(p)


def test_csv_values_may_be_padded(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("name,arrival,burst,id\nA, 2 , 3 ,4\n")
    assert load_workload(p) == [Process(4, "A", 2, 3)]


@pytest.mark.parametrize("suffix", [".csv", ".json"])
def test_non_utf8_file_is_rejected(tmp_path: Path, suffix):
    p = tmp_path / f"w{suffix}"
    p.write_bytes(b"name,arrival,burst\n\xff\xfe,0,1\n")
    with pytest.raises(InvalidProcessError, match="UTF-8"):
        load_workload(p)
