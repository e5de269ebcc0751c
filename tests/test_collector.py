import pytest

from fcfs_cli.collector import INVALID_TIMES_MESSAGE, ProcessCollector
from fcfs_cli.errors import InvalidProcessError
from fcfs_cli.models import Process


def test_add_parses_text_and_defaults_name():
    c = ProcessCollector()
    p1 = c.add("", " 0 ", "5")
    p2 = c.add("editor", "1", 3)
    assert (p1.id, p1.name, p1.arrival, p1.burst) == (1, "P1", 0, 5)
    assert (p2.id, p2.name) == (2, "editor")
    assert len(c) == 2


@pytest.mark.parametrize(
    "arrival, burst",
    [("abc", "3"), ("1", ""), ("-1", "3"), ("0", "0"), ("0", "-2"), ("1.5", "2")],
)
def test_add_rejects_invalid_times(arrival, burst):
    c = ProcessCollector()
    with pytest.raises(InvalidProcessError) as excinfo:
        c.add("x", arrival, burst)
    assert str(excinfo.value) == INVALID_TIMES_MESSAGE
    assert len(c) == 0


def test_ids_are_not_reused_after_remove_or_clear():
    c = ProcessCollector()
    c.add("", "0", "1")
    second = c.add("", "0", "1")
    assert c.remove(1)
    third = c.add("", "0", "1")
    assert third.id == 3
    # default name follows the current count
    assert third.name == "P2"
    assert [p.id for p in c] == [second.id, third.id]

    c.clear()
    assert len(c) == 0
    assert c.add("", "0", "1").id == 4


def test_remove_unknown_id():
    c = ProcessCollector()
    c.add("", "0", "1")
    assert c.remove(42) is False
    assert len(c) == 1


def test_schedule_recomputes_from_working_set():
    c = ProcessCollector()
    c.add("A", "0", "4")
    c.add("B", "0", "1")
    assert [p.name for p in c.schedule().processes] == ["A", "B"]

    c.remove(1)
    result = c.schedule()
    assert [(p.name, p.start, p.waiting) for p in result.processes] == [("B", 0, 0)]

    c.clear()
    assert c.schedule().processes == []


def test_extend_keeps_relative_order_of_loaded_ids():
    c = ProcessCollector()
    c.add("existing", "0", "1")
    added = c.extend([Process(7, "late", 0, 2), Process(3, "early", 0, 2)])
    assert [(p.id, p.name) for p in added] == [(2, "early"), (3, "late")]


def test_extend_rejects_duplicate_ids_without_adding_any():
    c = ProcessCollector()
    with pytest.raises(InvalidProcessError, match="Duplicate process id 1"):
        c.extend([Process(1, "a", 0, 1), Process(1, "b", 1, 1)])
    assert len(c) == 0
