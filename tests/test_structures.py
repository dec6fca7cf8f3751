from datetime import datetime

from parking_lot.records import VehicleRecord
from parking_lot.structures import AdmissionStack, LookupTable, RecordStore, WaitingQueue


def make_record(reg: str) -> VehicleRecord:
    return VehicleRecord(reg, "Bob", "Honda", "Civic", "Blue", "03001234567", datetime(2025, 1, 6, 9))


def test_lookup_table():
    store = RecordStore()
    table = LookupTable(store)
    handle = store.add(make_record("ABC123"))
    assert len(store) == 1

    assert not table.contains("ABC123")
    assert table.get("ABC123") is None

    table.put("ABC123", handle)
    assert table.contains("ABC123")
    assert table.get("ABC123") == store.get(handle)
    assert len(table) == 1

    table.remove("ABC123")
    assert not table.contains("ABC123")
    table.remove("ABC123") # missing key is fine
    assert len(table) == 0


def test_admission_stack_pop_matching_keeps_order():
    store = RecordStore()
    stack = AdmissionStack(store)
    for reg in ["AAA1", "BBB2", "CCC3", "DDD4"]:
        stack.push_parked(store.add(make_record(reg)))

    assert [r.registration_number for r in stack.snapshot_top_to_bottom()] == ["DDD4", "CCC3", "BBB2", "AAA1"]

    removed = stack.pop_matching("BBB2")
    assert removed.registration_number == "BBB2"
    assert [r.registration_number for r in stack.snapshot_top_to_bottom()] == ["DDD4", "CCC3", "AAA1"]

    assert stack.pop_matching("ZZZ9") is None
    assert len(stack) == 3

    for reg in ["DDD4", "AAA1", "CCC3"]:
        assert stack.pop_matching(reg).registration_number == reg
    assert stack.is_empty()


def test_waiting_queue_fifo():
    queue = WaitingQueue()
    assert queue.is_empty()
    assert queue.dequeue_front() is None

    for reg in ["AAA1", "BBB2", "CCC3"]:
        queue.enqueue(make_record(reg))

    assert [r.registration_number for r in queue.peek_all()] == ["AAA1", "BBB2", "CCC3"]
    assert len(queue) == 3 # peek is not destructive
    assert queue.contains("BBB2")

    assert queue.dequeue_front().registration_number == "AAA1"
    assert not queue.contains("AAA1")
    assert [r.registration_number for r in queue.peek_all()] == ["BBB2", "CCC3"]
