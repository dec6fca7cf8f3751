from collections import deque

from parking_lot.records import VehicleRecord


class RecordStore:
    """Append-only arena owning every record that was ever parked.

    Handles are list positions and stay valid for the lifetime of the store,
    so the lookup table, admission stack and ordered index all share one copy
    of each record.
    """
    def __init__(self) -> None:
        self.records: list[VehicleRecord] = []

    def add(self, record: VehicleRecord) -> int:
        self.records.append(record)
        return len(self.records) - 1

    def get(self, handle: int) -> VehicleRecord:
        return self.records[handle]

    def __len__(self) -> int:
        return len(self.records)


class LookupTable:
    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self.handles: dict[str, int] = {} # registration number -> handle of parked record

    def contains(self, registration_number: str) -> bool:
        return registration_number in self.handles

    def get(self, registration_number: str) -> VehicleRecord | None:
        handle = self.handles.get(registration_number)
        if handle is None:
            return None
        return self.store.get(handle)

    def put(self, registration_number: str, handle: int) -> None:
        self.handles[registration_number] = handle

    def remove(self, registration_number: str) -> None:
        self.handles.pop(registration_number, None)

    def __len__(self) -> int:
        return len(self.handles)


class AdmissionStack:
    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self.stack: list[int] = [] # handles, top is the end of the list

    def push_parked(self, handle: int) -> None:
        self.stack.append(handle)

    def pop_matching(self, registration_number: str) -> VehicleRecord | None:
        """
        Remove the first record from the top whose key matches.
        Entries above it are unwound into a side buffer and pushed back in
        their original order.
        """
        side_buffer: list[int] = []
        found = None
        while self.stack:
            handle = self.stack.pop()
            record = self.store.get(handle)
            if record.registration_number == registration_number:
                found = record
                break
            side_buffer.append(handle)

        while side_buffer:
            self.stack.append(side_buffer.pop())
        return found

    def snapshot_top_to_bottom(self) -> list[VehicleRecord]:
        return [self.store.get(handle) for handle in reversed(self.stack)]

    def is_empty(self) -> bool:
        return not self.stack

    def __len__(self) -> int:
        return len(self.stack)


class WaitingQueue:
    def __init__(self) -> None:
        self.queue: deque[VehicleRecord] = deque()
        self.waiting: set[str] = set()

    def enqueue(self, record: VehicleRecord) -> None:
        self.queue.append(record)
        self.waiting.add(record.registration_number)

    def dequeue_front(self) -> VehicleRecord | None:
        if not self.queue:
            return None
        record = self.queue.popleft()
        self.waiting.discard(record.registration_number)
        return record

    def peek_all(self) -> list[VehicleRecord]:
        return list(self.queue)

    def contains(self, registration_number: str) -> bool:
        return registration_number in self.waiting

    def is_empty(self) -> bool:
        return not self.queue

    def __len__(self) -> int:
        return len(self.queue)
