import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

import numpy as np

from parking_lot.ordered_index import OrderedIndex
from parking_lot.records import (
    AdmitOutcome,
    AdmitResult,
    LotEvent,
    LotEventType,
    LotStatistics,
    LotStatus,
    RetrieveOutcome,
    RetrieveResult,
    VehicleRecord,
)
from parking_lot.structures import AdmissionStack, LookupTable, RecordStore, WaitingQueue

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
SECONDS_PER_HOUR = Decimal(3600)

Clock = Callable[[], datetime]
Observer = Callable[[LotEvent], None]
Confirm = Callable[[VehicleRecord], bool]


class ParkingLot:
    """
    Fixed-capacity lot with an overflow queue.

    Parked vehicles are reachable three ways: the lookup table (by registration
    number), the admission stack (arrival order) and the ordered index (sorted,
    keeps retrieved vehicles as an archive). All three hold handles into one
    RecordStore.
    """
    def __init__(self,
        capacity: int,
        rate_per_hour: float | str | Decimal = "10.0",
        clock: Clock = datetime.now,
        observe: Observer | None = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        rate = Decimal(str(rate_per_hour))
        if rate < 0:
            raise ValueError(f"rate per hour must not be negative, got {rate}")

        self.capacity = capacity
        self.rate_per_hour = rate
        self.clock = clock
        self.observe = observe

        self.store = RecordStore()
        self.index = OrderedIndex(self.store)
        self.lookup = LookupTable(self.store)
        self.admission_stack = AdmissionStack(self.store)
        self.waiting_queue = WaitingQueue()

        self.occupancy = 0
        self.total_revenue = Decimal("0.00")
        self.fees: list[Decimal] = []
        self.stay_hours: list[float] = []

    def _emit(self, event: LotEvent) -> None:
        if self.observe is not None:
            self.observe(event)

    def calculate_fee(self, admitted_at: datetime, now: datetime) -> Decimal:
        seconds = max(0., (now - admitted_at).total_seconds())
        hours = Decimal(str(seconds)) / SECONDS_PER_HOUR
        return (hours * self.rate_per_hour).quantize(CENTS, rounding=ROUND_HALF_UP)

    def admit(self,
        registration_number: str,
        owner_name: str,
        make: str,
        model: str,
        color: str,
        owner_contact: str,
    ) -> AdmitResult:
        if (
            self.lookup.contains(registration_number) or
            self.waiting_queue.contains(registration_number)
        ):
            logger.debug(f"rejecting duplicate vehicle {registration_number}")
            return AdmitResult(AdmitOutcome.DUPLICATE_VEHICLE, registration_number)

        record = VehicleRecord(
            registration_number, owner_name, make, model, color, owner_contact, self.clock()
        )

        if self.occupancy >= self.capacity:
            self.waiting_queue.enqueue(record)
            self._emit(LotEvent(LotEventType.QUEUED, registration_number, owner_name))
            return AdmitResult(AdmitOutcome.QUEUED, registration_number, record)

        handle = self.store.add(record)
        self.admission_stack.push_parked(handle)
        self.index.insert(handle)
        self.lookup.put(registration_number, handle)
        self.occupancy += 1
        self._emit(LotEvent(LotEventType.ADMITTED, registration_number, owner_name))
        return AdmitResult(AdmitOutcome.ADMITTED, registration_number, record)

    def retrieve(self, registration_number: str, confirm: Confirm) -> RetrieveResult:
        record = self.lookup.get(registration_number)
        if record is None:
            return RetrieveResult(RetrieveOutcome.NOT_FOUND, registration_number)

        if not confirm(record):
            self._emit(LotEvent(LotEventType.CANCELLED, registration_number, record.owner_name))
            return RetrieveResult(RetrieveOutcome.CANCELLED, registration_number, record)

        now = self.clock()
        fee = self.calculate_fee(record.admitted_at, now)
        self.total_revenue += fee
        self.fees.append(fee)
        self.stay_hours.append(max(0., (now - record.admitted_at).total_seconds()) / 3600)

        self.admission_stack.pop_matching(registration_number)
        self.lookup.remove(registration_number)
        self.occupancy -= 1
        self._emit(LotEvent(LotEventType.RETRIEVED, registration_number, record.owner_name, fee))

        promoted = self._promote_next()
        return RetrieveResult(
            RetrieveOutcome.RETRIEVED, registration_number, record, fee, promoted, retrieved_at=now,
        )

    def _promote_next(self) -> AdmitResult | None:
        if self.waiting_queue.is_empty() or self.occupancy >= self.capacity:
            return None

        waiting = self.waiting_queue.dequeue_front()
        logger.debug(f"promoting {waiting.registration_number} from the waiting queue")
        self._emit(LotEvent(LotEventType.PROMOTED, waiting.registration_number, waiting.owner_name))
        return self.admit(*waiting.identity())

    def find_exact(self, registration_number: str) -> VehicleRecord | None:
        return self.index.find_exact(registration_number)

    def find_history(self, registration_number: str) -> list[VehicleRecord]:
        return self.index.find_history(registration_number)

    def find_prefix(self, prefix: str) -> list[VehicleRecord]:
        return self.index.find_prefix(prefix)

    def filter(self, make: str = "", model: str = "") -> list[VehicleRecord]:
        return self.index.find_all(make, model)

    def is_parked(self, registration_number: str) -> bool:
        return self.lookup.contains(registration_number)

    def parked(self) -> list[VehicleRecord]:
        return self.admission_stack.snapshot_top_to_bottom()

    def waiting(self) -> list[VehicleRecord]:
        return self.waiting_queue.peek_all()

    def status(self) -> LotStatus:
        return LotStatus(
            occupancy=self.occupancy,
            capacity=self.capacity,
            waiting=[record.registration_number for record in self.waiting_queue.peek_all()],
        )

    def statistics(self) -> LotStatistics:
        if not self.fees:
            return LotStatistics(total_revenue=self.total_revenue)

        fees = np.array([float(fee) for fee in self.fees])
        stays = np.array(self.stay_hours)
        return LotStatistics(
            total_revenue=self.total_revenue,
            retrieved_count=len(self.fees),
            average_fee=float(np.round(fees.mean(), 2)),
            average_stay_hours=float(np.round(stays.mean(), 2)),
            longest_stay_hours=float(np.round(stays.max(), 2)),
        )
