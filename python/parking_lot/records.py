from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class VehicleRecord:
    registration_number: str
    owner_name: str
    make: str
    model: str
    color: str
    owner_contact: str
    admitted_at: datetime

    def identity(self) -> tuple[str, str, str, str, str, str]:
        # everything except the timestamp, in admit() argument order
        return (
            self.registration_number,
            self.owner_name,
            self.make,
            self.model,
            self.color,
            self.owner_contact,
        )


class AdmitOutcome(Enum):
    ADMITTED = 1
    QUEUED = 2
    DUPLICATE_VEHICLE = 3


class RetrieveOutcome(Enum):
    RETRIEVED = 1
    NOT_FOUND = 2
    CANCELLED = 3


@dataclass(frozen=True)
class AdmitResult:
    outcome: AdmitOutcome
    registration_number: str
    record: VehicleRecord | None = None


@dataclass(frozen=True)
class RetrieveResult:
    outcome: RetrieveOutcome
    registration_number: str
    record: VehicleRecord | None = None
    fee: Decimal | None = None
    promoted: AdmitResult | None = None
    retrieved_at: datetime | None = None


class LotEventType(Enum):
    ADMITTED = 1
    QUEUED = 2
    RETRIEVED = 3
    CANCELLED = 4
    PROMOTED = 5


@dataclass(frozen=True)
class LotEvent:
    kind: LotEventType
    registration_number: str
    owner_name: str = ""
    fee: Decimal | None = None

    def describe(self) -> str:
        if self.kind == LotEventType.ADMITTED:
            return f"Parked vehicle: {self.registration_number} {self.owner_name}"
        if self.kind == LotEventType.QUEUED:
            return f"Vehicle added to waiting queue: {self.registration_number}"
        if self.kind == LotEventType.RETRIEVED:
            return f"Retrieved vehicle: {self.registration_number}, Fee: ${self.fee}"
        if self.kind == LotEventType.CANCELLED:
            return f"Vehicle retrieval cancelled: {self.registration_number}"
        return f"Promoted vehicle from waiting queue: {self.registration_number}"


@dataclass(frozen=True)
class LotStatus:
    occupancy: int
    capacity: int
    waiting: list[str]

    @property
    def available(self) -> int:
        return self.capacity - self.occupancy


@dataclass(frozen=True)
class LotStatistics:
    total_revenue: Decimal
    retrieved_count: int = 0
    average_fee: float = 0.
    average_stay_hours: float = 0.
    longest_stay_hours: float = 0.
