from parking_lot.lot import ParkingLot
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
