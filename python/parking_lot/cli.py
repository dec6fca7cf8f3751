import argparse
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from dateutil.relativedelta import relativedelta

from parking_lot import config
from parking_lot.events import EventLog
from parking_lot.lot import ParkingLot
from parking_lot.records import AdmitOutcome, AdmitResult, RetrieveOutcome, VehicleRecord
from parking_lot.validation import (
    optional,
    validate_color,
    validate_make,
    validate_model,
    validate_owner_contact,
    validate_owner_name,
    validate_registration_number,
)

logger = logging.getLogger(__name__)


class Colors:
    """ANSI color codes for console output."""
    RESET = '\033[0m'
    RED = '\033[1;31m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    CYAN = '\033[1;36m'


MENU = {
    "1": "Park a Vehicle",
    "2": "Retrieve a Vehicle",
    "3": "Search for a Vehicle",
    "4": "Search by Registration Prefix",
    "5": "Apply Filter",
    "6": "Display Parking Lot",
    "7": "Generate Statistics",
    "8": "Exit",
}
EXIT_CHOICE = "8"


def format_stay(start: datetime, end: datetime) -> str:
    delta = relativedelta(end, start)
    parts = []
    for unit in ("years", "months", "days", "hours", "minutes"):
        amount = getattr(delta, unit)
        if amount:
            parts.append(f"{amount} {unit[:-1] if amount == 1 else unit}")
    return " ".join(parts) or "less than a minute"


def format_record(record: VehicleRecord) -> str:
    return (
        f"Registration: {record.registration_number}, Owner: {record.owner_name}, "
        f"Entry Time: {record.admitted_at.strftime(config.LOG_TIME_FORMAT)}\n"
        f"Make: {record.make}\n"
        f"Model: {record.model}\n"
        f"Color: {record.color}\n"
        f"Owner Contact: {record.owner_contact}"
    )


class ParkingConsole:
    def __init__(self,
        lot: ParkingLot,
        input_fn: Callable[[str], str] | None = None,
    ) -> None:
        self.lot = lot
        self.input_fn = input_fn or input

    def error(self, message: str) -> None:
        print(f"{Colors.RED}{message}{Colors.RESET}")

    def ask(self, label: str, validator: Callable[[str], str] | None = None) -> str:
        while True:
            value = self.input_fn(label).strip()
            if validator is None:
                return value
            try:
                return validator(value)
            except ValueError as exc:
                self.error(f"Error: {exc}")

    def confirm(self, record: VehicleRecord) -> bool:
        print("\nPlease confirm the vehicle details before retrieval:")
        print(format_record(record))
        answer = self.ask("\nDo you want to proceed with retrieving this vehicle? (y/n): ")
        return answer[:1].lower() == "y"

    def show_menu(self) -> None:
        print(f"{Colors.YELLOW}{'*' * 60}{Colors.RESET}")
        print(f"{Colors.CYAN}    Welcome to the Parking Management System{Colors.RESET}")
        print(f"{Colors.YELLOW}{'*' * 60}{Colors.RESET}")
        for key, label in MENU.items():
            print(f"    {key}. {label}")
        print(f"{Colors.YELLOW}{'*' * 60}{Colors.RESET}")

    def read_choice(self) -> str:
        choice = self.input_fn(f"Enter your choice (1-{len(MENU)}): ").strip()
        while choice not in MENU:
            self.error(f"Invalid choice. Please enter a number between 1 and {len(MENU)}.")
            choice = self.input_fn(f"Enter your choice (1-{len(MENU)}): ").strip()
        return choice

    def report_admission(self, result: AdmitResult) -> None:
        if result.outcome == AdmitOutcome.ADMITTED:
            print(f"{Colors.GREEN}Vehicle {result.registration_number} parked successfully.{Colors.RESET}")
        elif result.outcome == AdmitOutcome.QUEUED:
            print(f"Parking is full. Vehicle {result.registration_number} added to waiting queue.")
        else:
            self.error(
                f"Error: Vehicle with registration number {result.registration_number} "
                "is already in the parking lot or waiting queue."
            )

    def park(self) -> None:
        print("\nEnter Vehicle Details:")
        result = self.lot.admit(
            self.ask("   Registration Number: ", validate_registration_number),
            self.ask("   Owner Name: ", validate_owner_name),
            self.ask("   Vehicle Make: ", validate_make),
            self.ask("   Vehicle Model: ", validate_model),
            self.ask("   Vehicle Color: ", validate_color),
            self.ask("   Owner Contact Number: ", validate_owner_contact),
        )
        self.report_admission(result)

    def retrieve(self) -> None:
        registration_number = self.ask(
            "\nEnter the Registration Number of the Vehicle to Retrieve: ",
            validate_registration_number,
        )
        result = self.lot.retrieve(registration_number, self.confirm)
        if result.outcome == RetrieveOutcome.NOT_FOUND:
            print("\nVehicle not found in the parking lot.")
            return
        if result.outcome == RetrieveOutcome.CANCELLED:
            print("\nVehicle retrieval cancelled.")
            return

        stay = format_stay(result.record.admitted_at, result.retrieved_at)
        print(f"\n{Colors.GREEN}Vehicle retrieved successfully. Parking fee: ${result.fee}{Colors.RESET} ({stay})")
        if result.promoted is not None:
            print(f"Next vehicle from the waiting queue: {result.promoted.registration_number}")
            self.report_admission(result.promoted)

    def search(self) -> None:
        registration_number = self.ask(
            "\nEnter the Registration Number of the Vehicle to Search: ",
            validate_registration_number,
        )
        record = self.lot.find_exact(registration_number)
        if record is None:
            print(f"\nVehicle with registration number {registration_number} not found.")
            return

        state = "parked" if self.lot.is_parked(registration_number) else "not currently parked"
        print(f"\nVehicle found ({state}) - {format_record(record)}")

    def search_prefix(self) -> None:
        prefix = self.ask("\nEnter the start of the Registration Number: ")
        records = self.lot.find_prefix(prefix)
        if not records:
            print(f"\nNo vehicles with a registration number starting with '{prefix}'.")
            return
        self.print_records("Search Results:", records)

    def apply_filter(self) -> None:
        make = self.ask("\nEnter vehicle make (or press Enter to skip): ", optional(validate_make))
        model = self.ask("Enter vehicle model (or press Enter to skip): ", optional(validate_model))
        if not make and not model:
            print("No inputs provided. Skipping advanced search.")
            return
        if len(self.lot.index) == 0:
            print("\nNo vehicles in the system.")
            return

        records = self.lot.filter(make, model)
        if not records:
            print("\nNo vehicles found with the specified filters.")
            return
        self.print_records("Search Results:", records)

    def display_status(self) -> None:
        status = self.lot.status()
        print(f"Vehicles Parked: {status.occupancy}/{status.capacity}")
        if status.waiting:
            print(f"\nWaiting Queue: {' '.join(status.waiting)}")

    def display_parked(self) -> None:
        parked = self.lot.parked()
        if not parked:
            print("\nNo vehicles currently parked.")
            return
        self.display_status()
        print("\nList of Parked Vehicles:")
        for record in parked:
            print(f"{Colors.CYAN}{format_record(record)}{Colors.RESET}")

    def display_statistics(self) -> None:
        stats = self.lot.statistics()
        print(f"\nTotal revenue collected: ${stats.total_revenue}")
        print(f"Vehicles retrieved: {stats.retrieved_count}")
        if stats.retrieved_count:
            print(f"Average fee: ${stats.average_fee:.2f}")
            print(f"Average stay: {stats.average_stay_hours:.2f} hours")
            print(f"Longest stay: {stats.longest_stay_hours:.2f} hours")

    def print_records(self, title: str, records: list[VehicleRecord]) -> None:
        print(f"\n{title}")
        for record in records:
            print(f"\n{format_record(record)}")

    def run(self) -> None:
        actions = {
            "1": self.park,
            "2": self.retrieve,
            "3": self.search,
            "4": self.search_prefix,
            "5": self.apply_filter,
            "6": self.display_parked,
            "7": self.display_statistics,
        }
        try:
            while True:
                self.show_menu()
                choice = self.read_choice()
                if choice == EXIT_CHOICE:
                    print("\nExiting... Thank you for using the Parking Management System!")
                    return
                actions[choice]()
        except EOFError:
            logger.info("input closed, leaving the menu")


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number of slots, got {number}")
    return number


def hourly_rate(value: str) -> Decimal:
    try:
        rate = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid rate: {value!r}")
    if not rate.is_finite() or rate < 0:
        raise argparse.ArgumentTypeError(f"rate must be a non-negative amount, got {value}")
    return rate


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive parking lot manager")
    parser.add_argument("--capacity", type=positive_int, default=config.CAPACITY, help="number of parking slots")
    parser.add_argument("--rate", type=hourly_rate, default=config.RATE_PER_HOUR, help="fee per hour parked")
    parser.add_argument("--log-file", default=config.LOG_FILE, help="event log path")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="diagnostic log level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    with EventLog(args.log_file) as event_log:
        lot = ParkingLot(args.capacity, args.rate, observe=event_log.observe)
        ParkingConsole(lot).run()
    return 0
