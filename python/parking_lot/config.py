"""Settings for the parking lot console, read from environment variables."""

import os

# Number of slots in the lot
CAPACITY = int(os.getenv("PARKING_CAPACITY", "5"))
# Fee charged per hour parked, kept as a string so it converts to Decimal exactly
RATE_PER_HOUR = os.getenv("PARKING_RATE_PER_HOUR", "10.0")
# Append-only event log written by the console
LOG_FILE = os.getenv("PARKING_LOG_FILE", "parking_Log.txt")
# Level for diagnostic logging on stderr
LOG_LEVEL = os.getenv("PARKING_LOG_LEVEL", "WARNING")

LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
