"""Input checks for the console. Each validator returns the value or raises ValueError."""


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _check_words(value: str, field: str, allowed, allowed_desc: str, max_len: int) -> str:
    if not value:
        raise ValueError(f"{field} cannot be empty.")
    if any(not allowed(c) and c != " " for c in value):
        raise ValueError(f"{field} can only contain {allowed_desc} and spaces.")
    if value[0] == " " or value[-1] == " " or len(value) > max_len:
        raise ValueError(f"{field} format is invalid.")
    return value


def validate_registration_number(value: str) -> str:
    if len(value) < 3:
        raise ValueError("Registration number must be at least 3 characters long.")
    if len(value) > 10:
        raise ValueError("Registration number must not exceed 10 characters.")
    if value[0] == "0":
        raise ValueError("Registration number cannot start with '0'.")
    if not all(_is_alnum(c) for c in value):
        raise ValueError("Registration number must be alphanumeric.")
    return value


def validate_owner_name(value: str) -> str:
    if not value:
        raise ValueError("Owner name cannot be empty.")
    if any(not _is_letter(c) and c != " " for c in value):
        raise ValueError("Owner name can only contain letters and spaces.")
    if value[0] == " " or value[-1] == " ":
        raise ValueError("Owner name cannot start or end with a space.")
    if "  " in value:
        raise ValueError("Owner name cannot have consecutive spaces.")
    if len(value) > 100:
        raise ValueError("Owner name must not exceed 100 characters.")
    return value


def validate_make(value: str) -> str:
    return _check_words(value, "Vehicle make", _is_letter, "letters", 50)


def validate_model(value: str) -> str:
    return _check_words(value, "Vehicle model", _is_alnum, "letters, numbers", 50)


def validate_color(value: str) -> str:
    return _check_words(value, "Vehicle color", _is_letter, "letters", 30)


def validate_owner_contact(value: str) -> str:
    if not value:
        raise ValueError("Owner contact cannot be empty.")
    if not 10 <= len(value) <= 15 or not all(c.isascii() and c.isdigit() for c in value):
        raise ValueError("Owner contact must be 10-15 digits.")
    return value


def optional(validator):
    # filter fields may be skipped with an empty answer
    def check(value: str) -> str:
        return validator(value) if value else value
    return check
