# primality/config.py
# Environment-driven knobs, read at call time so tests and the CLI can override them.
import os

TRIAL_DIGITS_ENV = "PRIMALITY_TRIAL_DIGITS"
BACKEND_ENV = "PRIMALITY_BACKEND"

DEFAULT_TRIAL_DIGITS = 10
DEFAULT_BACKEND = "oracle"

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def trial_division_digits() -> int:
    raw = os.environ.get(TRIAL_DIGITS_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_TRIAL_DIGITS
    try:
        digits = int(raw)
    except ValueError:
        raise ValueError(f"{TRIAL_DIGITS_ENV} must be an integer, got {raw!r}") from None
    if digits < 1:
        raise ValueError(f"{TRIAL_DIGITS_ENV} must be >= 1, got {digits}")
    return digits


def backend_name() -> str:
    return (os.environ.get(BACKEND_ENV) or DEFAULT_BACKEND).strip().lower()
