# livingroom/core/utils.py
import re
import time

# ASCII digits only: \d would also accept other scripts' digits
PHONE_RE = re.compile(r"[0-9]{10}")


def get_current_time_ms():
    return int(time.time() * 1000)


def is_valid_phone(phone) -> bool:
    return bool(phone) and PHONE_RE.fullmatch(phone) is not None
