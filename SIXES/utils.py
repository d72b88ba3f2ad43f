from datetime import datetime, date
import re


### helper to parse dates properly and consistently

# Accepts strings like:
#   2026-10-19
#   October 19, 2026
#   Oct 19, 2026
#   Oct. 19, 2026     (note the dot)
#   10/19/2026
# Returns a datetime.date
def parse_date_any(date_value):
    if isinstance(date_value, (datetime, date)):
        return date_value.date() if isinstance(date_value, datetime) else date_value

    s = str(date_value).strip()

    # normalize: remove trailing dot after abbreviated months, e.g., "Oct." -> "Oct"
    s = re.sub(r'\b(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\.(?=\s)', r'\1', s)

    for fmt in ("%Y-%m-%d", "%B %d, %Y", "%b %d, %Y", "%m/%d/%Y"):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            pass

    raise ValueError(f"Unrecognized date format: {date_value!r}")

# report header style, e.g. "Oct 19, 2026"
def to_short(date_value) -> str:
    return parse_date_any(date_value).strftime("%b %d, %Y")
