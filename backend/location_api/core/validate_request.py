"""Request Validation — checks the front-door schema validation does not cover.

Invariants:
    - PURE: no IO, no logging; returns a value or a Failure
    - maxLocations accepted only as a positive decimal integer without leading zero
"""

import re

from location_api.core.outcomes import Failure, invalid_request

MAX_LOCATIONS_PATTERN = re.compile(r"^[1-9][0-9]*$")


def parse_max_locations(raw: str | None) -> int | None | Failure:
    """Parse the listing page-size query parameter.

    None (parameter absent) means "store default page size".
    """
    if raw is None:
        return None
    if not MAX_LOCATIONS_PATTERN.fullmatch(raw):
        return invalid_request()
    return int(raw)
