"""Seed autofill suggestions (company, department, job title).

Usage:
    python -m scripts.seed_autofill_values [path/to/values.json]
The JSON file maps each category ("company", "department", "job_title")
to an ordered list of values. Without a file, DEFAULT_VALUES is used.
Categories present in the input replace what is stored.
"""

import asyncio
import json
import sys
from pathlib import Path

from admin_management.core.composition import service_lifespan
from admin_management.domain.enums import SuggestedValueType
from admin_management.domain.exceptions import AdminManagementException
from admin_management.shared.telemetry.logging import setup_logging

DEFAULT_VALUES: dict[str, list[str]] = {
    "department": [
        "Engineering",
        "Finance",
        "Marketing",
        "Operations",
        "Sales",
        "Support",
    ],
    "job_title": [
        "Administrator",
        "Analyst",
        "Manager",
        "Director",
    ],
}


def load_values(path: str | None) -> dict[SuggestedValueType, list[str]]:
    """Parse category -> values; unknown categories abort with a message."""
    raw = DEFAULT_VALUES if path is None else json.loads(Path(path).read_text("utf-8"))
    out: dict[SuggestedValueType, list[str]] = {}
    for key, values in raw.items():
        try:
            value_type = SuggestedValueType(key)
        except ValueError:
            print(f"Unknown category: {key}", file=sys.stderr)
            sys.exit(1)
        out[value_type] = list(values)
    return out


async def main() -> None:
    values = load_values(sys.argv[1] if len(sys.argv) > 1 else None)
    setup_logging()
    async with service_lifespan() as services:
        try:
            for value_type, items in values.items():
                stored = await services.autofill.set_values(value_type, items)
                print(f"{value_type.value}: {len(stored)} values")
        except AdminManagementException as e:
            print(f"{e.error_code}: {e.message}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
