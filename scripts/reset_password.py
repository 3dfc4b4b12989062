"""Reset an admin's password.

Usage:
    python -m scripts.reset_password <admin_user_id> <new_password>
All imports use admin_management.*.
"""

import asyncio
import sys

from admin_management.core.composition import service_lifespan
from admin_management.domain.exceptions import AdminManagementException
from admin_management.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Reset password for admin_user_id."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.reset_password <admin_user_id> <new_password>",
            file=sys.stderr,
        )
        sys.exit(1)
    admin_user_id = sys.argv[1]
    new_password = sys.argv[2]

    setup_logging()
    async with service_lifespan() as services:
        try:
            admin = await services.admin_users.reset_password(admin_user_id, new_password)
        except AdminManagementException as e:
            print(f"{e.error_code}: {e.message}", file=sys.stderr)
            sys.exit(1)
    print(f"Password reset for admin {admin.id} ({admin.email})")


if __name__ == "__main__":
    asyncio.run(main())
