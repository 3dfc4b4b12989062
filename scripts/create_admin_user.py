"""Register an admin user and print the confirmation code expiry.

Usage:
    python -m scripts.create_admin_user <email> <password> [--activate]
With --activate the admin is activated directly instead of waiting for
email confirmation. All imports use admin_management.*.
"""

import asyncio
import sys

from admin_management.application.dtos.admin_user import AdminProfile
from admin_management.core.composition import service_lifespan
from admin_management.domain.exceptions import AdminManagementException
from admin_management.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Register admin with the given email and password."""
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if len(args) < 2:
        print(
            "Usage: python -m scripts.create_admin_user <email> <password> [--activate]",
            file=sys.stderr,
        )
        sys.exit(1)
    email, password = args[0], args[1]
    activate = "--activate" in sys.argv

    setup_logging()
    async with service_lifespan() as services:
        try:
            result = await services.admin_users.register(AdminProfile(), email, password)
            if activate:
                await services.admin_users.update_profile(
                    result.admin.id, AdminProfile(), is_active=True
                )
        except AdminManagementException as e:
            print(f"{e.error_code}: {e.message}", file=sys.stderr)
            sys.exit(1)
    print(f"Created admin: {result.admin.id} ({result.admin.email})")
    if activate:
        print("Admin activated")
    else:
        print(
            "Confirmation code expires at "
            f"{result.verification_code_expires_at.isoformat()}"
        )


if __name__ == "__main__":
    asyncio.run(main())
