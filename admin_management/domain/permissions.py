"""Permission catalog: the closed, versioned set of grantable capabilities.

Loaded once at import into an immutable frozenset; there is no runtime
registration, so membership checks need no locking.
"""

from collections.abc import Iterable

from admin_management.domain.enums import Permission
from admin_management.domain.exceptions import UnknownPermissionException

# Bump when Permission gains or loses members.
PERMISSION_CATALOG_VERSION = 1

_CATALOG: frozenset[Permission] = frozenset(Permission)
_CATALOG_VALUES: frozenset[str] = frozenset(p.value for p in _CATALOG)


def all_known_permissions() -> frozenset[Permission]:
    """Return every permission in the catalog."""
    return _CATALOG


def is_valid(permission: Permission | str) -> bool:
    """Return True if permission (enum member or its string value) is in the catalog."""
    if isinstance(permission, Permission):
        return permission in _CATALOG
    return permission in _CATALOG_VALUES


def parse_permissions(values: Iterable[Permission | str]) -> frozenset[Permission]:
    """Convert values to a permission set, all-or-nothing.

    Raises:
        UnknownPermissionException: listing every value not in the catalog
            (in input order, without duplicates).
    """
    unknown: list[str] = []
    parsed: set[Permission] = set()
    for value in values:
        if is_valid(value):
            parsed.add(Permission(value))
        else:
            text = str(value)
            if text not in unknown:
                unknown.append(text)
    if unknown:
        raise UnknownPermissionException(unknown)
    return frozenset(parsed)
