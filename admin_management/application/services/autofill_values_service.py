"""Autofill suggestion registry: candidate values for admin profile fields."""

from __future__ import annotations

from collections.abc import Iterable

from admin_management.application.interfaces.repositories import IRepositoryScope
from admin_management.domain.enums import SuggestedValueType
from admin_management.domain.exceptions import ValidationException


class AutofillValuesService:
    """Read and seed suggested values for company, department and job title."""

    def __init__(self, scope: IRepositoryScope) -> None:
        self._scope = scope

    async def get_all(self) -> dict[SuggestedValueType, list[str]]:
        """Return every category in enum order, each with its values by position."""
        async with self._scope() as repos:
            rows = await repos.suggested_values.get_all()
        grouped: dict[SuggestedValueType, list[str]] = {t: [] for t in SuggestedValueType}
        for value_type, value in rows:
            grouped[value_type].append(value)
        return grouped

    async def set_values(
        self, value_type: SuggestedValueType, values: Iterable[str]
    ) -> list[str]:
        """Replace one category's ordered values; duplicates keep their first position.

        Raises:
            ValidationException: if any value is blank.
        """
        cleaned: list[str] = []
        for value in values:
            if value is None or not value.strip():
                raise ValidationException("Suggested values must not be blank", field="values")
            text = value.strip()
            if text not in cleaned:
                cleaned.append(text)
        async with self._scope() as repos:
            await repos.suggested_values.replace(value_type, cleaned)
        return cleaned
