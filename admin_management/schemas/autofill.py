"""Autofill suggestion schemas and converter."""

from pydantic import BaseModel

from admin_management.domain.enums import SuggestedValueType


class SuggestedValueMapping(BaseModel):
    """Candidate values for one profile field category."""

    type: SuggestedValueType
    values: list[str]


class AutofillValuesResponse(BaseModel):
    values: list[SuggestedValueMapping]


def to_autofill_response(
    grouped: dict[SuggestedValueType, list[str]],
) -> AutofillValuesResponse:
    return AutofillValuesResponse(
        values=[
            SuggestedValueMapping(type=value_type, values=list(values))
            for value_type, values in grouped.items()
        ]
    )
