"""Flat contact records produced by projections."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# Keys follow the projection's property order; values are scalars,
# lists of {"label", "value"} dicts (LabeledValue dumps), or None when the
# entry lacks the property.
ContactRecord = dict[str, Any]


class LabeledValue(BaseModel):
    """One value of a multi-valued property, tagged with its label (e.g. 'work')."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: Any = None
