"""Entry value extraction and projection of raw entries into contact records."""

from .engine import (
    CustomProjection,
    FullProjection,
    ProjectionSpec,
    Projector,
    ThinProjection,
    build_projector,
    classify_projection,
    parse_custom_schema,
    project_entries,
)
from .extractor import extract, label_from_rel

__all__ = [
    "CustomProjection",
    "FullProjection",
    "ProjectionSpec",
    "Projector",
    "ThinProjection",
    "build_projector",
    "classify_projection",
    "extract",
    "label_from_rel",
    "parse_custom_schema",
    "project_entries",
]
