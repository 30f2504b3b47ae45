from __future__ import annotations

from dataclasses import replace

from stitchstyle.domain import GarmentStyle, ItemDesign, MeasurementField


class ValidationError(Exception):
    """Raised when catalog validation fails."""


def validate_design(design: ItemDesign, style: GarmentStyle | None) -> ItemDesign:
    """Check a design against its style and fill in the denormalized name."""

    if style is None:
        raise ValidationError(f"unknown style {design.style_id!r}")
    allowed = set(style.required_measurements)
    unexpected = sorted(key for key in design.measurements if key not in allowed)
    if unexpected:
        raise ValidationError(f"measurements not used by style {style.name}: {', '.join(unexpected)}")
    return replace(design, style_name=style.name)


def validate_style_measurements(required: list[str], fields: list[MeasurementField]) -> list[str]:
    known = {item.id for item in fields}
    unknown = [value for value in required if value not in known]
    if unknown:
        raise ValidationError(f"unknown measurement fields: {', '.join(unknown)}")
    deduped: list[str] = []
    for value in required:
        if value not in deduped:
            deduped.append(value)
    return deduped
