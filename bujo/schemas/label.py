"""Label presentation and update parameters."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LabelView(BaseModel):
    """
    A label as shown to callers.

    Items are first built with id-only views; label resolution swaps
    them for complete ones.
    """

    id: int
    value: str = ""
    icon: Optional[str] = None
    missing: bool = Field(
        default=False,
        description="True when the label no longer exists (placeholder policy)",
    )

    @classmethod
    def placeholder(cls, label_id: int) -> "LabelView":
        return cls(id=label_id, missing=True)


class UpdateLabelParams(BaseModel):
    """
    Partial update of a label.

    Only fields explicitly passed are applied; ``icon=None`` passed
    explicitly clears the icon, an omitted icon leaves it alone.
    ``value=None`` is rejected since labels always have a name.

    Example:
        UpdateLabelParams(value="errands")          # rename only
        UpdateLabelParams(icon="CarOutlined")       # icon only
    """

    value: Optional[str] = None
    icon: Optional[str] = None

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: Optional[str]) -> Optional[str]:
        """A label name may be omitted but never explicitly cleared."""
        if v is None:
            raise ValueError("Label name cannot be set to null")
        return v

    def has_value(self) -> bool:
        return "value" in self.model_fields_set

    def has_icon(self) -> bool:
        return "icon" in self.model_fields_set
