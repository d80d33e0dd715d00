"""Base class for Pydantic wire models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen Pydantic model that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    def __repr__(self) -> str:
        """One-line summary keyed on the first identifying field present."""
        class_name = self.__class__.__name__

        for attr in ("code", "id", "name"):
            if attr in type(self).model_fields:
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"
