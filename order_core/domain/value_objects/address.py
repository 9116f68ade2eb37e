"""Delivery address value object."""
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..errors import ValidationError

_LABELS = {
    "street": "Street",
    "city": "City",
    "state": "State",
    "postal_code": "Postal code",
    "country": "Country",
}


@dataclass(frozen=True)
class Address:
    """
    Immutable delivery address.

    All five fields are required and stored trimmed. A changed address is a
    new ``Address`` value; equality is structural.
    """
    street: str
    city: str
    state: str
    postal_code: str
    country: str

    def __post_init__(self):
        for field_name, label in _LABELS.items():
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{label} is required", {"field": field_name})
            object.__setattr__(self, field_name, value.strip())

    @classmethod
    def create(cls, props: Mapping[str, Any]) -> "Address":
        """Build from a mapping; accepts ``postal_code`` or ``postalCode``."""
        return cls(
            street=props.get("street"),
            city=props.get("city"),
            state=props.get("state"),
            postal_code=props.get("postal_code", props.get("postalCode")),
            country=props.get("country"),
        )

    def format(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.postal_code}, {self.country}"

    def __str__(self) -> str:
        return self.format()

    def to_dict(self) -> Dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
        }
