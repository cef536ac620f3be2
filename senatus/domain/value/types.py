"""Domain value objects for Senatus.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import Field, field_validator

from senatus.domain.value.common import ValueObject


class User(ValueObject):
    """Identity snapshot supplied by the authentication provider.

    Carried by value with every topic, question and vote. The provider has
    already verified it; no further trust checks happen here.
    """

    external_id: str = Field(min_length=1, max_length=255)
    display_name: str = Field(min_length=1, max_length=255)

    @field_validator("external_id", "display_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject identity fields made only of whitespace."""
        if not v.strip():
            raise ValueError("Identity fields must not be blank")
        return v
