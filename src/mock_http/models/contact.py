"""
Contact fixtures served by /contact and /contacts.

Records are rebuilt on every call; nothing here is shared between requests.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Contact(BaseModel):
    """Flat contact record, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email: str = Field(..., description="Email address")
    phone: str = Field(..., description="Phone number, display format")
    company: str = Field(..., description="Company name")
    position: Optional[str] = Field(None, description="Job title")
    source: Optional[str] = Field(None, description="Where the record came from")

    def to_json(self) -> dict:
        """Wire form: camelCase keys, unset optional fields left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


def sample_contact() -> Contact:
    """The single contact returned by GET /contact."""
    return Contact(
        first_name="Алексей",
        last_name="Петров",
        email="alexey.petrov@example.com",
        phone="+7 912 345-67-89",
        company="ООО Технологии",
        position="Директор по развитию",
        source="mock-server",
    )


def sample_contacts() -> List[Contact]:
    """The three contacts returned by GET /contacts, in order."""
    return [
        Contact(
            first_name="Алексей",
            last_name="Петров",
            email="alexey.petrov@example.com",
            phone="+7 912 345-67-89",
            company="ООО Технологии",
        ),
        Contact(
            first_name="Мария",
            last_name="Иванова",
            email="maria.ivanova@example.com",
            phone="+7 903 111-22-33",
            company="ЗАО Инновации",
        ),
        Contact(
            first_name="Дмитрий",
            last_name="Сидоров",
            email="dmitry.sidorov@example.com",
            phone="+7 916 444-55-66",
            company="ИП Сидоров",
        ),
    ]
