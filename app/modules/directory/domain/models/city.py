# 📄 File: app/modules/directory/domain/models/city.py
# 🧭 Purpose (Layman Explanation):
# Describes a city page on CigarMap: its name, its web address part (slug), a short blurb
# and whether it is featured on the home page.
# 🧪 Purpose (Technical Summary):
# City domain entity with URL-safe slug validation.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, app.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# city_repository.py, directory admin service, public cities API

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.validators import validate_slug


class City(BaseModel):
    """City entity. ``slug`` is unique across cities and safe to use in URLs."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, max_length=120)
    slug: str
    description: Optional[str] = None
    hero_image: Optional[str] = None
    is_featured: bool = False

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('slug')
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        result = validate_slug(v)
        if not result.is_valid:
            raise ValueError("; ".join(result.errors))
        return v
