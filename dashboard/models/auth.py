# dashboard/models/auth.py

from pydantic import BaseModel, ConfigDict, Field

from dashboard.models.fields import Email


class LoginCredentials(BaseModel):
    model_config = ConfigDict(validate_default=True)

    email: Email = None
    password: str = Field(None, min_length=6)
