"""Pydantic request/response schemas for the Identity API.

These are external contracts, kept separate from the Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterAccountRequest(BaseModel):
    email: str
    display_name: str = Field(min_length=1, max_length=100)
    role: str = "Listener"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "ania@example.com",
                    "display_name": "Ania",
                    "role": "Listener",
                }
            ]
        }
    }


class UpdateUserInformationRequest(BaseModel):
    street: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class AccountIdResponse(BaseModel):
    account_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class UserInformationSchema(BaseModel):
    street: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None


class AccountResponse(BaseModel):
    account_id: str
    email: str
    display_name: str
    role: str
    balance: float
    user_information: UserInformationSchema | None = None


class BalanceResponse(BaseModel):
    account_id: str
    balance: float
    currency: str


class LikesResponse(BaseModel):
    account_id: str
    ids: list[str]
