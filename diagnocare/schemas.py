from pydantic import BaseModel, ConfigDict, Field, field_validator

from diagnocare.models.user import ROLES


class InsertResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: str = Field(alias='insertedId')


class UpdateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    matched_count: int = Field(alias='matchedCount')
    modified_count: int = Field(alias='modifiedCount')


class DeleteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(alias='deletedCount')


class TokenRequest(BaseModel):
    model_config = ConfigDict(extra='allow')

    email: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError('Email is required.')
        return normalized


class TokenResponse(BaseModel):
    token: str


class CreateUserRequest(TokenRequest):
    pass


class RoleUpdateRequest(BaseModel):
    role: str

    @field_validator('role')
    @classmethod
    def validate_role(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in ROLES:
            raise ValueError('Invalid role.')
        return normalized


class SlotUpdateRequest(BaseModel):
    slots: int = Field(ge=0)


class PaymentIntentRequest(BaseModel):
    price: float = Field(gt=0, allow_inf_nan=False)


class PaymentIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias='clientSecret')

