from pydantic import BaseModel, ConfigDict, Field


class _Ack(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True


class InsertResult(_Ack):
    inserted_id: str = Field(serialization_alias="insertedId")


class UpdateResult(_Ack):
    matched_count: int = Field(serialization_alias="matchedCount")
    modified_count: int = Field(serialization_alias="modifiedCount")
    upserted_id: str | None = Field(default=None, serialization_alias="upsertedId")
    upserted_count: int = Field(default=0, serialization_alias="upsertedCount")


class DeleteResult(_Ack):
    deleted_count: int = Field(serialization_alias="deletedCount")


class Success(BaseModel):
    success: bool = True
