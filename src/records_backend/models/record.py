"""
Record-related Pydantic models
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Level(str, Enum):
    """Seniority labels offered by the record form"""
    INTERN = "Intern"
    JUNIOR = "Junior"
    SENIOR = "Senior"


class RecordDraft(BaseModel):
    """
    Request body for creating or replacing a record.

    Every field is written on save, so a field left out of the body is
    stored as null rather than keeping its previous value. The level is a
    free string here; the form restricts it to a Level.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    position: Optional[str] = None
    level: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position,
            "level": self.level,
        }


def _as_text(value: Any) -> Optional[str]:
    # other writers may have stored non-string values
    return None if value is None else str(value)


class RecordResponse(BaseModel):
    id: str
    name: Optional[str] = None
    position: Optional[str] = None
    level: Optional[str] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "RecordResponse":
        return cls(
            id=str(document["_id"]),
            name=_as_text(document.get("name")),
            position=_as_text(document.get("position")),
            level=_as_text(document.get("level")),
        )


class InsertResultResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    inserted_id: Optional[str] = Field(None, alias="insertedId")

    @classmethod
    def from_result(cls, result) -> "InsertResultResponse":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateResultResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    matched_count: int = Field(0, alias="matchedCount")
    modified_count: int = Field(0, alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")

    @classmethod
    def from_result(cls, result) -> "UpdateResultResponse":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=None if upserted_id is None else str(upserted_id),
        )


class DeleteResultResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    deleted_count: int = Field(0, alias="deletedCount")

    @classmethod
    def from_result(cls, result) -> "DeleteResultResponse":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
