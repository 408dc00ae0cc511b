"""
Person Model
============

Domain model representing a person record stored in the people collection.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """
    Domain model representing a person.
    
    Documents are schemaless: only the name is required, missing fields
    stay None and unknown fields are kept as extras.
    """
    model_config = ConfigDict(extra="allow")
    
    id: Optional[Any] = Field(None, description="MongoDB _id as returned by the driver (usually an ObjectId)")
    name: str = Field(..., description="Full name (target of the unique index)")
    age: Optional[int] = Field(None, description="Age in years")
    city: Optional[str] = Field(None, description="City of residence")
    profession: Optional[str] = Field(None, description="Profession")
    salary: Optional[float] = Field(None, description="Monthly salary")
    
    def to_document(self) -> Dict[str, Any]:
        """Document body for insertion; the id is left for MongoDB to assign."""
        return self.model_dump(exclude={"id"}, exclude_none=True)
    
    def to_mongo(self) -> Dict[str, Any]:
        """The document as stored, _id first when known."""
        if self.id is None:
            return self.to_document()
        return {"_id": self.id, **self.to_document()}
