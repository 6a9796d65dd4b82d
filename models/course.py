from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Protocol

class TeeMetadata(BaseModel):
    """Rating and slope for one tee at a course."""
    name: str
    rating: Optional[float] = Field(None, ge=55.0, le=85.0)
    slope: Optional[int] = Field(None, ge=55, le=155)

class HoleMetadata(BaseModel):
    """Par and stroke index for a hole."""
    number: int = Field(..., ge=1, le=18)
    par: Optional[int] = Field(None, ge=3, le=6)
    stroke_index: Optional[int] = Field(None, ge=1, le=18)

class CourseMetadata(BaseModel):
    """Course facts needed to normalize rounds played there."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None
    tees: List[TeeMetadata] = Field(default_factory=list)
    holes: List[HoleMetadata] = Field(default_factory=list)

    def get_tee(self, name: str) -> Optional[TeeMetadata]:
        """Get a tee by its name, ignoring case."""
        for tee in self.tees:
            if tee.name.lower() == name.lower():
                return tee
        return None

    def get_hole(self, number: int) -> Optional[HoleMetadata]:
        """Get a hole by its number (1-18)."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

class CourseMetadataRepository(Protocol):
    """Interface for course metadata lookups.

    Any class with a matching method signature satisfies this protocol.
    """

    async def get_course_metadata(self, course_id: str) -> Optional[CourseMetadata]:
        """Return the course's tees and holes, or None if unknown."""
        ...
