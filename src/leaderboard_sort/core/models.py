from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(frozen=True)  # identity, never reassigned
    score: int  # any integer, no range check

    def __str__(self) -> str:
        return f"{self.name:<15} : {self.score:3d}"


class UpdateResult(BaseModel):
    name: str
    found: bool
    old_score: Optional[int] = None
    new_score: Optional[int] = None
    old_rank: Optional[int] = None  # 1-based
    new_rank: Optional[int] = None

    def __bool__(self) -> bool:
        return self.found

    @property
    def moved(self) -> int:
        """Number of places climbed (negative when the record dropped)."""
        if not self.found:
            return 0
        return self.old_rank - self.new_rank
