from pydantic import BaseModel, field_validator

class Match(BaseModel):
    word: str
    frequency: int

    @field_validator("frequency")
    def positive_frequency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("frequency must be at least 1")
        return v

    def __str__(self):
        return f"{self.word} ({self.frequency})"
