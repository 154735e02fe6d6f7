from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Tone(str, Enum):
    FORMAL = "formal"
    CASUAL = "casual"
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    PERSUASIVE = "persuasive"


class EmailRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email_content: str = Field(alias="emailContent", min_length=1)
    tone: Optional[Tone] = None

    @field_validator("tone", mode="before")
    @classmethod
    def normalize_tone(cls, value):
        # blank tone means "no tone clause"
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value


# --- Gemini generateContent response ---
# Every nested field is optional so a missing one is an explicit None.

class Part(BaseModel):
    text: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def scalar_text(cls, value):
        # numbers and booleans read back as their JSON text
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class Content(BaseModel):
    parts: Optional[List[Part]] = None
    role: Optional[str] = None


class Candidate(BaseModel):
    content: Optional[Content] = None
    finishReason: Optional[str] = None

