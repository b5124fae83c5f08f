from pydantic import BaseModel, field_validator
from typing import Optional, List

from sqid_codec.utils.encoding import DEFAULT_ALPHABET


class CodecOptions(BaseModel):
    # All fields are optional; anything left out falls back to its default.
    alphabet: Optional[str] = DEFAULT_ALPHABET
    min_length: int = 0
    # None selects the built-in blocklist, an empty list disables blocking
    blocklist: Optional[List[str]] = None

    model_config = {"frozen": True}

    @field_validator('alphabet')
    def default_empty_alphabet(cls, v):
        if not v:
            return DEFAULT_ALPHABET
        return v

    @classmethod
    def from_settings(cls, settings) -> "CodecOptions":
        return cls(
            alphabet=settings.ALPHABET,
            min_length=settings.MIN_LENGTH,
            blocklist=settings.BLOCKLIST,
        )
