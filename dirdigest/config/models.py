from typing import Literal

from pydantic import BaseModel, Field, field_validator

from dirdigest.hashing.models import HashAlgorithm
from dirdigest.hashing.tree import DEFAULT_CHUNK_SIZE


class HashingConfig(BaseModel):
    algorithm: HashAlgorithm = HashAlgorithm.SHA256
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    workers: int = Field(default=1, ge=1)
    ignore_patterns: list[str] = Field(default_factory=list)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, v: object) -> HashAlgorithm:
        return HashAlgorithm.parse(v)


class DirDigestConfig(BaseModel):
    hashing: HashingConfig = Field(default_factory=HashingConfig)
    log_level: Literal["debug", "info", "warning", "error"] = "warning"
