from __future__ import annotations
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    hash_algorithm: str = Field(default="sha3_256", alias="MERKLE_HASH_ALGORITHM")

    # Proofs with more steps than this are rejected without hashing
    max_proof_depth: int = Field(default=64, alias="MERKLE_MAX_PROOF_DEPTH", ge=1)

    log_level: str = Field(default="INFO", alias="MERKLE_LOG_LEVEL")

    @field_validator("hash_algorithm", mode="before")
    @classmethod
    def _normalize_algorithm(cls, v):
        if isinstance(v, str):
            return v.strip().lower().replace("-", "_")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()  # load at import
