from pydantic import BaseModel, Field
from typing import Optional


class Vote(BaseModel):
    name: str = Field(..., examples=["Ana"])
    email: str = Field(..., examples=["ana@example.com"])
    country: str = Field(..., examples=["Chile"])


class VoteIn(BaseModel):
    # Optional so a missing field gets the 400 "Missing required data" from the store, not a 422
    name: Optional[str] = None
    email: Optional[str] = None
    country: Optional[str] = None
