"""Pydantic models for tags and cached tag clouds."""

import math
from typing import List, Optional, Union

from pydantic import BaseModel, Field, FiniteFloat


class Tag(BaseModel):
    """A single tag with its usage count and, once weighted, its band."""

    name: str
    count: int = Field(default=0, ge=0)
    # Dampened popularity supplied by the caller; log(count) when omitted.
    distributed: Optional[FiniteFloat] = None
    weight: Optional[int] = None
    id: Optional[Union[int, str]] = None
    description: Optional[str] = None
    link: Optional[str] = None

    def distributed_value(self) -> float:
        """
        Return the value the weighting uses for this tag.
        """
        if self.distributed is not None:
            return self.distributed
        if self.count <= 0:
            return 0.0
        return math.log(self.count)


class TagCloudSnapshot(BaseModel):
    """Serialisable state of a cloud, as written to and read from a cache store."""

    id: Union[int, str]
    steps: int = Field(gt=0)
    tags: List[Tag] = Field(default_factory=list)
