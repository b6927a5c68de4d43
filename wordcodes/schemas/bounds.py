from pydantic import BaseModel, Field, StrictInt, TypeAdapter
from typing import Annotated, Literal, Union

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


# Construction variants for a Codec, tagged by `mode`
class Unbounded(BaseModel):
    mode: Literal["unbounded"] = "unbounded"

    model_config = {"frozen": True}


class MinOnly(BaseModel):
    mode: Literal["min_only"] = "min_only"
    min: Int64

    model_config = {"frozen": True}


class Range(BaseModel):
    mode: Literal["range"] = "range"
    min: Int64
    max: Int64

    model_config = {"frozen": True}


Bounds = Annotated[Union[Unbounded, MinOnly, Range], Field(discriminator="mode")]

bounds_adapter = TypeAdapter(Bounds)
