from typing import List

from pydantic import BaseModel, ConfigDict


class AudienceRestriction(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    audiences: List[str] = []


class Conditions(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    audience_restrictions: List[AudienceRestriction] = []
