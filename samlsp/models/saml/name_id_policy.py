from typing import Union

from pydantic import BaseModel, ConfigDict


class NameIDPolicy(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    format: Union[str, None] = None
    allow_create: Union[bool, None] = None
    sp_name_qualifier: Union[str, None] = None
