from typing import Union

from pydantic import BaseModel, ConfigDict


class NameID(BaseModel):
    """
    saml:NameIDType, used for the Issuer of the request
    """

    model_config = ConfigDict(validate_assignment=True)

    value: Union[str, None] = None
    format: Union[str, None] = None
