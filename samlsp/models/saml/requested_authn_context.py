from typing import List, Union

from pydantic import BaseModel, ConfigDict

from samlsp.models.enums import AuthnContextComparisonType, AuthnContextType


class AuthnContextReference(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    value: str
    kind: AuthnContextType = AuthnContextType.AUTHN_CONTEXT_CLASS_REF


class RequestedAuthnContext(BaseModel):
    """
    samlp:RequestedAuthnContext. The references are kept as a single ordered
    list of (value, kind) pairs, ``values`` and ``element_names`` are views on it.

    A comparison of None means the Comparison attribute is not specified.
    """

    model_config = ConfigDict(validate_assignment=True)

    comparison: Union[AuthnContextComparisonType, None] = None
    items: List[AuthnContextReference] = []

    @property
    def comparison_specified(self) -> bool:
        return self.comparison is not None

    @property
    def values(self) -> List[str]:
        return [item.value for item in self.items]

    @property
    def element_names(self) -> List[AuthnContextType]:
        return [item.kind for item in self.items]

    def add_reference(
        self,
        value: str,
        kind: AuthnContextType = AuthnContextType.AUTHN_CONTEXT_CLASS_REF,
    ) -> None:
        self.items.append(AuthnContextReference(value=value, kind=kind))
