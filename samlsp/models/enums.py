from enum import Enum


class BindingType(str, Enum):
    NOT_SET = "notset"
    ARTIFACT = "artifact"
    POST = "post"
    REDIRECT = "redirect"
    SOAP = "soap"


class AuthenticationContextComparison(str, Enum):
    NOT_SET = "notset"
    EXACT = "exact"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    BETTER = "better"


class AuthnContextComparisonType(str, Enum):
    """
    Values of the Comparison attribute of samlp:RequestedAuthnContext
    """

    EXACT = "exact"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    BETTER = "better"


class AuthnContextType(str, Enum):
    AUTHN_CONTEXT_CLASS_REF = "AuthnContextClassRef"
    AUTHN_CONTEXT_DECL_REF = "AuthnContextDeclRef"
