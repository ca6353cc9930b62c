from typing import Union


class SamlBaseException(Exception):
    def __init__(
        self,
        *,
        error_description: str,
        log_message: Union[str, None] = None,
    ):
        super().__init__(error_description if log_message is None else log_message)
        self.error_description = error_description
        self.log_message = log_message


class ConfigurationException(SamlBaseException):
    """
    The service provider is mis-configured. Retrying will not help, the
    configuration has to be fixed.
    """


class ServiceProviderNotSetException(ConfigurationException):
    def __init__(self) -> None:
        super().__init__(
            error_description="The service provider entity id is not set, please check your configs."
        )
