class ArnavError(RuntimeError):
    """
    Base de todos os erros do arnav que o CLI sabe exibir.
    """


class NotNavigableError(ArnavError):
    pass


class DaoNotFoundError(ArnavError):
    pass


class MissingParentFilterError(ArnavError):
    def __init__(self, service: str, resource_type: str, key: str) -> None:
        super().__init__(f"{service}/{resource_type} exige o filtro '{key}'.")
        self.key = key


class AwsCallError(ArnavError):
    """
    Falha de chamada AWS (ClientError ou BotoCoreError) já traduzida para o CLI.
    """

    def __init__(self, message: str, code: str = "") -> None:
        super().__init__(message)
        self.code = code


class ResourceNotFoundError(AwsCallError):
    pass


class AccessDeniedError(AwsCallError):
    pass


class ThrottledError(AwsCallError):
    pass


class AwsValidationError(AwsCallError):
    pass


class ConfigError(ArnavError):
    pass


class ActionError(ArnavError):
    pass


class EmptyCommandError(ActionError):
    pass


class UnsafeValueError(ActionError):
    pass


class ReadOnlyError(ActionError):
    pass
