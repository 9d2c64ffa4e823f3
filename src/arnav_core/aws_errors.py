from typing import Optional

from botocore.exceptions import ClientError

from .errors import (
    AccessDeniedError,
    AwsCallError,
    AwsValidationError,
    ResourceNotFoundError,
    ThrottledError,
)


NOT_FOUND_CODES = (
    "NotFound",
    "ResourceNotFoundException",
    "NoSuchEntity",
    "404",
    "NoSuchBucket",
    "NoSuchKey",
    "NotFoundException",
    "ResourceNotFoundFault",
    "EntityNotFoundException",
    "RepositoryNotFoundException",
    "StateMachineDoesNotExist",
    "InvalidInstanceID.NotFound",
    "InvalidVpcID.NotFound",
    "InvalidSubnetID.NotFound",
)

ACCESS_DENIED_CODES = (
    "AccessDenied",
    "UnauthorizedAccess",
    "Forbidden",
    "403",
    "AccessDeniedException",
    "AuthorizationError",
    "UnauthorizedException",
)

THROTTLING_CODES = (
    "Throttling",
    "TooManyRequestsException",
    "RequestLimitExceeded",
    "429",
    "ThrottlingException",
    "ProvisionedThroughputExceededException",
    "SlowDown",
)

RESOURCE_IN_USE_CODES = (
    "ResourceInUseException",
    "DependencyViolation",
    "ResourceInUse",
    "DeleteConflict",
    "HasAttachedResources",
)

VALIDATION_CODES = (
    "ValidationError",
    "ValidationException",
    "InvalidParameterException",
    "InvalidParameterValue",
    "MalformedInput",
    "InvalidInput",
)


def error_code(exc: Optional[BaseException]) -> str:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code", "") or ""
    return ""


def error_message(exc: Optional[BaseException]) -> str:
    if exc is None:
        return ""
    if isinstance(exc, ClientError):
        message = exc.response.get("Error", {}).get("Message")
        if message:
            return message
    return str(exc)


def _has_code(exc: Optional[BaseException], codes: tuple) -> bool:
    if exc is None:
        return False

    code = error_code(exc)
    if code and code in codes:
        return True

    # Erros fora do ClientError (ou embrulhados) só trazem o código na mensagem
    text = str(exc)
    return any(c in text for c in codes)


def is_not_found(exc: Optional[BaseException]) -> bool:
    return _has_code(exc, NOT_FOUND_CODES)


def is_access_denied(exc: Optional[BaseException]) -> bool:
    return _has_code(exc, ACCESS_DENIED_CODES)


def is_throttling(exc: Optional[BaseException]) -> bool:
    return _has_code(exc, THROTTLING_CODES)


def is_resource_in_use(exc: Optional[BaseException]) -> bool:
    return _has_code(exc, RESOURCE_IN_USE_CODES)


def is_validation_error(exc: Optional[BaseException]) -> bool:
    return _has_code(exc, VALIDATION_CODES)


def to_arnav_error(exc: BaseException, context: str = "") -> AwsCallError:
    """
    Traduz um erro do boto3 na subclasse de AwsCallError que o CLI exibe.
    `context` identifica o recurso, ex.: "S3 Bucket 'meu-bucket'".
    """
    code = error_code(exc)
    prefix = f"{context}: " if context else ""

    if is_not_found(exc):
        return ResourceNotFoundError(f"{prefix}não encontrado ({error_message(exc)})", code)
    if is_access_denied(exc):
        return AccessDeniedError(f"{prefix}acesso negado ({error_message(exc)})", code)
    if is_throttling(exc):
        return ThrottledError(f"{prefix}limite de requisições da AWS ({error_message(exc)})", code)
    if is_validation_error(exc):
        return AwsValidationError(f"{prefix}parâmetro inválido ({error_message(exc)})", code)
    if is_resource_in_use(exc):
        return AwsCallError(f"{prefix}recurso em uso ({error_message(exc)})", code)
    return AwsCallError(f"{prefix}{error_message(exc)}", code)
