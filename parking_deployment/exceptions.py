class DeploymentError(Exception):
    """Base exception for the urban parking deployment tooling."""


class InvalidDeploymentRecord(DeploymentError, ValueError):
    """Raised when a stored deployment record cannot be parsed."""


class ConfigurationError(DeploymentError, ValueError):
    """Raised when deployment configuration values are invalid."""


class ContractNotFoundError(DeploymentError, ValueError):
    """Raised when a contract name is not part of the active project."""


class DeploymentAborted(DeploymentError):
    """Raised when the operator declines a deployment step."""


class NetworkMismatchError(ConfigurationError):
    """Raised when a stored record belongs to a different chain than the provider."""
