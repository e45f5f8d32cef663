"""Exceptions raised while validating targets and resolving implementations."""

from typing import Optional


class SuperchainError(Exception):
    """Base class for all resolver errors."""


class SchemaError(SuperchainError, ValueError):
    """Raised when an inbound mapping fails to validate against its schema."""


class InvalidVersionFormatError(SuperchainError, ValueError):
    """Raised when a target version is not a valid semantic version."""

    def __init__(self, field: str, version: str):
        self.field = field
        self.version = version
        super().__init__(f"invalid semver {version} for field {field}")


class EmptyTargetFieldError(SuperchainError, ValueError):
    """Raised when a target version field is blank."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"empty version for field {field}")


class EmptySetError(SuperchainError, LookupError):
    """Raised when resolving against a set with no implementations."""

    def __init__(self, message: str = "no implementations found"):
        super().__init__(message)


class UnresolvableError(SuperchainError, LookupError):
    """Raised when no implementation reaches the target version."""

    def __init__(self, target: Optional[str] = None):
        self.target = target
        message = "cannot resolve semver"
        if target:
            message = f"{message} {target}"
        super().__init__(message)


class RoleResolutionError(SuperchainError):
    """Raised when a single role of a bundle cannot be resolved."""

    def __init__(self, role, cause: SuperchainError):
        self.role = role
        self.cause = cause
        super().__init__(f"{role.contract_name}: {cause}")


class UnknownChainError(SuperchainError, LookupError):
    """Raised when a registry has no implementations for a chain id."""

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"unknown chain {chain_id}")
