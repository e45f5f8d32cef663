"""Resolution of superchain contract implementations by semantic version."""

from .address_set import AddressSet
from .errors import (
    EmptySetError,
    EmptyTargetFieldError,
    InvalidVersionFormatError,
    RoleResolutionError,
    SchemaError,
    SuperchainError,
    UnknownChainError,
    UnresolvableError,
)
from .implementations import ContractImplementations, resolve_bundle
from .models import ContractVersions, ImplementationList, Role, VersionedContract
from .registry import SuperchainRegistry, build_registry
from .semver import canonicalize

__all__ = [
    "AddressSet",
    "ContractImplementations",
    "ContractVersions",
    "EmptySetError",
    "EmptyTargetFieldError",
    "ImplementationList",
    "InvalidVersionFormatError",
    "Role",
    "RoleResolutionError",
    "SchemaError",
    "SuperchainError",
    "SuperchainRegistry",
    "UnknownChainError",
    "UnresolvableError",
    "VersionedContract",
    "build_registry",
    "canonicalize",
    "resolve_bundle",
]
