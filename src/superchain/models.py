"""Data models for contract roles, target versions and resolution results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional

from .errors import EmptyTargetFieldError, InvalidVersionFormatError
from .schemas import CONTRACT_VERSIONS_SCHEMA, validate_payload
from .semver import canonicalize, is_valid


class Role(Enum):
    """Contract roles, in the order they are resolved and reported.

    Values are the configuration keys; ``contract_name`` is the name used
    when a resolved bundle is exported.
    """

    L1_CROSS_DOMAIN_MESSENGER = "l1_cross_domain_messenger"
    L1_ERC721_BRIDGE = "l1_erc721_bridge"
    L1_STANDARD_BRIDGE = "l1_standard_bridge"
    L2_OUTPUT_ORACLE = "l2_output_oracle"
    OPTIMISM_MINTABLE_ERC20_FACTORY = "optimism_mintable_erc20_factory"
    OPTIMISM_PORTAL = "optimism_portal"
    SYSTEM_CONFIG = "system_config"

    @property
    def contract_name(self) -> str:
        """Exported contract name, e.g. "L1StandardBridge"."""
        return _CONTRACT_NAMES[self]

    @classmethod
    def from_key(cls, key: str) -> "Role":
        """Look up a role by configuration key or contract name."""
        for role in cls:
            if key in (role.value, role.contract_name):
                return role
        raise KeyError(key)


_CONTRACT_NAMES = {
    Role.L1_CROSS_DOMAIN_MESSENGER: "L1CrossDomainMessenger",
    Role.L1_ERC721_BRIDGE: "L1ERC721Bridge",
    Role.L1_STANDARD_BRIDGE: "L1StandardBridge",
    Role.L2_OUTPUT_ORACLE: "L2OutputOracle",
    Role.OPTIMISM_MINTABLE_ERC20_FACTORY: "OptimismMintableERC20Factory",
    Role.OPTIMISM_PORTAL: "OptimismPortal",
    Role.SYSTEM_CONFIG: "SystemConfig",
}


@dataclass(frozen=True)
class VersionedContract:
    """A contract address paired with the semantic version deployed there."""
    version: str
    address: str

    def to_dict(self) -> Dict[str, str]:
        return {"version": self.version, "address": self.address}


@dataclass(frozen=True)
class ContractVersions:
    """Desired semantic version of every contract role.

    Built once from configuration and checked once with ``check()`` before
    it is used for resolution.
    """
    versions: Dict[Role, str] = field(default_factory=dict)

    def __getitem__(self, role: Role) -> str:
        return self.versions.get(role, "")

    def check(self) -> None:
        """Sanity check every role's version string.

        Raises:
            EmptyTargetFieldError: a role has no version
            InvalidVersionFormatError: a version is not valid semver after canonicalization
        """
        for role in Role:
            version = self[role]
            if version is None or version == "":
                raise EmptyTargetFieldError(role.contract_name)
            version = canonicalize(version)
            if not is_valid(version):
                raise InvalidVersionFormatError(role.contract_name, version)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ContractVersions":
        """Build target versions from a mapping keyed by configuration key.

        Unknown keys are rejected; missing keys are left blank and caught
        by ``check()``.
        """
        validate_payload(CONTRACT_VERSIONS_SCHEMA, data, "contract versions")
        versions = {Role.from_key(key): str(value) for key, value in data.items()}
        return cls(versions=versions)

    def to_dict(self) -> Dict[str, str]:
        return {role.value: self[role] for role in Role}


@dataclass(frozen=True)
class ImplementationList:
    """Resolved implementation contract for every role of a network."""
    contracts: Dict[Role, VersionedContract]

    def __getitem__(self, role: Role) -> VersionedContract:
        return self.contracts[role]

    def __iter__(self) -> Iterator[Role]:
        return iter(role for role in Role if role in self.contracts)

    def get(self, role: Role) -> Optional[VersionedContract]:
        return self.contracts.get(role)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Export as ``{ContractName: {"version": ..., "address": ...}}``."""
        return {role.contract_name: self.contracts[role].to_dict() for role in self}
