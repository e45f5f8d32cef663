"""Contract implementations for every role of a network, and their resolution."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from common.logging_utils import Timer, extra_context, is_debug_enabled

from .address_set import AddressSet
from .errors import RoleResolutionError, SuperchainError
from .models import ContractVersions, ImplementationList, Role, VersionedContract
from .schemas import CONTRACT_IMPLEMENTATIONS_SCHEMA, validate_payload

logger = logging.getLogger(__name__)


class ContractImplementations:
    """Set of contract implementations deployed on a network.

    Every role is always present; a role without data holds an empty
    ``AddressSet`` so merge and resolve never need to check for absence.
    """

    def __init__(self, sets: Optional[Mapping[Role, AddressSet]] = None):
        sets = sets or {}
        self._sets: Dict[Role, AddressSet] = {}
        for role in Role:
            address_set = sets.get(role)
            self._sets[role] = address_set if address_set is not None else AddressSet()

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ContractImplementations":
        """Build implementations from a parsed mapping keyed by configuration key.

        Args:
            data: e.g. ``{"l1_standard_bridge": {"1.1.0": "0x..."}}``; missing
                or null roles become empty sets.

        Raises:
            SchemaError: the mapping does not have the expected shape
        """
        if data is None:
            return cls()
        validate_payload(CONTRACT_IMPLEMENTATIONS_SCHEMA, data, "contract implementations")
        sets = {Role(key): AddressSet(entries) for key, entries in data.items() if entries is not None}
        return cls(sets)

    def __getitem__(self, role: Role) -> AddressSet:
        return self._sets[role]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContractImplementations):
            return NotImplemented
        return all(self[role] == other[role] for role in Role)

    def __repr__(self) -> str:
        return f"ContractImplementations({self.to_dict()!r})"

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {role.value: self._sets[role].to_dict() for role in Role}

    def merge(self, other: "ContractImplementations") -> None:
        """Merge ``other`` into these implementations; ``other`` wins on conflict."""
        for role in Role:
            self._sets[role].merge(other[role])

    def copy(self) -> "ContractImplementations":
        """Return a copy whose sets are independent of this one."""
        return ContractImplementations({role: s.copy() for role, s in self._sets.items()})

    def resolve(self, versions: ContractVersions) -> ImplementationList:
        """Resolve one implementation per role against the target versions.

        Roles are resolved in ``Role`` order and the first failure aborts.

        Raises:
            RoleResolutionError: wraps the EmptySetError or UnresolvableError
                of the first role that failed
        """
        contracts: Dict[Role, VersionedContract] = {}
        with Timer() as t:
            for role in Role:
                try:
                    contracts[role] = self._sets[role].resolve(versions[role])
                except SuperchainError as exc:
                    logger.warning(
                        "Failed to resolve %s: %s",
                        role.contract_name,
                        exc,
                        extra=extra_context(
                            event="resolve_bundle",
                            component="implementations",
                            outcome="error",
                            role=role.value,
                            target=versions[role],
                        ),
                    )
                    raise RoleResolutionError(role, exc) from exc
        if is_debug_enabled(logger):
            logger.debug(
                "Resolved implementation list",
                extra=extra_context(
                    event="resolve_bundle",
                    component="implementations",
                    outcome="success",
                    duration_ms=t.duration_ms(),
                ),
            )
        return ImplementationList(contracts=contracts)


def resolve_bundle(
    global_impls: ContractImplementations,
    network_impls: Optional[ContractImplementations],
    versions: ContractVersions,
) -> ImplementationList:
    """Resolve implementations for a network.

    Network entries are merged over a copy of the global implementations,
    so neither argument is modified.

    Args:
        global_impls: Implementations deployed on every network.
        network_impls: Network specific implementations, or None.
        versions: Target version per role.

    Returns:
        The resolved ImplementationList
    """
    effective = global_impls
    if network_impls is not None:
        effective = global_impls.copy()
        effective.merge(network_impls)
    return effective.resolve(versions)
