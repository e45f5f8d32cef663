"""Per-chain implementation registry.

A registry is constructed once by whatever process hosts the resolver and
is read-only afterwards. It maps an L1 chain id to the implementations
available there: the global implementations, deployed everywhere via
create2, with that network's own implementations merged on top.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from common.logging_utils import extra_context

from .errors import UnknownChainError
from .implementations import ContractImplementations
from .models import ContractVersions, ImplementationList

logger = logging.getLogger(__name__)


class SuperchainRegistry:
    """Immutable view of implementations per chain plus the target versions."""

    def __init__(self, implementations: Mapping[int, ContractImplementations], versions: ContractVersions):
        self._implementations = MappingProxyType(
            {chain_id: impls.copy() for chain_id, impls in implementations.items()}
        )
        self._versions = versions

    @property
    def versions(self) -> ContractVersions:
        return self._versions

    def chain_ids(self) -> List[int]:
        return sorted(self._implementations)

    def implementations(self, chain_id: int) -> ContractImplementations:
        """Return a copy of the implementations of ``chain_id``.

        Raises:
            UnknownChainError: no implementations were registered for the chain
        """
        impls = self._implementations.get(chain_id)
        if impls is None:
            raise UnknownChainError(chain_id)
        return impls.copy()

    def resolve(self, chain_id: int, versions: Optional[ContractVersions] = None) -> ImplementationList:
        """Resolve the implementations of ``chain_id``.

        Args:
            chain_id: L1 chain id.
            versions: Target versions; defaults to the registry's own.
        """
        impls = self._implementations.get(chain_id)
        if impls is None:
            raise UnknownChainError(chain_id)
        return impls.resolve(versions if versions is not None else self._versions)


def build_registry(
    global_impls: ContractImplementations,
    networks: Mapping[int, Optional[ContractImplementations]],
    versions: ContractVersions,
) -> SuperchainRegistry:
    """Build a registry from global and per-network implementations.

    Target versions are checked here, once, so that resolution never has to
    re-validate them.

    Args:
        global_impls: Implementations shared by every network.
        networks: Network specific implementations keyed by L1 chain id; None
            means the network only uses the global implementations.
        versions: Target version per role.

    Raises:
        EmptyTargetFieldError, InvalidVersionFormatError: invalid target versions
    """
    versions.check()
    merged = {}
    for chain_id, network_impls in networks.items():
        impls = global_impls.copy()
        if network_impls is not None:
            impls.merge(network_impls)
        merged[chain_id] = impls
        logger.debug(
            "Registered chain implementations",
            extra=extra_context(event="register_chain", component="registry", chain_id=chain_id),
        )
    logger.info("Built implementation registry for %d chain(s)", len(merged))
    return SuperchainRegistry(merged, versions)
