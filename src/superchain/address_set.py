"""Versioned address sets for a single contract role."""

import logging
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants

from .errors import EmptySetError, UnresolvableError
from .models import VersionedContract
from .semver import canonicalize, compare, sort_key, strip_prefix

logger = logging.getLogger(__name__)


class AddressSet:
    """Deployed addresses of one contract, keyed by semantic version.

    Keys are kept exactly as they were supplied, with or without the ``v``
    marker. Lookups and ordering are insensitive to the prefix form.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        """Initialize the set with its own copy of ``entries``.

        Args:
            entries: Optional mapping of version string to address.
        """
        self._entries: Dict[str, str] = dict(entries or {})

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key)[1]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AddressSet):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"AddressSet({self._entries!r})"

    def items(self):
        return self._entries.items()

    def to_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    def get(self, key: str) -> Tuple[str, bool]:
        """Get the address deployed at ``key``.

        Handles keys stored with and without the ``v`` prefix; the
        unprefixed form is tried first.

        Args:
            key: Version to look up, in either prefix form.

        Returns:
            Tuple of (address, found); address is the zero address when not found
        """
        key = canonicalize(key)
        for candidate in (strip_prefix(key), key):
            if candidate in self._entries:
                return self._entries[candidate], True
        return Constants.ZERO_ADDRESS, False

    def versions(self) -> List[str]:
        """Return every canonicalized version, sorted ascending by precedence."""
        return sorted((canonicalize(k) for k in self._entries), key=sort_key)

    def resolve(self, target: str) -> VersionedContract:
        """Pick the implementation that satisfies ``target``.

        An exact version match wins outright. Otherwise the highest version
        above the target is chosen.

        Raises:
            EmptySetError: the set has no entries
            UnresolvableError: no version reaches the target
        """
        target = canonicalize(target)
        keys = self.versions()
        if not keys:
            raise EmptySetError()

        out: Optional[VersionedContract] = None
        for k in keys:
            res = compare(k, target)
            if res < 0:
                continue
            out = VersionedContract(version=k, address=self.get(k)[0])
            if res == 0:
                break

        if out is None:
            raise UnresolvableError(target)
        if is_debug_enabled(logger):
            logger.debug(
                "Resolved implementation",
                extra=extra_context(
                    event="resolve",
                    component="address_set",
                    target=target,
                    resolved_version=out.version,
                    candidate_count=len(keys),
                ),
            )
        return out

    def merge(self, other: "AddressSet") -> None:
        """Copy every entry of ``other`` into this set; ``other`` wins on conflict."""
        self._entries.update(other.items())

    def copy(self) -> "AddressSet":
        """Return an independent copy of this set."""
        return AddressSet(self._entries)
