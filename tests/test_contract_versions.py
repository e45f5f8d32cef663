"""Tests for target version models and result export."""

import pytest

from superchain.errors import EmptyTargetFieldError, InvalidVersionFormatError, SchemaError
from superchain.models import ContractVersions, ImplementationList, Role, VersionedContract


def full_versions(**overrides) -> dict:
    """Helper building a complete target mapping keyed by configuration key."""
    data = {role.value: "1.0.0" for role in Role}
    data.update(overrides)
    return data


class TestRole:
    """Role enumeration."""

    def test_fixed_order(self):
        assert [role.contract_name for role in Role] == [
            "L1CrossDomainMessenger",
            "L1ERC721Bridge",
            "L1StandardBridge",
            "L2OutputOracle",
            "OptimismMintableERC20Factory",
            "OptimismPortal",
            "SystemConfig",
        ]

    def test_from_key_accepts_both_names(self):
        assert Role.from_key("optimism_portal") is Role.OPTIMISM_PORTAL
        assert Role.from_key("OptimismPortal") is Role.OPTIMISM_PORTAL
        with pytest.raises(KeyError):
            Role.from_key("ProxyAdmin")


class TestContractVersionsCheck:
    """Validation of target versions."""

    def test_valid_versions_pass(self):
        ContractVersions.from_mapping(full_versions(system_config="v1.3.0-rc.1")).check()

    def test_empty_field(self):
        versions = ContractVersions.from_mapping(full_versions(l1_standard_bridge=""))
        with pytest.raises(EmptyTargetFieldError) as excinfo:
            versions.check()
        assert excinfo.value.field == "L1StandardBridge"

    def test_missing_field_is_empty(self):
        data = full_versions()
        del data["optimism_portal"]
        with pytest.raises(EmptyTargetFieldError, match="OptimismPortal"):
            ContractVersions.from_mapping(data).check()

    def test_invalid_version(self):
        versions = ContractVersions.from_mapping(full_versions(l2_output_oracle="1.x"))
        with pytest.raises(InvalidVersionFormatError) as excinfo:
            versions.check()
        assert excinfo.value.field == "L2OutputOracle"
        assert excinfo.value.version == "v1.x"

    def test_first_failing_field_reported(self):
        versions = ContractVersions.from_mapping(
            full_versions(l1_erc721_bridge="bad", system_config="")
        )
        with pytest.raises(InvalidVersionFormatError, match="L1ERC721Bridge"):
            versions.check()

    def test_unknown_key_rejected(self):
        with pytest.raises(SchemaError):
            ContractVersions.from_mapping(full_versions(proxy_admin="1.0.0"))

    def test_non_string_rejected(self):
        with pytest.raises(SchemaError, match="system_config"):
            ContractVersions.from_mapping(full_versions(system_config=1))

    def test_to_dict_round_trips_keys(self):
        data = full_versions(optimism_portal="2.0.0")
        assert ContractVersions.from_mapping(data).to_dict() == data


class TestImplementationList:
    """Export of resolved bundles."""

    def test_to_dict_uses_contract_names(self):
        contracts = {role: VersionedContract(version="v1.0.0", address="0x" + "1" * 40) for role in Role}
        exported = ImplementationList(contracts=contracts).to_dict()
        assert list(exported) == [role.contract_name for role in Role]
        assert exported["SystemConfig"] == {"version": "v1.0.0", "address": "0x" + "1" * 40}
