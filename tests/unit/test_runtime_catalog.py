"""Unit tests for the runtime catalog."""

import pytest

from samwizard.runtime import RUNTIME_GROUPS, Runtime, RuntimeCatalog, UnknownRuntimeError, runtime_sort_key
from samwizard.sdk import SdkType


class TestRuntimeGroups:
    """Test declarative runtime groups."""

    def test_all_groups_have_runtimes(self):
        """Every group should declare at least one runtime."""
        for group_id, group in RUNTIME_GROUPS.items():
            assert group.id == group_id
            assert group.runtimes, f"{group_id} has no runtimes"
            assert group.packaging

    def test_runtimes_belong_to_one_group(self):
        """A runtime identifier should appear in a single group."""
        seen = set()
        for group in RUNTIME_GROUPS.values():
            for runtime in group.runtimes:
                assert runtime not in seen
                seen.add(runtime)

    def test_python_group_structure(self):
        group = RUNTIME_GROUPS["python"]
        assert group.sdk_type == SdkType.PYTHON
        assert group.packaging == "pip"
        assert Runtime("python3.9") in group


class TestRuntime:
    """Test Runtime dataclass."""

    def test_str_is_identifier(self):
        assert str(Runtime("nodejs14.x")) == "nodejs14.x"

    def test_equality_by_identifier(self):
        assert Runtime("java11") == Runtime("java11")
        assert Runtime("java11") != Runtime("java17")

    def test_repr(self):
        assert "java11" in repr(Runtime("java11"))


class TestSorting:
    """Test version-aware runtime ordering."""

    def test_scenario_ordering(self):
        """Runtimes from the catalog should be displayed sorted."""
        catalog = RuntimeCatalog.from_mapping(
            {"python": ["python3.9"], "nodejs": ["nodejs14.x"], "java": ["java11"]}
        )

        assert [str(r) for r in catalog.runtimes()] == ["java11", "nodejs14.x", "python3.9"]

    def test_numeric_parts_compare_numerically(self):
        identifiers = ["python3.10", "python3.9", "python3.11"]

        assert sorted(identifiers, key=runtime_sort_key) == ["python3.9", "python3.10", "python3.11"]

    def test_suffixes_sort_after_base(self):
        identifiers = ["java8.al2", "java11", "java8"]

        assert sorted(identifiers, key=runtime_sort_key) == ["java8", "java8.al2", "java11"]

    def test_default_catalog_is_sorted(self):
        runtimes = RuntimeCatalog().runtimes()

        assert runtimes == sorted(runtimes, key=runtime_sort_key)
        assert len(runtimes) == sum(len(g.runtimes) for g in RUNTIME_GROUPS.values())


class TestRuntimeCatalog:
    """Test RuntimeCatalog."""

    def test_flattens_groups(self):
        catalog = RuntimeCatalog.from_mapping({"python": ["python3.9", "python3.8"], "go": ["go1.x"]})

        assert [str(r) for r in catalog.runtimes()] == ["go1.x", "python3.8", "python3.9"]

    def test_group_for(self):
        catalog = RuntimeCatalog()

        assert catalog.group_for("nodejs14.x").id == "nodejs"
        assert catalog.sdk_type_for(Runtime("java11")) == SdkType.JAVA

    def test_unknown_runtime(self):
        catalog = RuntimeCatalog()

        with pytest.raises(UnknownRuntimeError, match="not supported"):
            catalog.get("cobol85")

    def test_unknown_runtime_is_value_error(self):
        with pytest.raises(ValueError):
            RuntimeCatalog().sdk_type_for("ruby2.7")

    def test_disabled_runtimes_are_hidden(self):
        catalog = RuntimeCatalog(disabled=["python3.8", "go1.x"])

        identifiers = [str(r) for r in catalog.runtimes()]
        assert "python3.8" not in identifiers
        assert "python3.9" in identifiers
        # Go group has no runtime left
        assert "go" not in [g.id for g in catalog.supported_runtime_groups()]
        with pytest.raises(UnknownRuntimeError):
            catalog.get("python3.8")

    def test_from_mapping_unknown_group_needs_sdk_type(self):
        with pytest.raises(ValueError, match="No SDK type"):
            RuntimeCatalog.from_mapping({"ruby": ["ruby3.2"]})

    def test_from_mapping_with_sdk_type_override(self):
        catalog = RuntimeCatalog.from_mapping(
            {"custom": ["provided.al2"]}, sdk_types={"custom": SdkType.GO}
        )

        assert catalog.sdk_type_for("provided.al2") == SdkType.GO
