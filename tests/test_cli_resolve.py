"""Tests for roost.cli._resolve — Tenancy import resolution."""

import sys
import types
from pathlib import Path

import pytest

from roost.cli._resolve import resolve_tenancy
from roost.errors import ConfigurationError
from roost.tenancy import Tenancy


def _broken_factory() -> Tenancy:
    msg = "settings missing"
    raise RuntimeError(msg)


def _misconfigured_factory() -> Tenancy:
    tenancy = Tenancy()
    tenancy.tenant("shop.example.com").action("/users/<id>", "UserController@show")
    return tenancy


@pytest.fixture
def _fake_tenancy_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with roost Tenancy objects on sys.modules."""
    mod = types.ModuleType("_fake_roost_app")
    mod.tenancy = Tenancy()  # type: ignore[attr-defined]
    mod.custom = Tenancy()  # type: ignore[attr-defined]
    mod.create_tenancy = Tenancy  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.misconfigured = _misconfigured_factory  # type: ignore[attr-defined]
    mod.not_a_tenancy = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_roost_app", mod)


@pytest.mark.usefixtures("_fake_tenancy_module")
class TestResolveTenancy:
    def test_explicit_attribute(self) -> None:
        assert resolve_tenancy("_fake_roost_app:tenancy") is sys.modules["_fake_roost_app"].tenancy

    def test_custom_attribute(self) -> None:
        assert resolve_tenancy("_fake_roost_app:custom") is sys.modules["_fake_roost_app"].custom

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'tenancy'."""
        assert resolve_tenancy("_fake_roost_app") is sys.modules["_fake_roost_app"].tenancy

    def test_factory_called(self) -> None:
        assert isinstance(resolve_tenancy("_fake_roost_app:create_tenancy"), Tenancy)

    def test_factory_error_wrapped(self) -> None:
        with pytest.raises(ConfigurationError, match="settings missing") as exc_info:
            resolve_tenancy("_fake_roost_app:broken")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_factory_configuration_error_unchanged(self) -> None:
        with pytest.raises(ConfigurationError, match="<param> placeholders"):
            resolve_tenancy("_fake_roost_app:misconfigured")

    def test_missing_attribute(self) -> None:
        with pytest.raises(ConfigurationError, match="no attribute 'does_not_exist'"):
            resolve_tenancy("_fake_roost_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigurationError, match=r"not a roost\.Tenancy instance"):
            resolve_tenancy("_fake_roost_app:not_a_tenancy")


class TestResolveTenancyImports:
    def test_missing_module(self) -> None:
        with pytest.raises(ConfigurationError, match="Cannot import") as exc_info:
            resolve_tenancy("nonexistent_module_xyz:tenancy")
        assert isinstance(exc_info.value.__cause__, ModuleNotFoundError)

    def test_import_error_inside_module(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "_roost_bad_import.py").write_text("import nonexistent_dependency_xyz\n")
        monkeypatch.syspath_prepend(str(tmp_path))
        with pytest.raises(ConfigurationError, match="nonexistent_dependency_xyz"):
            resolve_tenancy("_roost_bad_import")

    def test_configuration_error_during_import(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "_roost_bad_routes.py").write_text(
            "from roost.tenancy import Tenancy\n"
            "tenancy = Tenancy()\n"
            "tenancy.tenant('shop.example.com').action('/u/<id>', 'UserController@show')\n"
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        with pytest.raises(ConfigurationError, match="/u/<id>"):
            resolve_tenancy("_roost_bad_routes")
