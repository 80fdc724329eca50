"""Tests for LocaleApplier and its two strategies.

Python 3.13+.
"""

import logging
from unittest.mock import MagicMock

import pytest
from hypothesis import given

from localehelper.applier import (
    InPlaceConfigurationStrategy,
    LocaleApplier,
    ScopedConfigurationStrategy,
    ensure_environment,
    select_strategy,
)
from localehelper.enums import CapabilityTier, LayoutDirection
from localehelper.errors import EnvironmentUnavailableError
from localehelper.host import Configuration, HostEnvironment, HostPlatform, Resources
from localehelper.identity import LocaleIdentity
from localehelper.preferences import InMemoryPreferenceStore
from localehelper.process import get_default_locale
from tests.strategies import optional_regions, well_formed_languages

AR_EG = LocaleIdentity.build("ar", "EG")
EN = LocaleIdentity.build("en")


def _environment() -> HostEnvironment:
    return HostEnvironment(Resources(), InMemoryPreferenceStore())


def _mock_environment() -> MagicMock:
    env = MagicMock()
    env.resources.configuration.copy.return_value = Configuration()
    return env


class TestSelectStrategy:
    """Test strategy selection by capability tier."""

    def test_scoped_platform(self) -> None:
        strategy = select_strategy(HostPlatform(api_level=26))
        assert isinstance(strategy, ScopedConfigurationStrategy)
        assert strategy.tier is CapabilityTier.SCOPED

    def test_legacy_platform(self) -> None:
        strategy = select_strategy(HostPlatform(api_level=25))
        assert isinstance(strategy, InPlaceConfigurationStrategy)
        assert strategy.tier is CapabilityTier.LEGACY

    def test_for_platform(self) -> None:
        applier = LocaleApplier.for_platform(HostPlatform(api_level=19))
        assert applier.tier is CapabilityTier.LEGACY
        assert isinstance(applier.strategy, InPlaceConfigurationStrategy)


class TestScopedStrategy:
    """Scoped hosts get a new environment; the original is untouched."""

    def test_returns_new_environment(self) -> None:
        env = _environment()
        handle = LocaleApplier(ScopedConfigurationStrategy()).apply(env, AR_EG)
        assert handle is not env
        assert handle.resources.configuration.locale == AR_EG
        assert handle.resources.configuration.layout_direction is LayoutDirection.RTL

    def test_original_environment_not_mutated(self) -> None:
        env = _environment()
        before = env.resources.configuration
        LocaleApplier(ScopedConfigurationStrategy()).apply(env, AR_EG)
        assert env.resources.configuration is before
        assert before.locale is None
        assert before.layout_direction is LayoutDirection.LTR

    def test_other_configuration_fields_preserved(self) -> None:
        env = HostEnvironment(Resources(Configuration(font_scale=1.5)), InMemoryPreferenceStore())
        handle = LocaleApplier(ScopedConfigurationStrategy()).apply(env, EN)
        assert handle.resources.configuration.font_scale == 1.5

    def test_configuration_copied_once(self) -> None:
        env = _mock_environment()
        ScopedConfigurationStrategy().apply(env, AR_EG)
        env.resources.configuration.copy.assert_called_once_with()
        copied = env.resources.configuration.copy.return_value
        env.create_configuration_environment.assert_called_once_with(copied)

    def test_never_updates_in_place(self) -> None:
        env = _mock_environment()
        ScopedConfigurationStrategy().apply(env, AR_EG)
        env.create_configuration_environment.assert_called_once()
        env.resources.update_configuration.assert_not_called()


class TestInPlaceStrategy:
    """Legacy hosts mutate the shared configuration and keep the environment."""

    def test_returns_same_environment(self) -> None:
        env = _environment()
        handle = LocaleApplier(InPlaceConfigurationStrategy()).apply(env, AR_EG)
        assert handle is env

    def test_mutates_shared_configuration(self) -> None:
        env = _environment()
        configuration = env.resources.configuration
        LocaleApplier(InPlaceConfigurationStrategy()).apply(env, AR_EG)
        assert env.resources.configuration is configuration
        assert configuration.locale == AR_EG
        assert configuration.layout_direction is LayoutDirection.RTL

    def test_pushes_configuration_with_current_metrics(self) -> None:
        env = _mock_environment()
        InPlaceConfigurationStrategy().apply(env, EN)
        env.resources.update_configuration.assert_called_once_with(
            env.resources.configuration, env.resources.display_metrics
        )
        env.create_configuration_environment.assert_not_called()

    def test_direction_switches_back_to_ltr(self) -> None:
        env = _environment()
        applier = LocaleApplier(InPlaceConfigurationStrategy())
        applier.apply(env, AR_EG)
        applier.apply(env, EN)
        assert env.resources.configuration.layout_direction is LayoutDirection.LTR


class TestLocaleApplier:
    """Test process default handling and preconditions."""

    @pytest.mark.parametrize(
        "strategy", [ScopedConfigurationStrategy(), InPlaceConfigurationStrategy()]
    )
    def test_sets_process_default(self, strategy: object) -> None:
        LocaleApplier(strategy).apply(_environment(), AR_EG)  # type: ignore[arg-type]
        assert get_default_locale() == AR_EG

    def test_last_apply_wins(self) -> None:
        applier = LocaleApplier(ScopedConfigurationStrategy())
        applier.apply(_environment(), AR_EG)
        applier.apply(_environment(), EN)
        assert get_default_locale() == EN

    def test_none_environment_rejected(self) -> None:
        with pytest.raises(EnvironmentUnavailableError):
            LocaleApplier(ScopedConfigurationStrategy()).apply(None, AR_EG)  # type: ignore[arg-type]
        assert get_default_locale() is None

    def test_environment_without_resources_rejected(self) -> None:
        with pytest.raises(EnvironmentUnavailableError):
            LocaleApplier(InPlaceConfigurationStrategy()).apply(object(), AR_EG)  # type: ignore[arg-type]

    def test_logs_applied_locale(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="localehelper.applier"):
            LocaleApplier(InPlaceConfigurationStrategy()).apply(_environment(), AR_EG)
        assert "Applied locale ar_EG via legacy strategy" in caplog.text

    @given(language=well_formed_languages, region=optional_regions)
    def test_apply_is_idempotent_scoped(self, language: str, region: str | None) -> None:
        identity = LocaleIdentity.build(language, region)
        applier = LocaleApplier(ScopedConfigurationStrategy())
        env = _environment()
        once = applier.apply(env, identity)
        default_once = get_default_locale()
        twice = applier.apply(applier.apply(env, identity), identity)
        assert get_default_locale() == default_once == identity
        assert twice.resources.configuration == once.resources.configuration

    @given(language=well_formed_languages, region=optional_regions)
    def test_apply_is_idempotent_in_place(self, language: str, region: str | None) -> None:
        identity = LocaleIdentity.build(language, region)
        applier = LocaleApplier(InPlaceConfigurationStrategy())
        env = _environment()
        applier.apply(env, identity)
        snapshot = env.resources.configuration.copy()
        handle = applier.apply(env, identity)
        assert handle is env
        assert env.resources.configuration == snapshot
        assert get_default_locale() == identity


class TestEnsureEnvironment:
    """Environment precondition shared by the applier and the helper."""

    def test_accepts_host_environment(self) -> None:
        ensure_environment(_environment())

    def test_rejects_none(self) -> None:
        with pytest.raises(EnvironmentUnavailableError, match="unavailable"):
            ensure_environment(None)

    def test_rejects_object_without_resources(self) -> None:
        with pytest.raises(EnvironmentUnavailableError):
            ensure_environment(object())  # type: ignore[arg-type]
