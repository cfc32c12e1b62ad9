"""Tests for the singleton registry."""

from __future__ import annotations

from botschema.util.singletons import _reset_fns, register_singleton, reset_all_singletons


class TestSingletonRegistry:
    def setup_method(self) -> None:
        self._original = list(_reset_fns)

    def teardown_method(self) -> None:
        _reset_fns.clear()
        _reset_fns.extend(self._original)

    def test_settings_registered_on_import(self) -> None:
        import botschema.config.settings as settings

        assert settings._reset_cfg in _reset_fns

    def test_register_adds_function(self) -> None:
        def _reset() -> None:
            pass

        register_singleton(_reset)
        assert _reset in _reset_fns

    def test_reset_all_runs_in_order(self) -> None:
        calls: list[int] = []

        register_singleton(lambda: calls.append(1))
        register_singleton(lambda: calls.append(2))
        reset_all_singletons()
        assert calls[-2:] == [1, 2]

    def test_register_is_idempotent(self) -> None:
        def _reset() -> None:
            pass

        register_singleton(_reset)
        register_singleton(_reset)
        assert _reset_fns.count(_reset) == 1

    def test_usable_as_decorator(self) -> None:
        @register_singleton
        def _reset() -> None:
            pass

        assert callable(_reset)
        assert _reset in _reset_fns
