"""Tests for lifecycle/hooks/registry.py — HookRegistry configuration and lookup."""

import pytest

from lifecycle.errors import (
    DuplicateLifecycleError, InvalidHookError, LifecycleError, UnknownLifecycleError,
)
from lifecycle.hooks.hook_point import AbortPolicy, HookKind
from lifecycle.hooks.registry import HookRegistry
from lifecycle.hooks.signals import halts_on_false


def _noop():
    return None


class TestDefineLifecycle:

    def test_define_returns_phase_set(self, registry):
        phase_set = registry.define_lifecycle("execute", AbortPolicy.SKIP_AFTER_ON_ABORT)
        assert phase_set.name == "execute"
        assert phase_set.abort_policy is AbortPolicy.SKIP_AFTER_ON_ABORT
        assert registry.lifecycle("execute") is phase_set

    def test_duplicate_raises(self, registry):
        """Defining the same name twice raises DuplicateLifecycleError."""
        registry.define_lifecycle("execute", AbortPolicy.NONE)
        with pytest.raises(DuplicateLifecycleError, match="execute"):
            registry.define_lifecycle("execute", AbortPolicy.SKIP_AFTER_ON_ABORT)
        # The original definition is untouched
        assert registry.lifecycle("execute").abort_policy is AbortPolicy.NONE

    def test_duplicate_is_lifecycle_error_and_value_error(self, registry):
        registry.define_lifecycle("execute")
        with pytest.raises(LifecycleError):
            registry.define_lifecycle("execute")
        with pytest.raises(ValueError):
            registry.define_lifecycle("execute")

    def test_default_policy_used_when_omitted(self):
        registry = HookRegistry(default_policy="skip_after_on_abort")
        assert registry.define_lifecycle("save").abort_policy is AbortPolicy.SKIP_AFTER_ON_ABORT

    def test_policy_by_name(self, registry):
        assert registry.define_lifecycle("save", "none").abort_policy is AbortPolicy.NONE

    def test_empty_name_rejected(self, registry):
        with pytest.raises(ValueError):
            registry.define_lifecycle("")

    def test_terminator_stored(self, registry):
        assert registry.define_lifecycle("save", terminator=halts_on_false).terminator is halts_on_false

    def test_non_callable_terminator_rejected(self, registry):
        with pytest.raises(InvalidHookError):
            registry.define_lifecycle("save", terminator=False)


class TestAddHook:

    def test_unknown_lifecycle_raises(self, registry):
        """add_hook on an undefined lifecycle raises UnknownLifecycleError."""
        with pytest.raises(UnknownLifecycleError, match="nope"):
            registry.add_hook("nope", HookKind.BEFORE, _noop)

    def test_unknown_lifecycle_is_key_error(self, registry):
        with pytest.raises(KeyError):
            registry.add_hook("nope", HookKind.BEFORE, _noop)

    def test_ordinals_are_lifecycle_wide(self, registry):
        """Ordinals increase across kinds in registration order."""
        registry.define_lifecycle("execute")
        a = registry.add_hook("execute", HookKind.BEFORE, _noop)
        b = registry.add_hook("execute", HookKind.AFTER, _noop)
        c = registry.add_hook("execute", HookKind.BEFORE, _noop)
        assert [a.ordinal, b.ordinal, c.ordinal] == [0, 1, 2]

    def test_ordinals_independent_per_lifecycle(self, registry):
        registry.define_lifecycle("a")
        registry.define_lifecycle("b")
        registry.add_hook("a", HookKind.BEFORE, _noop)
        assert registry.add_hook("b", HookKind.BEFORE, _noop).ordinal == 0

    def test_kind_by_name(self, registry):
        registry.define_lifecycle("execute")
        assert registry.add_hook("execute", "around", _noop).kind is HookKind.AROUND

    def test_bad_kind_raises_invalid_hook(self, registry):
        registry.define_lifecycle("execute")
        with pytest.raises(InvalidHookError):
            registry.add_hook("execute", "during", _noop)

    def test_non_callable_target_rejected(self, registry):
        registry.define_lifecycle("execute")
        with pytest.raises(InvalidHookError):
            registry.add_hook("execute", HookKind.BEFORE, 42)

    def test_non_identifier_name_rejected(self, registry):
        registry.define_lifecycle("execute")
        with pytest.raises(InvalidHookError):
            registry.add_hook("execute", HookKind.BEFORE, "not a method")

    def test_conditions_normalized_to_tuples(self, registry):
        registry.define_lifecycle("execute")
        descriptor = registry.add_hook("execute", HookKind.BEFORE, "valid",
                                       if_="enabled", unless=["locked", _noop])
        assert descriptor.if_ == ("enabled",)
        assert descriptor.unless == ("locked", _noop)

    def test_shortcuts(self, registry):
        registry.define_lifecycle("execute")
        assert registry.before("execute", _noop).kind is HookKind.BEFORE
        assert registry.after("execute", _noop).kind is HookKind.AFTER
        assert registry.around("execute", _noop).kind is HookKind.AROUND


class TestHooksFor:

    def test_empty_when_none_registered(self, registry):
        registry.define_lifecycle("execute")
        assert registry.hooks_for("execute", HookKind.AFTER) == ()

    def test_registration_order(self, registry):
        registry.define_lifecycle("execute")
        targets = ["h1", "h2", "h3"]
        for t in targets:
            registry.add_hook("execute", HookKind.BEFORE, t)
        registry.add_hook("execute", HookKind.AFTER, "a1")
        assert [d.target for d in registry.hooks_for("execute", HookKind.BEFORE)] == targets

    def test_returns_snapshot(self, registry):
        """The returned tuple is not affected by later registrations."""
        registry.define_lifecycle("execute")
        registry.add_hook("execute", HookKind.BEFORE, "h1")
        snapshot = registry.hooks_for("execute", HookKind.BEFORE)
        registry.add_hook("execute", HookKind.BEFORE, "h2")
        assert len(snapshot) == 1

    def test_unknown_lifecycle(self, registry):
        with pytest.raises(UnknownLifecycleError):
            registry.hooks_for("nope", HookKind.BEFORE)


class TestIntrospection:

    def test_names_in_definition_order(self, registry):
        for name in ("save", "execute", "destroy"):
            registry.define_lifecycle(name)
        assert registry.lifecycle_names() == ["save", "execute", "destroy"]
        assert len(registry) == 3
        assert "execute" in registry
        assert "other" not in registry
        assert [p.name for p in registry] == ["save", "execute", "destroy"]

    def test_all_hooks_sorted_by_ordinal(self, registry):
        registry.define_lifecycle("execute")
        registry.add_hook("execute", HookKind.AFTER, "a")
        registry.add_hook("execute", HookKind.BEFORE, "b")
        registry.add_hook("execute", HookKind.AROUND, "c")
        assert [d.target for d in registry.all_hooks("execute")] == ["a", "b", "c"]

    def test_describe(self, registry):
        registry.define_lifecycle("execute")
        registry.add_hook("execute", HookKind.BEFORE, "valid", unless="locked")
        registry.add_hook("execute", HookKind.AFTER, _noop)
        rows = registry.describe("execute")
        assert rows[0] == {
            'ordinal': 0, 'kind': 'BEFORE', 'target': 'valid',
            'binding': 'late', 'if': [], 'unless': ['locked'],
        }
        assert rows[1]['binding'] == 'early'
        assert rows[1]['target'] == '_noop'

    def test_unknown_lifecycle_message_lists_available(self, registry):
        registry.define_lifecycle("execute")
        with pytest.raises(UnknownLifecycleError) as exc_info:
            registry.lifecycle("exec")
        assert str(exc_info.value) == "Unknown lifecycle: 'exec'. Available: execute"
