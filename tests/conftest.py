"""Shared fixtures for lifecycle engine unit tests."""

import pytest

from lifecycle import AbortPolicy, EngineConfig, HookRegistry, LifecycleEngine


# ---- Console singleton: force NULL mode before any test touches it ----

@pytest.fixture(autouse=True, scope="session")
def _silence_console():
    """Initialize LCConsole in NULL mode to suppress all output during tests.

    Session-scoped so the singleton is set once and stays NULL for the
    entire test run. Tests that inspect output re-initialize it with a
    LOGGING config and restore NULL afterwards (see ``console_log``).
    """
    from console.config import ConsoleConfig, ConsoleMode
    from console.lcconsole import LCConsole
    LCConsole(ConsoleConfig(mode=ConsoleMode.NULL))


@pytest.fixture
def console_log(tmp_path):
    """Route LCConsole output to a log file; yields a reader for its contents."""
    from console.config import ConsoleConfig, ConsoleMode
    from console.lcconsole import LCConsole

    log_file = tmp_path / "console.log"
    LCConsole(ConsoleConfig(mode=ConsoleMode.LOGGING, log_file=str(log_file)))
    yield lambda: log_file.read_text(encoding="utf-8")
    LCConsole(ConsoleConfig(mode=ConsoleMode.NULL))


# ---- Registry / engine fixtures ----

@pytest.fixture
def registry():
    """Empty HookRegistry."""
    return HookRegistry()


@pytest.fixture
def engine(registry):
    """LifecycleEngine over the ``registry`` fixture."""
    return LifecycleEngine(registry)


@pytest.fixture
def calls():
    """Shared call log; ``calls.hook(name, ret)`` builds a recording hook."""

    class CallLog(list):
        def hook(self, name, ret=None):
            def target():
                self.append(name)
                return ret
            target.__qualname__ = name
            return target

        def body(self, ret=None, name="body"):
            return self.hook(name, ret)

    return CallLog()


@pytest.fixture
def skip_after_engine():
    """Engine whose registry defaults new lifecycles to SKIP_AFTER_ON_ABORT."""
    return LifecycleEngine(config=EngineConfig(default_policy=AbortPolicy.SKIP_AFTER_ON_ABORT))
