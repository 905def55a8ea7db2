from __future__ import annotations

from typing import Iterator

import pytest

from jot_engine.runtime import telemetry


@pytest.fixture(autouse=True)
def restore_default_config() -> Iterator[None]:
    yield
    telemetry.configure()


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="silent")


def test_loggers_are_cached_per_name() -> None:
    telemetry.configure(preset="silent")

    assert telemetry.get_logger("jot_engine.test") is telemetry.get_logger(
        "jot_engine.test"
    )


def test_span_reraises_and_collects_metadata() -> None:
    telemetry.configure(preset="silent")

    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", component=True) as handle:
            handle.add_metadata("rows", 3)
            assert handle.component_name == "test::span"
            raise RuntimeError("boom")

    assert handle.metadata == {"rows": "3"}


def test_env_flag_parses_truthy_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOT_ENGINE_SOME_FLAG", "Yes")

    assert telemetry.env_flag("SOME_FLAG", False) is True
    assert telemetry.env_flag("OTHER_FLAG", True) is True
    assert telemetry.env_value("OTHER_FLAG") is None
