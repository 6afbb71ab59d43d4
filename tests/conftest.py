"""Pytest configuration for the ThinQ purifier adapter tests."""

from __future__ import annotations

import asyncio
import inspect
import sys
from collections import deque
from pathlib import Path
from typing import Any

import pytest

root_path = Path(__file__).resolve().parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from thinq_purifier.device_types import AirPurifierDevice  # noqa: E402
from thinq_purifier.model_info import ModelInfo, load_model_info  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"
MODEL_INFO_PATH = FIXTURES / "air_purifier_model.json"


class FakeSession:
    """Record remote calls and serve canned config/control reads."""

    def __init__(
        self,
        *,
        config: dict[str, str] | None = None,
        control: dict[str, str] | None = None,
    ) -> None:
        """Initialise canned read values."""

        self.config = dict(config or {})
        self.control = dict(control or {})
        self.writes: list[tuple[str, Any]] = []
        self.error: Exception | None = None

    async def set_control(self, name: str, value: Any) -> None:
        """Record a control write or raise the configured error."""

        if self.error is not None:
            raise self.error
        self.writes.append((name, value))

    async def get_config(self, name: str) -> str:
        """Return the canned config value for ``name``."""

        if self.error is not None:
            raise self.error
        return self.config[name]

    async def get_control(self, name: str) -> str:
        """Return the canned control value for ``name``."""

        if self.error is not None:
            raise self.error
        return self.control[name]


class FakeMonitor:
    """Yield queued telemetry blobs, then ``None``."""

    def __init__(self, *blobs: Any) -> None:
        """Queue ``blobs`` for successive polls."""

        self._blobs: deque[Any] = deque(blobs)
        self.polls = 0

    async def poll(self) -> Any | None:
        """Return the next queued blob."""

        self.polls += 1
        if not self._blobs:
            return None
        return self._blobs.popleft()


@pytest.fixture
def model_info_path() -> Path:
    """Return the path of the model info fixture document."""

    return MODEL_INFO_PATH


@pytest.fixture
def model() -> ModelInfo:
    """Return the air purifier model info fixture."""

    return load_model_info(MODEL_INFO_PATH)


@pytest.fixture
def session() -> FakeSession:
    """Return a recording device session."""

    return FakeSession(
        config={
            "DuctZone": "1_1/2_0",
            "Filter": "@FILTER_OK",
            "MFilter": "@FILTER_REPLACE",
            "EnergyDesiredValue": "42",
        },
        control={"DisplayControl": "0", "SpkVolume": "3"},
    )


@pytest.fixture
def monitor_factory() -> type[FakeMonitor]:
    """Return the fake monitor class for building telemetry sources."""

    return FakeMonitor


@pytest.fixture
def device(session: FakeSession, model: ModelInfo) -> AirPurifierDevice:
    """Return a purifier bound to the fake session and fixture model."""

    return AirPurifierDevice(session, model)


def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute coroutine tests within a dedicated event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        argnames = pyfuncitem._fixtureinfo.argnames
        kwargs = {name: pyfuncitem.funcargs[name] for name in argnames}
        loop.run_until_complete(test_function(**kwargs))
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True
