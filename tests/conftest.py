from collections.abc import Iterator

import logfire
import pytest

from slashbuilder import SlashCommandBuilder, enable_validators


@pytest.fixture(scope='session', autouse=True)
def _offline_logfire() -> None:
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _validation_enabled() -> Iterator[None]:
    enable_validators()
    yield
    enable_validators()


@pytest.fixture
def command() -> SlashCommandBuilder:
    return SlashCommandBuilder('ping', 'check the latency')


class StubOption:
    def __init__(self, label: str) -> None:
        self.label = label
        self.calls = 0

    def serialize(self) -> dict:
        self.calls += 1
        return {'type': 3, 'name': self.label, 'description': self.label}


@pytest.fixture
def stub_option() -> type[StubOption]:
    return StubOption
