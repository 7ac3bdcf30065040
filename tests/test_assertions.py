import pytest

from slashbuilder import Locale, MISSING, ValidationError
from slashbuilder.assertions import (
    validate_default_member_permissions,
    validate_required_parameters,
    validate_localization_map,
    validate_description,
    validate_name
)


@pytest.mark.parametrize('name', [
    'ping',
    'set-proxy',
    'snake_case',
    'v2',
    'नमस्ते',
    'สวัสดี',
    'こんにちは',
])
def test_valid_names(name: str) -> None:
    assert validate_name(name) == name


@pytest.mark.parametrize('name', [
    '',
    'Ping',
    'has space',
    'x' * 33,
    'emoji🙂',
    None,
    MISSING,
    42,
])
def test_invalid_names(name: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_name(name)
    assert exc_info.value.field == 'name'


def test_description_length() -> None:
    assert validate_description('x' * 100) == 'x' * 100

    with pytest.raises(ValidationError):
        validate_description('x' * 101)

    with pytest.raises(ValidationError):
        validate_description('')


def test_localization_map_normalizes_locales() -> None:
    assert validate_localization_map(
        {Locale.GERMAN: 'befehl', 'pt-BR': None},
        validate_name
    ) == {'de': 'befehl', 'pt-BR': None}


@pytest.mark.parametrize('localizations', [MISSING, None])
def test_localization_map_passthrough(localizations: object) -> None:
    assert validate_localization_map(localizations, validate_name) is localizations


def test_localization_map_rejects_non_mapping() -> None:
    with pytest.raises(ValidationError):
        validate_localization_map(['fr'], validate_name)


def test_required_parameters_checked_together() -> None:
    validate_required_parameters('ping', 'pong', [])

    with pytest.raises(ValidationError):
        validate_required_parameters('ping', 'pong', None)

    with pytest.raises(ValidationError):
        validate_required_parameters('ping', 'pong', [object()] * 26)

    with pytest.raises(ValidationError):
        validate_required_parameters('ping', MISSING, [])


def test_default_member_permissions_passthrough() -> None:
    assert validate_default_member_permissions(None) is None
    assert validate_default_member_permissions(MISSING) is MISSING


def test_validation_error_message() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_default_member_permissions(-1)
    assert str(exc_info.value) == 'invalid default_member_permissions: -1 (bitfield out of range)'
