from __future__ import annotations

from typing import Annotated, Any, TYPE_CHECKING
from enum import Enum
from math import isfinite

from pydantic import (
    ValidationError as PydanticValidationError,
    StringConstraints,
    TypeAdapter,
    StrictBool,
    StrictInt,
    Field
)
from regex import compile

from .enums import (
    ApplicationCommandOptionType,
    ApplicationIntegrationType,
    InteractionContextType,
    ChannelType,
    Locale
)
from .validation import is_validation_enabled
from .errors import ValidationError
from .missing import MISSING, _MissingType

if TYPE_CHECKING:
    from collections.abc import Callable


__all__ = (
    'ALLOWED_CHANNEL_TYPES',
    'validate_autocomplete',
    'validate_channel_types',
    'validate_choice',
    'validate_choices_and_autocomplete',
    'validate_choices_length',
    'validate_contexts',
    'validate_default_member_permissions',
    'validate_default_permission',
    'validate_description',
    'validate_dm_permission',
    'validate_integration_types',
    'validate_localization_map',
    'validate_max_length',
    'validate_max_options_length',
    'validate_max_value',
    'validate_min_length',
    'validate_min_value',
    'validate_name',
    'validate_nsfw',
    'validate_option_mix',
    'validate_required',
    'validate_required_parameters',
)


MAX_OPTIONS = 25
MAX_CHOICES = 25
MAX_PERMISSION_VALUE = 1 << 64
MAX_SAFE_INTEGER = (1 << 53) - 1

NAME_PATTERN = compile(
    r'^[\p{Ll}\p{Lm}\p{Lo}\p{N}\p{Script=Devanagari}\p{Script=Thai}_-]+$'
)
PERMISSION_PATTERN = compile(r'^\d+$')

ALLOWED_CHANNEL_TYPES = (
    ChannelType.GUILD_TEXT,
    ChannelType.GUILD_VOICE,
    ChannelType.GUILD_CATEGORY,
    ChannelType.GUILD_ANNOUNCEMENT,
    ChannelType.ANNOUNCEMENT_THREAD,
    ChannelType.PUBLIC_THREAD,
    ChannelType.PRIVATE_THREAD,
    ChannelType.GUILD_STAGE_VOICE,
    ChannelType.GUILD_FORUM,
    ChannelType.GUILD_MEDIA,
)


_name = TypeAdapter(Annotated[str, StringConstraints(
    strict=True, min_length=1, max_length=32)])
_description = TypeAdapter(Annotated[str, StringConstraints(
    strict=True, min_length=1, max_length=100)])
_choice_name = _description
_string_choice_value = TypeAdapter(Annotated[str, StringConstraints(
    strict=True, max_length=100)])
_bool = TypeAdapter(StrictBool)
_dm_permission = TypeAdapter(StrictBool | None | _MissingType)
_min_length = TypeAdapter(Annotated[StrictInt, Field(ge=0, le=6000)])
_max_length = TypeAdapter(Annotated[StrictInt, Field(ge=1, le=6000)])
_integer = TypeAdapter(Annotated[StrictInt, Field(
    ge=-MAX_SAFE_INTEGER, le=MAX_SAFE_INTEGER)])


def _check[T](
    field: str,
    adapter: TypeAdapter[T],
    value: Any  # noqa: ANN401
) -> T:
    if not is_validation_enabled():
        return value

    try:
        return adapter.validate_python(value)
    except PydanticValidationError as e:
        raise ValidationError(field, value, e.errors()[0]['msg']) from e


def _check_enum_list[E: Enum](
    field: str,
    enum: type[E],
    values: Any  # noqa: ANN401
) -> list[E]:
    if not is_validation_enabled():
        return values

    if not isinstance(values, list) or not values:
        raise ValidationError(field, values, 'expected at least one value')

    members: list[E] = []

    for value in values:
        if isinstance(value, bool):
            raise ValidationError(field, value, f'not a valid {enum.__name__}')

        try:
            member = enum(value)
        except ValueError as e:
            raise ValidationError(
                field, value, f'not a valid {enum.__name__}') from e

        if member not in members:
            members.append(member)

    return members


# ? names and descriptions
def validate_name(name: Any) -> str:  # noqa: ANN401
    name = _check('name', _name, name)

    if is_validation_enabled() and NAME_PATTERN.match(name) is None:
        raise ValidationError(
            'name', name,
            'must be lowercase letters, numbers, dashes or underscores')

    return name


def validate_description(description: Any) -> str:  # noqa: ANN401
    return _check('description', _description, description)


def validate_localization_map(
    localizations: Any,  # noqa: ANN401
    rule: Callable[[Any], str] | None = None,
    field: str = 'localizations'
) -> Any:  # noqa: ANN401
    """
    keys must be known locales, values must be `None` or pass `rule`
    """
    if (
        localizations is MISSING or
        localizations is None or
        not is_validation_enabled()
    ):
        return localizations

    if not isinstance(localizations, dict):
        raise ValidationError(field, localizations, 'expected a mapping')

    normalized: dict[str, str | None] = {}

    for locale, value in localizations.items():
        try:
            locale = Locale(locale)
        except ValueError as e:
            raise ValidationError(field, locale, 'unknown locale') from e

        try:
            normalized[locale.value] = (
                value
                if value is None or rule is None else
                rule(value))
        except ValidationError as e:
            raise ValidationError(
                f'{field}[{locale.value}]', value, e.detail) from e

    return normalized


def validate_max_options_length(options: Any) -> list:  # noqa: ANN401
    if not is_validation_enabled():
        return options

    if not isinstance(options, list):
        raise ValidationError('options', options, 'expected a list')

    if len(options) > MAX_OPTIONS:
        raise ValidationError(
            'options', options, f'at most {MAX_OPTIONS} options are allowed')

    return options


def validate_required_parameters(
    name: Any,  # noqa: ANN401
    description: Any,  # noqa: ANN401
    options: Any  # noqa: ANN401
) -> None:
    validate_name(name)
    validate_description(description)
    validate_max_options_length(options)


# ? command level fields
def validate_contexts(
    contexts: Any  # noqa: ANN401
) -> list[InteractionContextType]:
    return _check_enum_list('contexts', InteractionContextType, contexts)


def validate_integration_types(
    integration_types: Any  # noqa: ANN401
) -> list[ApplicationIntegrationType]:
    return _check_enum_list(
        'integration_types', ApplicationIntegrationType, integration_types)


def validate_default_permission(value: Any) -> bool:  # noqa: ANN401
    return _check('default_permission', _bool, value)


def validate_dm_permission(value: Any) -> bool | None:  # noqa: ANN401
    return _check('dm_permission', _dm_permission, value)


def validate_nsfw(value: Any) -> bool:  # noqa: ANN401
    return _check('nsfw', _bool, value)


def validate_default_member_permissions(
    permissions: Any  # noqa: ANN401
) -> Any:  # noqa: ANN401
    """
    returns the bitfield as a decimal string, the form the api expects

    `None` means no restriction and is kept as-is, as is MISSING
    """
    if (
        permissions is None or
        permissions is MISSING or
        not is_validation_enabled()
    ):
        return permissions

    match permissions:
        case int() if not isinstance(permissions, bool):
            value = int(permissions)
        case str() if PERMISSION_PATTERN.match(permissions):
            value = int(permissions)
        case _:
            raise ValidationError(
                'default_member_permissions', permissions,
                'expected a permission bitfield, an integer or a digit string')

    if not 0 <= value < MAX_PERMISSION_VALUE:
        raise ValidationError(
            'default_member_permissions', permissions,
            'bitfield out of range')

    return str(value)


# ? option level fields
def validate_required(value: Any) -> bool:  # noqa: ANN401
    return _check('required', _bool, value)


def validate_autocomplete(value: Any) -> bool:  # noqa: ANN401
    return _check('autocomplete', _bool, value)


def validate_min_length(value: Any) -> int:  # noqa: ANN401
    return _check('min_length', _min_length, value)


def validate_max_length(value: Any) -> int:  # noqa: ANN401
    return _check('max_length', _max_length, value)


def _validate_numeric(
    field: str,
    kind: ApplicationCommandOptionType,
    value: Any  # noqa: ANN401
) -> int | float:
    if not is_validation_enabled():
        return value

    if kind == ApplicationCommandOptionType.INTEGER:
        return _check(field, _integer, value)

    if (
        isinstance(value, bool) or
        not isinstance(value, int | float) or
        not isfinite(value)
    ):
        raise ValidationError(field, value, 'expected a finite number')

    return value


def validate_min_value(
    kind: ApplicationCommandOptionType,
    value: Any  # noqa: ANN401
) -> int | float:
    return _validate_numeric('min_value', kind, value)


def validate_max_value(
    kind: ApplicationCommandOptionType,
    value: Any  # noqa: ANN401
) -> int | float:
    return _validate_numeric('max_value', kind, value)


def validate_choice(
    kind: ApplicationCommandOptionType,
    name: Any,  # noqa: ANN401
    value: Any  # noqa: ANN401
) -> tuple[str, str | int | float]:
    name = _check('choice.name', _choice_name, name)

    if kind == ApplicationCommandOptionType.STRING:
        return name, _check('choice.value', _string_choice_value, value)

    return name, _validate_numeric('choice.value', kind, value)


def validate_choices_length(choices: list) -> list:
    if is_validation_enabled() and len(choices) > MAX_CHOICES:
        raise ValidationError(
            'choices', choices, f'at most {MAX_CHOICES} choices are allowed')

    return choices


def validate_choices_and_autocomplete(
    choices: list,
    autocomplete: Any  # noqa: ANN401
) -> None:
    if is_validation_enabled() and choices and autocomplete is True:
        raise ValidationError(
            'autocomplete', autocomplete,
            'autocomplete and choices are mutually exclusive')


def validate_channel_types(
    channel_types: Any  # noqa: ANN401
) -> list[ChannelType]:
    members = _check_enum_list('channel_types', ChannelType, channel_types)

    if is_validation_enabled():
        for member in members:
            if member not in ALLOWED_CHANNEL_TYPES:
                raise ValidationError(
                    'channel_types', member,
                    'channel type cannot be used in an option')

    return members


def validate_option_mix(
    options: list,
    option: Any  # noqa: ANN401
) -> None:
    """subcommands and subcommand groups cannot sit beside value options"""
    if not is_validation_enabled() or not options:
        return

    kind = getattr(option, 'type', None)

    if not isinstance(kind, ApplicationCommandOptionType):
        return

    for existing in options:
        existing_kind = getattr(existing, 'type', None)

        if (
            isinstance(existing_kind, ApplicationCommandOptionType) and
            existing_kind.is_subcommand != kind.is_subcommand
        ):
            raise ValidationError(
                'options', option,
                'subcommands cannot be mixed with other option types')
