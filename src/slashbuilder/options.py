from __future__ import annotations

from typing import ClassVar, NotRequired, Self, TypedDict, TYPE_CHECKING

from .enums import ApplicationCommandOptionType
from .shared import SharedNameAndDescription
from .utils import filter_missing, normalize_array
from .errors import ValidationError
from .missing import MISSING
from .assertions import (
    validate_choices_and_autocomplete,
    validate_required_parameters,
    validate_localization_map,
    validate_choices_length,
    validate_channel_types,
    validate_autocomplete,
    validate_description,
    validate_min_length,
    validate_max_length,
    validate_min_value,
    validate_max_value,
    validate_required,
    validate_choice,
    validate_name
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .enums import ChannelType
    from .missing import Optional


__all__ = (
    'OptionChoice',
    'SlashCommandAttachmentOption',
    'SlashCommandBooleanOption',
    'SlashCommandChannelOption',
    'SlashCommandIntegerOption',
    'SlashCommandMentionableOption',
    'SlashCommandNumberOption',
    'SlashCommandOptionBase',
    'SlashCommandRoleOption',
    'SlashCommandStringOption',
    'SlashCommandUserOption',
)


class OptionChoice(TypedDict):
    name: str
    name_localizations: NotRequired[dict[str, str | None] | None]
    value: str | int | float


class SlashCommandOptionBase(SharedNameAndDescription):
    type: ClassVar[ApplicationCommandOptionType]
    required: Optional[bool]
    """Whether the parameter is required or optional, default `false`"""

    def __init__(self) -> None:
        super().__init__()
        self.required = MISSING

    def set_required(self, required: bool = True) -> Self:
        self.required = validate_required(required)

        return self

    def _validate(self) -> None:
        validate_required_parameters(self.name, self.description, [])

        validate_localization_map(
            self.name_localizations, validate_name, 'name_localizations')
        validate_localization_map(
            self.description_localizations, validate_description, 'description_localizations')

    def _payload(self) -> dict:
        return {
            'type': self.type,
            'name': self.name,
            'name_localizations': self.name_localizations,
            'description': self.description,
            'description_localizations': self.description_localizations,
            'required': self.required
        }

    def serialize(self) -> dict:
        self._validate()

        return filter_missing(self._payload())


# ? mixins, listed before SlashCommandOptionBase in subclasses
class OptionWithChoicesMixin:
    choices: Optional[list[OptionChoice]]
    """Choices for the user to pick from, max 25"""
    autocomplete: Optional[bool]
    """If autocomplete interactions are enabled for this option"""

    def __init__(self) -> None:
        super().__init__()
        self.choices = MISSING
        self.autocomplete = MISSING

    def _parse_choices(
        self,
        choices: tuple[OptionChoice | Iterable[OptionChoice], ...]
    ) -> list[OptionChoice]:
        parsed = []

        for choice in normalize_array(choices):
            if not isinstance(choice, dict):
                raise ValidationError('choices', choice, 'expected a mapping')

            name, value = validate_choice(
                self.type, choice.get('name'), choice.get('value'))  # type: ignore[attr-defined]

            parsed.append(OptionChoice(
                name=name,
                name_localizations=validate_localization_map(
                    choice.get('name_localizations', MISSING),
                    validate_description,
                    'choice.name_localizations'),
                value=value
            ))

        return parsed

    def add_choices(self, *choices: OptionChoice | Iterable[OptionChoice]) -> Self:
        parsed = self._parse_choices(choices)
        combined = validate_choices_length([*(self.choices or []), *parsed])
        validate_choices_and_autocomplete(combined, self.autocomplete)

        self.choices = combined

        return self

    def set_choices(self, *choices: OptionChoice | Iterable[OptionChoice]) -> Self:
        parsed = validate_choices_length(self._parse_choices(choices))
        validate_choices_and_autocomplete(parsed, self.autocomplete)

        self.choices = parsed

        return self

    def set_autocomplete(self, autocomplete: bool = True) -> Self:
        autocomplete = validate_autocomplete(autocomplete)
        validate_choices_and_autocomplete(self.choices or [], autocomplete)

        self.autocomplete = autocomplete

        return self

    def _validate(self) -> None:
        super()._validate()  # type: ignore[misc]
        validate_choices_and_autocomplete(self.choices or [], self.autocomplete)

    def _payload(self) -> dict:
        return {
            **super()._payload(),  # type: ignore[misc]
            'choices': self.choices,
            'autocomplete': self.autocomplete
        }


class OptionWithMinMaxValueMixin:
    min_value: Optional[int | float]
    """The minimum value permitted"""
    max_value: Optional[int | float]
    """The maximum value permitted"""

    def __init__(self) -> None:
        super().__init__()
        self.min_value = MISSING
        self.max_value = MISSING

    def set_min_value(self, min_value: int | float) -> Self:
        self.min_value = validate_min_value(self.type, min_value)  # type: ignore[attr-defined]

        return self

    def set_max_value(self, max_value: int | float) -> Self:
        self.max_value = validate_max_value(self.type, max_value)  # type: ignore[attr-defined]

        return self

    def _payload(self) -> dict:
        return {
            **super()._payload(),  # type: ignore[misc]
            'min_value': self.min_value,
            'max_value': self.max_value
        }


class SlashCommandStringOption(
    OptionWithChoicesMixin,
    SlashCommandOptionBase
):
    type = ApplicationCommandOptionType.STRING
    min_length: Optional[int]
    """The minimum allowed length (minimum of `0`, maximum of `6000`)"""
    max_length: Optional[int]
    """The maximum allowed length (minimum of `1`, maximum of `6000`)"""

    def __init__(self) -> None:
        super().__init__()
        self.min_length = MISSING
        self.max_length = MISSING

    def set_min_length(self, min_length: int) -> Self:
        self.min_length = validate_min_length(min_length)

        return self

    def set_max_length(self, max_length: int) -> Self:
        self.max_length = validate_max_length(max_length)

        return self

    def _payload(self) -> dict:
        return {
            **super()._payload(),
            'min_length': self.min_length,
            'max_length': self.max_length
        }


class SlashCommandIntegerOption(
    OptionWithMinMaxValueMixin,
    OptionWithChoicesMixin,
    SlashCommandOptionBase
):
    type = ApplicationCommandOptionType.INTEGER


class SlashCommandNumberOption(
    OptionWithMinMaxValueMixin,
    OptionWithChoicesMixin,
    SlashCommandOptionBase
):
    type = ApplicationCommandOptionType.NUMBER


class SlashCommandBooleanOption(SlashCommandOptionBase):
    type = ApplicationCommandOptionType.BOOLEAN


class SlashCommandUserOption(SlashCommandOptionBase):
    type = ApplicationCommandOptionType.USER


class SlashCommandChannelOption(SlashCommandOptionBase):
    type = ApplicationCommandOptionType.CHANNEL
    channel_types: Optional[list[ChannelType]]
    """The channels shown will be restricted to these types"""

    def __init__(self) -> None:
        super().__init__()
        self.channel_types = MISSING

    def add_channel_types(
        self,
        *channel_types: ChannelType | int | Iterable[ChannelType | int]
    ) -> Self:
        added = validate_channel_types(normalize_array(channel_types))

        self.channel_types = [
            *(self.channel_types or []),
            *(
                channel_type
                for channel_type in added
                if channel_type not in (self.channel_types or [])
            )
        ]

        return self

    def _payload(self) -> dict:
        return {
            **super()._payload(),
            'channel_types': self.channel_types
        }


class SlashCommandRoleOption(SlashCommandOptionBase):
    type = ApplicationCommandOptionType.ROLE


class SlashCommandMentionableOption(SlashCommandOptionBase):
    type = ApplicationCommandOptionType.MENTIONABLE


class SlashCommandAttachmentOption(SlashCommandOptionBase):
    type = ApplicationCommandOptionType.ATTACHMENT
