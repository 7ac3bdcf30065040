from __future__ import annotations

from typing import Self, TYPE_CHECKING
from collections.abc import Callable

from .enums import ApplicationCommandOptionType
from .shared import SharedNameAndDescription, SharedSlashCommand
from .errors import ValidationError
from .missing import MISSING
from .utils import filter_missing
from .assertions import (
    validate_max_options_length,
    validate_required_parameters,
    validate_localization_map,
    validate_description,
    validate_option_mix,
    validate_name
)
from .options import (
    SlashCommandMentionableOption,
    SlashCommandAttachmentOption,
    SlashCommandBooleanOption,
    SlashCommandChannelOption,
    SlashCommandIntegerOption,
    SlashCommandNumberOption,
    SlashCommandStringOption,
    SlashCommandRoleOption,
    SlashCommandUserOption
)

if TYPE_CHECKING:
    from .shared import OptionBuilder


__all__ = (
    'SlashCommandBuilder',
    'SlashCommandSubcommandBuilder',
    'SlashCommandSubcommandGroupBuilder',
)


type BuilderInput[T] = T | Callable[[T], T]


def _resolve_builder[T](builder: BuilderInput[T], cls: type[T]) -> T:
    result = builder(cls()) if callable(builder) else builder

    if not isinstance(result, cls):
        raise ValidationError(
            'options', result, f'expected an instance of {cls.__name__}')

    return result


def _push_option(options: list[OptionBuilder], option: OptionBuilder) -> None:
    validate_max_options_length([*options, option])
    validate_option_mix(options, option)

    options.append(option)


class SharedSlashCommandOptions:
    options: list[OptionBuilder]

    def __init__(self) -> None:
        super().__init__()
        self.options = []

    def _add_option[T](self, builder: BuilderInput[T], cls: type[T]) -> Self:
        _push_option(self.options, _resolve_builder(builder, cls))

        return self

    def add_boolean_option(
        self,
        option: BuilderInput[SlashCommandBooleanOption]
    ) -> Self:
        return self._add_option(option, SlashCommandBooleanOption)

    def add_user_option(
        self,
        option: BuilderInput[SlashCommandUserOption]
    ) -> Self:
        return self._add_option(option, SlashCommandUserOption)

    def add_channel_option(
        self,
        option: BuilderInput[SlashCommandChannelOption]
    ) -> Self:
        return self._add_option(option, SlashCommandChannelOption)

    def add_role_option(
        self,
        option: BuilderInput[SlashCommandRoleOption]
    ) -> Self:
        return self._add_option(option, SlashCommandRoleOption)

    def add_attachment_option(
        self,
        option: BuilderInput[SlashCommandAttachmentOption]
    ) -> Self:
        return self._add_option(option, SlashCommandAttachmentOption)

    def add_mentionable_option(
        self,
        option: BuilderInput[SlashCommandMentionableOption]
    ) -> Self:
        return self._add_option(option, SlashCommandMentionableOption)

    def add_string_option(
        self,
        option: BuilderInput[SlashCommandStringOption]
    ) -> Self:
        return self._add_option(option, SlashCommandStringOption)

    def add_integer_option(
        self,
        option: BuilderInput[SlashCommandIntegerOption]
    ) -> Self:
        return self._add_option(option, SlashCommandIntegerOption)

    def add_number_option(
        self,
        option: BuilderInput[SlashCommandNumberOption]
    ) -> Self:
        return self._add_option(option, SlashCommandNumberOption)


class SharedSlashCommandSubcommands:
    options: list[OptionBuilder]

    def add_subcommand_group(
        self,
        subcommand_group: BuilderInput[SlashCommandSubcommandGroupBuilder]
    ) -> Self:
        _push_option(
            self.options,
            _resolve_builder(subcommand_group, SlashCommandSubcommandGroupBuilder)
        )

        return self

    def add_subcommand(
        self,
        subcommand: BuilderInput[SlashCommandSubcommandBuilder]
    ) -> Self:
        _push_option(
            self.options,
            _resolve_builder(subcommand, SlashCommandSubcommandBuilder)
        )

        return self


class _SubcommandBase(SharedNameAndDescription):
    type: ApplicationCommandOptionType
    options: list[OptionBuilder]

    def serialize(self) -> dict:
        validate_required_parameters(self.name, self.description, self.options)

        validate_localization_map(
            self.name_localizations, validate_name, 'name_localizations')
        validate_localization_map(
            self.description_localizations, validate_description, 'description_localizations')

        return filter_missing({
            'type': self.type,
            'name': self.name,
            'name_localizations': self.name_localizations,
            'description': self.description,
            'description_localizations': self.description_localizations,
            'options': [
                option.serialize()
                for option in self.options
            ]
        })


class SlashCommandSubcommandBuilder(SharedSlashCommandOptions, _SubcommandBase):
    type = ApplicationCommandOptionType.SUB_COMMAND


class SlashCommandSubcommandGroupBuilder(_SubcommandBase):
    type = ApplicationCommandOptionType.SUB_COMMAND_GROUP

    def __init__(self) -> None:
        super().__init__()
        self.options = []

    def add_subcommand(
        self,
        subcommand: BuilderInput[SlashCommandSubcommandBuilder]
    ) -> Self:
        _push_option(
            self.options,
            _resolve_builder(subcommand, SlashCommandSubcommandBuilder)
        )

        return self


class SlashCommandBuilder(
    SharedSlashCommandOptions,
    SharedSlashCommandSubcommands,
    SharedSlashCommand
):
    """
    a chat input command; name and description may be given here or set later

    `SlashCommandBuilder('ping', 'check the latency').set_nsfw().serialize()`
    """

    def __init__(
        self,
        name: str = MISSING,
        description: str = MISSING
    ) -> None:
        super().__init__()

        if name is not MISSING:
            self.set_name(name)

        if description is not MISSING:
            self.set_description(description)
