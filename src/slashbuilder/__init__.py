from .missing import MISSING, is_not_missing
from .errors import BuilderException, ShapeError, ValidationError
from .env import Env, configure_logging
from .utils import dumps, filter_missing, normalize_array
from .validation import (
    disable_validators,
    enable_validators,
    is_validation_enabled
)
from .enums import (
    ApplicationCommandOptionType,
    ApplicationIntegrationType,
    ApplicationCommandType,
    InteractionContextType,
    ChannelType,
    Permission,
    Locale
)
from .shared import OptionBuilder, SharedNameAndDescription, SharedSlashCommand
from .options import (
    SlashCommandMentionableOption,
    SlashCommandAttachmentOption,
    SlashCommandBooleanOption,
    SlashCommandChannelOption,
    SlashCommandIntegerOption,
    SlashCommandNumberOption,
    SlashCommandStringOption,
    SlashCommandOptionBase,
    SlashCommandRoleOption,
    SlashCommandUserOption,
    OptionChoice
)
from .command import (
    SlashCommandSubcommandGroupBuilder,
    SlashCommandSubcommandBuilder,
    SlashCommandBuilder
)
from .version import VERSION


__all__ = (
    'MISSING',
    'VERSION',
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
    'ApplicationIntegrationType',
    'BuilderException',
    'ChannelType',
    'Env',
    'InteractionContextType',
    'Locale',
    'OptionBuilder',
    'OptionChoice',
    'Permission',
    'ShapeError',
    'SharedNameAndDescription',
    'SharedSlashCommand',
    'SlashCommandAttachmentOption',
    'SlashCommandBooleanOption',
    'SlashCommandBuilder',
    'SlashCommandChannelOption',
    'SlashCommandIntegerOption',
    'SlashCommandMentionableOption',
    'SlashCommandNumberOption',
    'SlashCommandOptionBase',
    'SlashCommandRoleOption',
    'SlashCommandStringOption',
    'SlashCommandSubcommandBuilder',
    'SlashCommandSubcommandGroupBuilder',
    'SlashCommandUserOption',
    'ValidationError',
    'configure_logging',
    'disable_validators',
    'dumps',
    'enable_validators',
    'filter_missing',
    'is_not_missing',
    'is_validation_enabled',
    'normalize_array',
)
