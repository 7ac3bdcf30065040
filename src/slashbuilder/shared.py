from __future__ import annotations

from typing import Any, Protocol, Self, TYPE_CHECKING

import logfire

from .enums import ApplicationCommandType
from .missing import MISSING
from .utils import filter_missing, normalize_array
from .assertions import (
    validate_default_member_permissions,
    validate_required_parameters,
    validate_integration_types,
    validate_default_permission,
    validate_localization_map,
    validate_dm_permission,
    validate_description,
    validate_contexts,
    validate_name,
    validate_nsfw
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from .enums import (
        ApplicationIntegrationType,
        InteractionContextType,
        Permission,
        Locale
    )
    from .missing import Optional, Nullable


__all__ = (
    'OptionBuilder',
    'SharedNameAndDescription',
    'SharedSlashCommand',
)


type LocalizationMap = dict[str, str | None]


class OptionBuilder(Protocol):
    def serialize(self) -> dict:
        ...


class SharedNameAndDescription:
    name: Optional[str]
    """1-32 character name"""
    name_localizations: Optional[Nullable[LocalizationMap]]
    """Localization dictionary for `name` field. Values follow the same restrictions as `name`"""
    description: Optional[str]
    """1-100 character description"""
    description_localizations: Optional[Nullable[LocalizationMap]]
    """Localization dictionary for `description` field. Values follow the same restrictions as `description`"""

    def __init__(self) -> None:
        super().__init__()
        self.name = MISSING
        self.name_localizations = MISSING
        self.description = MISSING
        self.description_localizations = MISSING

    def set_name(self, name: str) -> Self:
        self.name = validate_name(name)

        return self

    def set_description(self, description: str) -> Self:
        self.description = validate_description(description)

        return self

    def set_name_localization(
        self,
        locale: Locale | str,
        localized_name: str | None
    ) -> Self:
        """set one locale; `None` tells the api to clear it"""
        self.name_localizations = self._merge_localization(
            self.name_localizations,
            locale,
            localized_name,
            validate_name,
            'name_localizations'
        )

        return self

    def set_name_localizations(
        self,
        localized_names: Mapping[Locale | str, str | None] | None
    ) -> Self:
        self.name_localizations = self._replace_localizations(
            localized_names,
            validate_name,
            'name_localizations'
        )

        return self

    def set_description_localization(
        self,
        locale: Locale | str,
        localized_description: str | None
    ) -> Self:
        self.description_localizations = self._merge_localization(
            self.description_localizations,
            locale,
            localized_description,
            validate_description,
            'description_localizations'
        )

        return self

    def set_description_localizations(
        self,
        localized_descriptions: Mapping[Locale | str, str | None] | None
    ) -> Self:
        self.description_localizations = self._replace_localizations(
            localized_descriptions,
            validate_description,
            'description_localizations'
        )

        return self

    @staticmethod
    def _merge_localization(
        current: Optional[Nullable[LocalizationMap]],
        locale: Locale | str,
        value: str | None,
        rule: Callable[[Any], str],
        field: str
    ) -> LocalizationMap:
        entry = validate_localization_map({locale: value}, rule, field)

        return {**(current or {}), **entry}

    @staticmethod
    def _replace_localizations(
        localizations: Mapping[Locale | str, str | None] | None,
        rule: Callable[[Any], str],
        field: str
    ) -> Nullable[LocalizationMap]:
        if localizations is None:
            return None

        return validate_localization_map(dict(localizations), rule, field)


class SharedSlashCommand(SharedNameAndDescription):
    """
    state and setters shared by every chat input command

    every field starts out as MISSING so that "never configured" is never
    confused with a falsy value; MISSING fields are left out of `serialize()`
    """
    options: list[OptionBuilder]
    """Parameters for the command, max of 25"""
    contexts: Optional[list[InteractionContextType]]
    """Interaction context(s) where the command can be used"""
    integration_types: Optional[list[ApplicationIntegrationType]]
    """Installation contexts where the command is available"""
    default_member_permissions: Optional[Nullable[str]]
    """Set of permissions represented as a bit set, `None` means no restriction"""
    default_permission: Optional[bool]
    """deprecated, use `default_member_permissions` instead"""
    dm_permission: Optional[Nullable[bool]]
    """deprecated, use `contexts` instead"""
    nsfw: Optional[bool]
    """Indicates whether the command is age-restricted"""

    def __init__(self) -> None:
        super().__init__()
        self.options = []
        self.contexts = MISSING
        self.integration_types = MISSING
        self.default_member_permissions = MISSING
        self.default_permission = MISSING
        self.dm_permission = MISSING
        self.nsfw = MISSING

    def set_contexts(
        self,
        *contexts: InteractionContextType | int | Iterable[InteractionContextType | int]
    ) -> Self:
        self.contexts = validate_contexts(normalize_array(contexts))

        return self

    def set_integration_types(
        self,
        *integration_types: ApplicationIntegrationType | int | Iterable[ApplicationIntegrationType | int]
    ) -> Self:
        self.integration_types = validate_integration_types(
            normalize_array(integration_types))

        return self

    def set_default_permission(self, value: bool) -> Self:
        """
        whether the command is enabled by default when the app is added to a guild

        deprecated, use `set_default_member_permissions` or `set_contexts` instead
        """
        self.default_permission = validate_default_permission(value)

        return self

    def set_default_member_permissions(
        self,
        permissions: Optional[Nullable[Permission | int | str]]
    ) -> Self:
        """
        the permissions a member needs to run the command by default

        `0` disables the command for everyone but admins, `None` removes
        the restriction entirely
        """
        self.default_member_permissions = validate_default_member_permissions(
            permissions)

        return self

    def set_dm_permission(self, enabled: Optional[Nullable[bool]]) -> Self:
        """
        whether the command is available in direct messages with the app

        deprecated, use `set_contexts` instead
        """
        self.dm_permission = validate_dm_permission(enabled)

        return self

    def set_nsfw(self, nsfw: bool = True) -> Self:
        self.nsfw = validate_nsfw(nsfw)

        return self

    def serialize(self) -> dict:
        """
        validate the builder and return the request body for the command

        the builder itself is left untouched and can be serialized again
        """
        validate_required_parameters(self.name, self.description, self.options)

        validate_localization_map(
            self.name_localizations, validate_name, 'name_localizations')
        validate_localization_map(
            self.description_localizations, validate_description, 'description_localizations')

        document = filter_missing({
            'name': self.name,
            'name_localizations': self.name_localizations,
            'description': self.description,
            'description_localizations': self.description_localizations,
            'options': [
                option.serialize()
                for option in self.options
            ],
            'contexts': self.contexts,
            'integration_types': self.integration_types,
            'default_member_permissions': self.default_member_permissions,
            'default_permission': self.default_permission,
            'dm_permission': self.dm_permission,
            'nsfw': self.nsfw,
            'type': ApplicationCommandType.CHAT_INPUT
        })

        logfire.debug(
            'serialized command {name} with {option_count} options',
            name=self.name,
            option_count=len(document['options'])
        )

        return document
