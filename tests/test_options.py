"""Tests for option builders and the option-adding mixins."""

import pytest

from slashbuilder import (
    SlashCommandSubcommandGroupBuilder,
    SlashCommandSubcommandBuilder,
    SlashCommandAttachmentOption,
    SlashCommandBooleanOption,
    SlashCommandChannelOption,
    SlashCommandIntegerOption,
    SlashCommandNumberOption,
    SlashCommandStringOption,
    SlashCommandBuilder,
    ValidationError,
    ChannelType
)


def _query_option() -> SlashCommandStringOption:
    return (
        SlashCommandStringOption()
        .set_name('query')
        .set_description('what to search for')
    )


def test_string_option_serialize() -> None:
    option = _query_option().set_required().set_min_length(2).set_max_length(50)
    assert option.serialize() == {
        'type': 3,
        'name': 'query',
        'description': 'what to search for',
        'required': True,
        'min_length': 2,
        'max_length': 50
    }


def test_option_requires_name_and_description() -> None:
    with pytest.raises(ValidationError):
        SlashCommandBooleanOption().set_name('flag').serialize()


@pytest.mark.parametrize(('setter', 'value'), [
    ('set_min_length', -1),
    ('set_min_length', 6001),
    ('set_max_length', 0),
    ('set_max_length', '10'),
])
def test_string_option_length_bounds(setter: str, value: object) -> None:
    option = _query_option()
    with pytest.raises(ValidationError):
        getattr(option, setter)(value)


def test_choices() -> None:
    option = _query_option().add_choices(
        {'name': 'Cats', 'value': 'cats'},
        {'name': 'Dogs', 'value': 'dogs', 'name_localizations': {'fr': 'Chiens'}}
    )
    assert option.serialize()['choices'] == [
        {'name': 'Cats', 'value': 'cats'},
        {'name': 'Dogs', 'value': 'dogs', 'name_localizations': {'fr': 'Chiens'}}
    ]


def test_set_choices_replaces() -> None:
    option = _query_option().add_choices([{'name': 'a', 'value': 'a'}])
    option.set_choices({'name': 'b', 'value': 'b'})
    assert option.serialize()['choices'] == [{'name': 'b', 'value': 'b'}]


def test_choices_limit() -> None:
    option = _query_option().add_choices([
        {'name': str(i), 'value': str(i)}
        for i in range(25)
    ])
    with pytest.raises(ValidationError):
        option.add_choices({'name': 'overflow', 'value': 'overflow'})
    assert len(option.choices) == 25


def test_choices_and_autocomplete_are_exclusive() -> None:
    with pytest.raises(ValidationError):
        _query_option().add_choices({'name': 'a', 'value': 'a'}).set_autocomplete()

    with pytest.raises(ValidationError):
        _query_option().set_autocomplete().add_choices({'name': 'a', 'value': 'a'})

    assert _query_option().set_autocomplete().serialize()['autocomplete'] is True


def test_choice_must_be_mapping() -> None:
    with pytest.raises(ValidationError):
        _query_option().add_choices(('a', 'a'))  # type: ignore[arg-type]


def test_integer_option() -> None:
    option = (
        SlashCommandIntegerOption()
        .set_name('count')
        .set_description('how many')
        .set_min_value(1)
        .set_max_value(10)
        .add_choices({'name': 'one', 'value': 1})
    )
    assert option.serialize() == {
        'type': 4,
        'name': 'count',
        'description': 'how many',
        'min_value': 1,
        'max_value': 10,
        'choices': [{'name': 'one', 'value': 1}]
    }

    with pytest.raises(ValidationError):
        option.set_min_value(1.5)

    with pytest.raises(ValidationError):
        option.add_choices({'name': 'half', 'value': 0.5})


def test_number_option_accepts_floats() -> None:
    option = (
        SlashCommandNumberOption()
        .set_name('ratio')
        .set_description('a ratio')
        .set_min_value(0.5)
        .add_choices({'name': 'half', 'value': 0.5})
    )
    assert option.serialize()['min_value'] == 0.5

    with pytest.raises(ValidationError):
        option.set_max_value(float('inf'))

    with pytest.raises(ValidationError):
        option.set_max_value(True)


def test_channel_types() -> None:
    option = (
        SlashCommandChannelOption()
        .set_name('channel')
        .set_description('where to post')
        .add_channel_types(ChannelType.GUILD_TEXT, ChannelType.GUILD_FORUM)
        .add_channel_types([ChannelType.GUILD_TEXT])
    )
    assert option.serialize()['channel_types'] == [0, 15]

    with pytest.raises(ValidationError):
        option.add_channel_types(ChannelType.DM)


# --- adding options to commands ---


def test_add_option_by_callable_and_instance() -> None:
    command = (
        SlashCommandBuilder('search', 'search for something')
        .add_string_option(lambda option: option.set_name('query').set_description('terms'))
        .add_attachment_option(
            SlashCommandAttachmentOption().set_name('file').set_description('a file'))
    )
    assert [option['type'] for option in command.serialize()['options']] == [3, 11]


def test_add_option_wrong_builder_type() -> None:
    with pytest.raises(ValidationError):
        SlashCommandBuilder('a', 'b').add_string_option(
            SlashCommandBooleanOption().set_name('flag').set_description('flag'))  # type: ignore[arg-type]


def test_option_limit() -> None:
    command = SlashCommandBuilder('many', 'many options')
    for i in range(25):
        command.add_boolean_option(
            lambda option, i=i: option.set_name(f'flag{i}').set_description('a flag'))

    with pytest.raises(ValidationError):
        command.add_boolean_option(
            lambda option: option.set_name('overflow').set_description('too many'))

    assert len(command.options) == 25
    assert len(command.serialize()['options']) == 25


def test_subcommands() -> None:
    command = (
        SlashCommandBuilder('member', 'manage members')
        .add_subcommand(
            lambda sub: sub
            .set_name('add')
            .set_description('add a member')
            .add_user_option(lambda option: option.set_name('user').set_description('who')))
        .add_subcommand_group(
            lambda group: group
            .set_name('roles')
            .set_description('manage roles')
            .add_subcommand(
                SlashCommandSubcommandBuilder().set_name('list').set_description('list roles')))
    )

    assert command.serialize()['options'] == [
        {
            'type': 1,
            'name': 'add',
            'description': 'add a member',
            'options': [{'type': 6, 'name': 'user', 'description': 'who'}]
        },
        {
            'type': 2,
            'name': 'roles',
            'description': 'manage roles',
            'options': [
                {'type': 1, 'name': 'list', 'description': 'list roles', 'options': []}
            ]
        }
    ]


def test_subcommands_cannot_mix_with_options() -> None:
    command = SlashCommandBuilder('member', 'manage members').add_subcommand(
        lambda sub: sub.set_name('add').set_description('add a member'))

    with pytest.raises(ValidationError):
        command.add_string_option(lambda option: option.set_name('q').set_description('q'))

    plain = SlashCommandBuilder('echo', 'echo text').add_string_option(
        lambda option: option.set_name('text').set_description('what to echo'))

    with pytest.raises(ValidationError):
        plain.add_subcommand_group(SlashCommandSubcommandGroupBuilder())


def test_subcommand_requires_name() -> None:
    command = SlashCommandBuilder('member', 'manage members').add_subcommand(
        SlashCommandSubcommandBuilder().set_description('missing a name'))

    with pytest.raises(ValidationError):
        command.serialize()
