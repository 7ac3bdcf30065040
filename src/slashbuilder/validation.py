import logfire

from .env import env


__all__ = (
    'disable_validators',
    'enable_validators',
    'is_validation_enabled',
)


_validation_enabled = env.validation


def enable_validators() -> bool:
    global _validation_enabled
    _validation_enabled = True
    logfire.info('builder validation enabled')
    return _validation_enabled


def disable_validators() -> bool:
    """
    turn every rule into a pass-through; values are stored as given
    """
    global _validation_enabled
    _validation_enabled = False
    logfire.info('builder validation disabled')
    return _validation_enabled


def is_validation_enabled() -> bool:
    return _validation_enabled
