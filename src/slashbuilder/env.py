from typing import Self
from os import environ

from pydantic import BaseModel
import logfire

from .version import VERSION


class Env(BaseModel):
    validation: bool
    dev: bool
    logfire_token: str

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'validation': environ.get('SLASHBUILDER_VALIDATION', '1') != '0',
            'dev': environ.get('SLASHBUILDER_DEV', '1') != '0',
            'logfire_token': environ.get('LOGFIRE_TOKEN', '')
        })


env = Env.new()


def configure_logging() -> None:
    logfire.configure(
        service_name='slashbuilder' + ('-dev' if env.dev else ''),
        service_version=VERSION,
        token=env.logfire_token or None,
        environment='development' if env.dev else 'production',
        send_to_logfire='if-token-present',
        scrubbing=False if env.dev else None,
        console=False
    )
