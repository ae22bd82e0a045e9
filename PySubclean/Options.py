from __future__ import annotations
from collections.abc import Mapping
from copy import deepcopy
import os

from PySubclean.SettingsType import SettingType, SettingsType

MIN_LINES_PER_BLOCK = 3

def _default_settings() -> dict[str, SettingType]:
    """
    Defaults, with environment variables taking precedence over built-in values
    """
    return {
        'denylist_file': os.getenv('SUBCLEAN_DENYLIST') or None,
        'min_lines_per_block': os.getenv('SUBCLEAN_MIN_LINES') or MIN_LINES_PER_BLOCK,
        'preview': False,
        'validate_output': False,
        'log_path': None,
    }

class Options(SettingsType):
    """
    Settings for a cleaning run.

    Settings are resolved in order of precedence: explicit values, environment variables, defaults.
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None, **kwargs : SettingType):
        super().__init__(deepcopy(_default_settings()))

        if settings:
            self.update(settings)

        self.update(kwargs)

    @property
    def denylist_file(self) -> str|None:
        return self.get_str('denylist_file')

    @property
    def min_lines_per_block(self) -> int:
        value = self.get_int('min_lines_per_block', MIN_LINES_PER_BLOCK)
        return value if value is not None else MIN_LINES_PER_BLOCK

    @property
    def preview(self) -> bool:
        return self.get_bool('preview')

    @property
    def validate_output(self) -> bool:
        return self.get_bool('validate_output')

    @property
    def log_path(self) -> str|None:
        return self.get_str('log_path')
