"""
Module options package.

This package provides the configuration layer of the module loader:
- Pydantic models for per-module options
- A JSON options file listing the modules to boot
- Environment driven runtime settings

Basic usage:
    ```python
    from module_options import OptionsFile, get_config

    config = get_config()
    options_file = OptionsFile(config.options_path).load()

    for module_id in options_file.module_ids():
        print(module_id, options_file.get(module_id).hooks)
    ```
"""

from .config import EcocideConfig, get_config, reset_config
from .options_file import OptionsFile
from .options_schema import HookActiveState, ModuleOptions

__all__ = [
    # Options
    'HookActiveState',
    'ModuleOptions',
    'OptionsFile',

    # Settings
    'EcocideConfig',
    'get_config',
    'reset_config',
]
