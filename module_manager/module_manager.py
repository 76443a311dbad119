"""
Module Manager

Boots Ecocide modules from the options file and reports on their state.
"""

import logging
from typing import Dict, Iterable, List, Optional

from module_options.options_file import OptionsFile
from module_options.options_schema import ModuleOptions

from .module_definition import Module
from .module_registry import Modules, UnknownModuleError, get_modules

logger = logging.getLogger(__name__)


class ModuleManager:
    """
    Main manager for Ecocide modules.

    Reads the options file, boots the modules it lists with their options
    and gives access to module information.
    """

    def __init__(self,
                 modules: Optional[Modules] = None,
                 options_file: Optional[OptionsFile] = None):
        self.modules = modules if modules is not None else get_modules()
        self.options_file = options_file if options_file is not None else OptionsFile()

    def boot_configured(self) -> List[str]:
        """
        Boot every module listed in the options file.

        Unknown identifiers are logged and skipped so one typo does not keep
        the remaining modules from booting.

        Returns:
            Identifiers of the modules that were booted
        """
        booted = []

        for module_id in self.options_file.module_ids():
            try:
                module = self.modules.get(module_id)
            except UnknownModuleError as e:
                logger.warning(f"Skipping module from {self.options_file.path}: {e}")
                continue

            module.boot(self.options_file.get(module_id))
            booted.append(module.module_id)

        logger.info(f"Booted modules: {booted}")
        return booted

    def boot_modules(self, module_ids: Iterable[str]) -> List[str]:
        """
        Boot the given modules, with their options from the file if any.

        Args:
            module_ids: Identifiers of the modules to boot

        Returns:
            Identifiers of the modules that were booted

        Raises:
            UnknownModuleError: If an identifier has no module
        """
        booted = []

        for module_id in module_ids:
            try:
                module = self.modules.get(module_id)
            except UnknownModuleError:
                logger.error(f"Cannot boot unknown module '{module_id}'")
                raise

            module.boot(self._options_for(module))
            booted.append(module.module_id)

        return booted

    def get_module(self, module_id: str) -> Module:
        """Get a module by identifier."""
        return self.modules.get(module_id)

    def get_module_info(self, module_id: str) -> Optional[Dict]:
        """Get information about a module, None if it is not defined."""
        if not self.modules.has(module_id):
            return None

        info = self.modules.get(module_id).get_info()
        info['configured'] = self._options_for(self.modules.get(module_id)) is not None
        return info

    def get_all_modules_info(self) -> Dict[str, Dict]:
        """Get information about all available modules."""
        return {
            module_id: self.get_module_info(module_id)
            for module_id in self.modules.available()
        }

    def get_booted_modules(self) -> List[str]:
        """Get the identifiers of the modules that have booted."""
        return [
            module_id for module_id, module in self.modules.loaded().items()
            if module.is_booted()
        ]

    def _options_for(self, module: Module) -> Optional[ModuleOptions]:
        # The file may spell the identifier differently from the module
        options = self.options_file.get(module.module_id)
        if options is not None:
            return options

        for module_id in self.options_file.module_ids():
            if self.modules.has(module_id) and self.modules.get(module_id) is module:
                return self.options_file.get(module_id)
        return None
