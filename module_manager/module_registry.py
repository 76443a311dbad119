"""
Module Registry

Resolves module identifiers to module instances. Instances are created on
first lookup and cached for the lifetime of the registry.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, Union

from hooks.hook_registry import HookRegistry, get_hooks
from module_options.options_schema import ModuleOptions

from .module_definition import Module

logger = logging.getLogger(__name__)


class UnknownModuleError(ValueError):
    """The identifier of a valid module was expected."""

    def __init__(self, module_id: str):
        super().__init__(f'Module "{module_id}" is not defined.')
        self.module_id = module_id


@lru_cache(maxsize=None)
def studly(value: str) -> str:
    """
    Convert a value to studly caps case.

    Dashes and underscores separate words, every word gets its first letter
    upper-cased and the separators are dropped:
    ``"disable-post_tag"`` becomes ``"DisablePostTag"``.

    Args:
        value: The input string

    Returns:
        The studly-cased string
    """
    words = value.replace('-', ' ').replace('_', ' ').split(' ')
    return ''.join(word[:1].upper() + word[1:] for word in words)


class Modules:
    """
    Registry of Ecocide modules.

    Maps module identifiers to one lazily created instance per module class.
    Identifiers are case and separator insensitive: ``"disable-comments"``,
    ``"disable_comments"`` and ``"DISABLE-COMMENTS"`` all resolve to the
    same instance.
    """

    def __init__(self, hooks: Optional[HookRegistry] = None,
                 module_classes: Optional[Iterable[Type[Module]]] = None):
        """
        Args:
            hooks: Hook registry the modules are constructed against.
                Defaults to the process-wide registry.
            module_classes: Module classes to make available. Defaults to
                every module shipped in the ``modules`` package.
        """
        self.hooks = hooks if hooks is not None else get_hooks()
        self._classes: Dict[str, Type[Module]] = {}
        self._instances: Dict[Type[Module], Module] = {}

        if module_classes is None:
            from modules import ALL_MODULES

            module_classes = ALL_MODULES

        for module_cls in module_classes:
            self.register(module_cls)

    def register(self, module_cls: Type[Module]) -> None:
        """
        Make a module class available by its identifier.

        Args:
            module_cls: The Module subclass to register

        Raises:
            ValueError: If the class has no identifier, or another class is
                already registered under the same name
        """
        if not module_cls.module_id:
            raise ValueError(f"Module class {module_cls.__name__} has no module_id")

        key = self._key(module_cls.module_id)
        existing = self._classes.get(key)
        if existing is not None and existing is not module_cls:
            raise ValueError(
                f"Module '{module_cls.module_id}' is already registered by {existing.__name__}"
            )

        self._classes[key] = module_cls
        logger.debug(f"Registered module class: {module_cls.module_id} ({module_cls.__name__})")

    def get(self, module_id: str) -> Module:
        """
        Get a module by its identifier, creating it on first use.

        Args:
            module_id: The module identifier

        Returns:
            The module instance

        Raises:
            UnknownModuleError: If no module is defined for the identifier
        """
        module_cls = self._classes.get(self._key(module_id))
        if module_cls is None:
            raise UnknownModuleError(module_id)

        return self.instance_of(module_cls)

    def instance_of(self, module_cls: Type[Module]) -> Module:
        """
        Get the instance of a module class, creating it on first use.

        The class does not have to be registered: subclasses of shipped
        modules and modules defined elsewhere get their own instance.

        Args:
            module_cls: A concrete Module subclass

        Returns:
            The module instance
        """
        module = self._instances.get(module_cls)
        if module is None:
            module = self._instances[module_cls] = module_cls(self.hooks)
            logger.debug(f"Created module instance: {module_cls.module_id} ({module_cls.__name__})")
        return module

    def has(self, module_id: str) -> bool:
        """Check if a module is defined for the identifier."""
        return self._key(module_id) in self._classes

    def boot(self, module_id: str,
             options: Union[ModuleOptions, Mapping[str, Any], None] = None) -> Module:
        """
        Get a module and boot it.

        Args:
            module_id: The module identifier
            options: Options to boot the module with

        Returns:
            The booted module
        """
        module = self.get(module_id)
        module.boot(options)
        return module

    def available(self) -> List[str]:
        """Get the identifiers of every available module."""
        return sorted(module_cls.module_id for module_cls in self._classes.values())

    def loaded(self) -> Dict[str, Module]:
        """Get the instances of the registered modules created so far, keyed by identifier."""
        registered = set(self._classes.values())
        return {
            module.module_id: module
            for module_cls, module in self._instances.items()
            if module_cls in registered
        }

    @staticmethod
    def _key(module_id: str) -> str:
        return studly(module_id).casefold()


# Global registry instance
_modules: Optional[Modules] = None


def get_modules() -> Modules:
    """
    Get or create the process-wide module registry.

    Returns:
        Modules: Global registry bound to the global hook registry
    """
    global _modules
    if _modules is None:
        _modules = Modules()
    return _modules


def reset_modules() -> None:
    """Reset the global module registry (useful for testing)."""
    global _modules
    _modules = None
