"""
Module Definition System

Defines the base class every Ecocide module derives from: lifecycle,
singleton access, and the option driven gate that decides which hook
bindings a module actually installs.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Union

from hooks.hook_registry import DEFAULT_PRIORITY, HookBinding, HookRegistry, callable_name, get_hooks
from module_options.options_schema import ModuleOptions

logger = logging.getLogger(__name__)


class ModuleKind(str, Enum):
    """Identifiers of the modules shipped with Ecocide."""
    DISABLE_ATTACHMENT_TEMPLATE = "disable-attachment-template"
    DISABLE_AUTHOR_TEMPLATE = "disable-author-template"
    DISABLE_COMMENTS = "disable-comments"
    DISABLE_CUSTOMIZER = "disable-customizer"
    DISABLE_EMOJI = "disable-emoji"
    DISABLE_POST = "disable-post"
    DISABLE_POST_CATEGORY = "disable-post-category"
    DISABLE_POST_FORMAT = "disable-post-format"
    DISABLE_POST_TAG = "disable-post-tag"
    DISABLE_SEARCH = "disable-search"
    DISABLE_XML_RPC = "disable-xml-rpc"


class FeatureDisabled(RuntimeError):
    """Raised by callbacks that refuse access to a disabled feature."""

    def __init__(self, message: str, status: int = 403):
        super().__init__(message)
        self.status = status


class Module(ABC):
    """
    Abstract base class for Ecocide modules.

    A module disables or rewrites one host feature by installing callbacks
    on the hook registry when it boots. Subclasses declare a ``module_id`` and
    implement ``register_hooks()``, installing bindings through the gated
    ``add_action()`` and ``add_filter()`` wrappers so that every binding can be
    switched off from the module options:

        {"hooks": {"<hook>": false}}                  # the whole hook
        {"hooks": {"<hook>": {"<callback>": false}}}  # one callback on it
    """

    HOOK_PREFIX: ClassVar[str] = "ecocide/modules/"

    module_id: ClassVar[Optional[str]] = None
    module_description: ClassVar[str] = ""

    def __init__(self, hooks: Optional[HookRegistry] = None):
        self.hooks = hooks if hooks is not None else get_hooks()
        self.booted = False
        self._options: Optional[Dict[str, Any]] = None
        self._bindings: List[HookBinding] = []

    @classmethod
    def get_instance(cls) -> 'Module':
        """
        Get the process-wide instance of this module class.

        The instance is created on first call and kept by the process-wide
        module registry, so for a registered class it is the same object
        ``get_modules().get(module_id)`` returns. Subclasses and unregistered
        modules get an instance of their own class.

        Raises:
            TypeError: If called on a class without a module identifier
        """
        if cls.module_id is None:
            raise TypeError(f"{cls.__name__} has no module identifier and cannot be instantiated")

        from .module_registry import get_modules

        return get_modules().instance_of(cls)

    @property
    def hook_prefix(self) -> str:
        """Prefix of the customisation hooks this module applies."""
        return f"{self.HOOK_PREFIX}{(self.module_id or '').replace('-', '_')}/"

    @property
    def options(self) -> Optional[Dict[str, Any]]:
        """The options the module was booted with, None before boot."""
        return self._options

    # Lifecycle
    def boot(self, options: Union[ModuleOptions, Mapping[str, Any], None] = None) -> None:
        """
        Boot the module.

        Booting happens once; later calls are no-ops and do not register
        hooks again.

        Args:
            options: ModuleOptions or a plain mapping of options to
                customise the module
        """
        if self.booted:
            logger.debug(f"Module '{self.module_id}' already booted, skipping")
            return

        self.booted = True
        self._options = self._normalize_options(options)

        self.register_hooks()

        logger.info(f"Booted module '{self.module_id}' with {len(self._bindings)} hook bindings")

    def is_booted(self) -> bool:
        """Check whether the module has booted."""
        return self.booted

    @abstractmethod
    def register_hooks(self) -> None:
        """Install the module's hook bindings. Called once, from boot()."""
        pass

    # Hook gate
    def is_hook_active(self, hook: str, callback_name: Optional[str] = None) -> bool:
        """
        Check whether a hook, and optionally one callback on it, is active.

        Hooks are active unless the options switch them off. A callback level
        switch is only looked up when the hook maps callback names to
        switches; a hook level ``False`` switches off every callback.

        Args:
            hook: The hook name
            callback_name: The callback name, see get_callable_name()

        Returns:
            False if the options switch the hook or callback off
        """
        hooks = (self._options or {}).get('hooks')
        if not isinstance(hooks, Mapping):
            return True

        state = hooks.get(hook)

        if callback_name and isinstance(state, Mapping):
            if state.get(callback_name) is False:
                return False

        if state is False:
            return False

        return True

    def add_action(self, hook: str, callback: Callable,
                   priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> bool:
        """
        Add a callback to an action hook unless the options switch it off.

        Returns:
            False if the binding was skipped, otherwise the registry's result
        """
        return self._add_binding(self.hooks.add_action, hook, callback, priority, accepted_args)

    def add_filter(self, hook: str, callback: Callable,
                   priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> bool:
        """
        Add a callback to a filter hook unless the options switch it off.

        Returns:
            False if the binding was skipped, otherwise the registry's result
        """
        return self._add_binding(self.hooks.add_filter, hook, callback, priority, accepted_args)

    def remove_action(self, hook: str, callback: Callable, priority: int = DEFAULT_PRIORITY) -> bool:
        """Remove a callback from an action hook."""
        return self.hooks.remove_action(hook, callback, priority)

    def remove_filter(self, hook: str, callback: Callable, priority: int = DEFAULT_PRIORITY) -> bool:
        """Remove a callback from a filter hook."""
        return self.hooks.remove_filter(hook, callback, priority)

    def get_callable_name(self, callback: Callable) -> Optional[str]:
        """
        Get the name a callback is addressed by in the module options.

        Unlike the registry's callable names, methods bound to this module
        are reduced to the method name. Lambdas, closures, partials and
        callable objects have no name and can only be switched off at the
        hook level.

        Args:
            callback: The callback

        Returns:
            The callback name, or None
        """
        if inspect.ismethod(callback):
            if callback.__self__ is self:
                return callback.__name__
            return callable_name(callback)

        if inspect.isfunction(callback) or inspect.isbuiltin(callback):
            return callable_name(callback)

        return None

    # Status
    def installed_bindings(self) -> List[HookBinding]:
        """Get the hook bindings this module installed through the gate."""
        return list(self._bindings)

    def get_info(self) -> Dict[str, Any]:
        """Get a summary of the module's state."""
        return {
            'id': self.module_id,
            'description': self.module_description,
            'booted': self.booted,
            'hooks_installed': len(self._bindings),
            'options': self._options,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(module_id={self.module_id!r}, booted={self.booted})"

    # Internal helpers
    def _add_binding(self, register: Callable[..., bool], hook: str, callback: Callable,
                     priority: int, accepted_args: int) -> bool:
        name = self.get_callable_name(callback)

        # Bail early if the hook is switched off
        if not self.is_hook_active(hook, name):
            logger.debug(f"Module '{self.module_id}' skipped inactive hook '{hook}' ({name or 'anonymous'})")
            return False

        result = register(hook, callback, priority, accepted_args)
        if result:
            self._bindings.append(HookBinding(hook, callback, priority, accepted_args, name or ""))
        return result

    @staticmethod
    def _normalize_options(options: Union[ModuleOptions, Mapping[str, Any], None]) -> Dict[str, Any]:
        if options is None:
            return {}
        if isinstance(options, ModuleOptions):
            return options.to_dict()
        return dict(options)
