"""
Hook Registry

In-process action/filter registry with priority ordering, modeled on the host
CMS hook API. Modules receive a HookRegistry and install their callbacks on it;
the host (or a test) then fires the hooks with do_action() and apply_filters().
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

CallbackRef = Union[Callable, str]
"""A callback, or the name of a registered function."""


@dataclass(frozen=True)
class HookBinding:
    """A single callback registration on a hook."""
    hook: str
    callback: Callable
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = 1
    unique_id: str = ""


def build_unique_id(callback: Callable) -> str:
    """
    Build the key a callback is stored under for a given hook and priority.

    Registering the same callback twice at the same priority therefore replaces
    the first registration, and removal works with an equal callback value
    (bound methods are re-created on every attribute access).

    Args:
        callback: Any callable

    Returns:
        A string identifying the callable
    """
    if inspect.ismethod(callback):
        owner = callback.__self__
        return f"{id(owner):x}{callback.__func__.__qualname__}"

    if inspect.isfunction(callback):
        # Lambdas and closures share qualnames, so they are keyed by identity
        if '<' not in callback.__qualname__:
            return f"{callback.__module__}.{callback.__qualname__}"

    return f"{id(callback):x}"


def callable_name(callback: Callable) -> Optional[str]:
    """
    Resolve the human readable name of a callable.

    Bound methods resolve to ``"Class.method"`` using the class of the bound
    object, functions to their qualified name. Anything without a stable name
    (lambdas, closures, partials, callable instances) resolves to None.
    """
    if inspect.ismethod(callback):
        owner = callback.__self__
        owner_name = owner.__name__ if inspect.isclass(owner) else type(owner).__name__
        return f"{owner_name}.{callback.__name__}"

    if inspect.isfunction(callback) or inspect.isbuiltin(callback):
        qualname = callback.__qualname__
        if '<' in qualname:
            return None
        return qualname

    return None


class HookRegistry:
    """
    Registry of action and filter callbacks.

    Actions and filters share one table, as they do in the host: an action is
    a filter whose return value is ignored. Callbacks run in ascending priority
    order and, within one priority, in registration order.
    """

    def __init__(self, is_admin: bool = False):
        self.is_admin = is_admin
        self._hooks: Dict[str, Dict[int, Dict[str, HookBinding]]] = {}
        self._action_counts: Dict[str, int] = {}
        self._current: List[str] = []

    # Registration
    def add_filter(self, hook: str, callback: Callable,
                   priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> bool:
        """
        Register a callback on a filter hook.

        Args:
            hook: Name of the hook
            callback: Callable to run when the hook is applied
            priority: Order of execution, lower runs earlier
            accepted_args: Number of hook arguments passed to the callback

        Returns:
            Always True
        """
        if not callable(callback):
            raise TypeError(f"Callback for hook '{hook}' is not callable: {callback!r}")

        unique_id = build_unique_id(callback)
        binding = HookBinding(hook, callback, priority, accepted_args, unique_id)
        self._hooks.setdefault(hook, {}).setdefault(priority, {})[unique_id] = binding

        logger.debug(f"Added '{callable_name(callback) or unique_id}' to '{hook}' at priority {priority}")
        return True

    def add_action(self, hook: str, callback: Callable,
                   priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> bool:
        """Register a callback on an action hook."""
        return self.add_filter(hook, callback, priority, accepted_args)

    def remove_filter(self, hook: str, callback: CallbackRef, priority: int = DEFAULT_PRIORITY) -> bool:
        """
        Remove a callback from a filter hook.

        Args:
            hook: Name of the hook
            callback: The callback, or the name of a function registered by
                someone else (e.g. "print_emoji_styles")
            priority: Priority the callback was registered at

        Returns:
            True if the callback was registered and has been removed
        """
        by_priority = self._hooks.get(hook, {})
        bindings = by_priority.get(priority)
        if not bindings:
            return False

        matches = self._matching_ids(bindings, callback)
        for unique_id in matches:
            del bindings[unique_id]
        removed = bool(matches)

        if not bindings:
            del by_priority[priority]
        if not by_priority:
            self._hooks.pop(hook, None)

        if removed:
            name = callback if isinstance(callback, str) else callable_name(callback)
            logger.debug(f"Removed '{name}' from '{hook}' at priority {priority}")
        return removed

    def remove_action(self, hook: str, callback: CallbackRef, priority: int = DEFAULT_PRIORITY) -> bool:
        """Remove a callback from an action hook."""
        return self.remove_filter(hook, callback, priority)

    def remove_all_filters(self, hook: str, priority: Optional[int] = None) -> bool:
        """Remove every callback from a hook, optionally only at one priority."""
        if hook not in self._hooks:
            return True

        if priority is None:
            del self._hooks[hook]
        else:
            self._hooks[hook].pop(priority, None)
            if not self._hooks[hook]:
                del self._hooks[hook]
        return True

    def has_filter(self, hook: str, callback: Optional[CallbackRef] = None) -> Union[bool, int]:
        """
        Check if a hook has callbacks registered.

        Args:
            hook: Name of the hook
            callback: Optional specific callback to look for

        Returns:
            Without a callback, whether anything is registered. With a
            callback, the priority it is registered at, or False.
        """
        by_priority = self._hooks.get(hook, {})
        if callback is None:
            return any(by_priority.values())

        for priority in sorted(by_priority):
            if self._matching_ids(by_priority[priority], callback):
                return priority
        return False

    has_action = has_filter

    # Execution
    def apply_filters(self, hook: str, value: Any = None, *args: Any) -> Any:
        """
        Pass a value through every callback registered on a hook.

        Args:
            hook: Name of the hook
            value: The value to filter
            *args: Additional arguments passed to callbacks

        Returns:
            The filtered value
        """
        self._current.append(hook)
        try:
            for binding in self._bindings_in_order(hook):
                call_args = (value,) + args
                value = binding.callback(*call_args[:binding.accepted_args])
        finally:
            self._current.pop()
        return value

    def do_action(self, hook: str, *args: Any) -> None:
        """
        Run every callback registered on an action hook.

        Args:
            hook: Name of the hook
            *args: Arguments passed to callbacks
        """
        self._action_counts[hook] = self._action_counts.get(hook, 0) + 1

        self._current.append(hook)
        try:
            for binding in self._bindings_in_order(hook):
                binding.callback(*args[:binding.accepted_args])
        finally:
            self._current.pop()

    def did_action(self, hook: str) -> int:
        """Get the number of times an action has fired."""
        return self._action_counts.get(hook, 0)

    def current_filter(self) -> Optional[str]:
        """Get the name of the hook currently being run, if any."""
        return self._current[-1] if self._current else None

    # Inspection
    def registrations(self, hook: Optional[str] = None) -> List[HookBinding]:
        """
        List the registered bindings in execution order.

        Args:
            hook: Limit the listing to one hook

        Returns:
            List of HookBinding entries
        """
        hooks = [hook] if hook is not None else sorted(self._hooks)
        result = []
        for name in hooks:
            result.extend(self._bindings_in_order(name))
        return result

    @staticmethod
    def _matching_ids(bindings: Dict[str, HookBinding], callback: CallbackRef) -> List[str]:
        if isinstance(callback, str):
            return [
                unique_id for unique_id, binding in bindings.items()
                if unique_id == callback or callable_name(binding.callback) == callback
            ]

        unique_id = build_unique_id(callback)
        return [unique_id] if unique_id in bindings else []

    def _bindings_in_order(self, hook: str) -> List[HookBinding]:
        # Snapshot, so callbacks may add or remove bindings while the hook runs
        by_priority = self._hooks.get(hook, {})
        return [
            binding
            for priority in sorted(by_priority)
            for binding in list(by_priority[priority].values())
        ]


# Global hook registry
_hooks: Optional[HookRegistry] = None


def get_hooks() -> HookRegistry:
    """
    Get or create the process-wide hook registry.

    Returns:
        HookRegistry: Global registry instance
    """
    global _hooks
    if _hooks is None:
        _hooks = HookRegistry()
    return _hooks


def reset_hooks() -> None:
    """Reset the global hook registry (useful for testing)."""
    global _hooks
    _hooks = None
