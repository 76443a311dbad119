"""
Hook System

This package provides the action/filter hook registry that Ecocide modules
register their callbacks against. It mirrors the behaviour of the host CMS
hook API so modules can be booted and exercised without a live host.

Basic usage:
    ```python
    from hooks import get_hooks, return_false

    hooks = get_hooks()
    hooks.add_filter("comments_open", return_false, 99)

    if not hooks.apply_filters("comments_open", True, 42):
        print("Comments are closed")
    ```
"""

from .hook_registry import (
    HookBinding,
    HookRegistry,
    build_unique_id,
    callable_name,
    get_hooks,
    reset_hooks,
)
from .host import Request, Site
from .callbacks import (
    return_empty_list,
    return_empty_string,
    return_false,
    return_null,
    return_true,
    return_zero,
)

__all__ = [
    # Registry
    'HookBinding',
    'HookRegistry',
    'get_hooks',
    'reset_hooks',

    # Host state
    'Request',
    'Site',

    # Callable identity
    'build_unique_id',
    'callable_name',

    # Stock callbacks
    'return_true',
    'return_false',
    'return_zero',
    'return_null',
    'return_empty_list',
    'return_empty_string',
]
