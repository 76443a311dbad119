"""
Module Manager System

This package provides the module system of Ecocide.
Each module disables or rewrites one host feature by registering hook
callbacks when it boots; the registry resolves modules by identifier and
the manager boots them from the options file.
"""

from .module_definition import FeatureDisabled, Module, ModuleKind
from .module_manager import ModuleManager
from .module_registry import Modules, UnknownModuleError, get_modules, reset_modules, studly

__all__ = [
    'FeatureDisabled',
    'Module',
    'ModuleKind',
    'ModuleManager',
    'Modules',
    'UnknownModuleError',
    'get_modules',
    'reset_modules',
    'studly',
]
