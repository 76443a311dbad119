"""
Module Management CLI

Command-line interface for Ecocide modules.
Lists the available modules, boots them against a hook registry to show the
bindings they install, and edits the hook switches in the options file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from hooks import HookRegistry
from module_manager import ModuleManager, Modules, UnknownModuleError
from module_options import OptionsFile, get_config

logger = logging.getLogger(__name__)


class ModuleManagerCLI:
    """Command-line interface for module management."""

    def __init__(self, options_path: Optional[Path] = None, admin: bool = False):
        config = get_config()
        self.options_file = OptionsFile(options_path or config.options_path)
        self.hooks = HookRegistry(is_admin=admin or config.admin)
        self.modules = Modules(self.hooks)
        self.module_manager = ModuleManager(self.modules, self.options_file)

    def initialize(self) -> None:
        """Load the options file."""
        self.options_file.load()

    def list_modules(self) -> None:
        """List all available modules."""
        modules = self.module_manager.get_all_modules_info()

        print("\nAvailable Modules:")
        print("-" * 80)
        print(f"{'Id':<30} {'Configured':<12} {'Description'}")
        print("-" * 80)

        for module_id, info in modules.items():
            print(f"{module_id:<30} {'Yes' if info['configured'] else 'No':<12} {info['description']}")

        print("-" * 80)

    def show_module_info(self, module_id: str) -> bool:
        """Show detailed information about a module."""
        info = self.module_manager.get_module_info(module_id)

        if not info:
            print(f"Module '{module_id}' not found.")
            return False

        options = self.options_file.get(info['id'])

        print(f"\nModule Information: {info['id']}")
        print("=" * 50)
        print(f"Description: {info['description']}")
        print(f"Class: {type(self.module_manager.get_module(module_id)).__name__}")
        print(f"Configured: {'Yes' if info['configured'] else 'No'}")
        print(f"Hook prefix: {self.module_manager.get_module(module_id).hook_prefix}")

        if options is not None and options.hooks:
            print("\nHook switches:")
            for hook, state in options.hooks.items():
                print(f"  {hook}: {state}")
        return True

    def boot_modules(self, module_ids: List[str]) -> None:
        """Boot modules and print the hook bindings they installed."""
        if module_ids:
            booted = self.module_manager.boot_modules(module_ids)
        else:
            booted = self.module_manager.boot_configured()

        context = "admin" if self.hooks.is_admin else "public"
        print(f"\nBooted {len(booted)} modules ({context} request)")
        print("=" * 80)

        for module_id in booted:
            module = self.module_manager.get_module(module_id)
            bindings = module.installed_bindings()
            print(f"\n{module_id} ({len(bindings)} bindings)")
            for binding in bindings:
                name = binding.unique_id or 'anonymous'
                print(f"  {binding.hook:<40} {name:<40} priority={binding.priority} args={binding.accepted_args}")

    def validate(self) -> bool:
        """Check that every configured module exists."""
        unknown = [
            module_id for module_id in self.options_file.module_ids()
            if not self.modules.has(module_id)
        ]

        for module_id in unknown:
            print(f"Unknown module '{module_id}' in {self.options_file.path}")

        if unknown:
            return False

        print(f"{self.options_file.path}: {len(self.options_file.module_ids())} modules configured, all valid.")
        return True

    def set_hook_state(self, module_id: str, hook: str, active: bool,
                       callback: Optional[str] = None) -> None:
        """Switch a hook on or off for a module and save the options file."""
        if not self.modules.has(module_id):
            raise UnknownModuleError(module_id)

        self.options_file.set_hook_state(module_id, hook, active, callback)
        self.options_file.save()

        target = f"{hook} ({callback})" if callback else hook
        print(f"Hook {target} {'enabled' if active else 'disabled'} for module '{module_id}'.")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Ecocide Module Manager")
    parser.add_argument('--options', type=Path, help='Path to the module options file')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # List command
    subparsers.add_parser('list', help='List all modules')

    # Info command
    info_parser = subparsers.add_parser('info', help='Show module information')
    info_parser.add_argument('module', help='Module id')

    # Boot command
    boot_parser = subparsers.add_parser('boot', help='Boot modules and show their hook bindings')
    boot_parser.add_argument('modules', nargs='*', help='Module ids (default: the configured modules)')
    boot_parser.add_argument('--admin', action='store_true', help='Boot for an admin screen request')

    # Validate command
    subparsers.add_parser('validate', help='Validate the options file')

    # Hook switch commands
    for command, help_text in (('disable-hook', 'Switch a hook off'), ('enable-hook', 'Switch a hook back on')):
        hook_parser = subparsers.add_parser(command, help=help_text)
        hook_parser.add_argument('module', help='Module id')
        hook_parser.add_argument('hook', help='Hook name')
        hook_parser.add_argument('--callback', help='Limit the switch to one callback name')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Execute command
    try:
        cli = ModuleManagerCLI(args.options, getattr(args, 'admin', False))
        cli.initialize()

        if args.command == 'list':
            cli.list_modules()
        elif args.command == 'info':
            return 0 if cli.show_module_info(args.module) else 1
        elif args.command == 'boot':
            cli.boot_modules(args.modules)
        elif args.command == 'validate':
            return 0 if cli.validate() else 1
        elif args.command == 'disable-hook':
            cli.set_hook_state(args.module, args.hook, False, args.callback)
        elif args.command == 'enable-hook':
            cli.set_hook_state(args.module, args.hook, True, args.callback)
    except (ValueError, RuntimeError) as e:
        # UnknownModuleError and pydantic's ValidationError are ValueErrors
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
