"""
Module options file.

Loads and persists the JSON file that tells the loader which modules to boot
and how to customise each of them:

    {
      "_metadata": {...},
      "modules": {
        "disable-comments": {"hooks": {"wp_headers": false}},
        "disable-emoji": {}
      }
    }
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .options_schema import ModuleOptions

logger = logging.getLogger(__name__)


class OptionsFile:
    """JSON backed store of per-module options."""

    def __init__(self, path: Union[str, Path] = "ecocide.json"):
        self.path = Path(path)
        self._modules: Dict[str, ModuleOptions] = {}
        self._metadata: Dict[str, Any] = {}

    def load(self) -> 'OptionsFile':
        """
        Load and validate the options file.

        A missing file is an empty configuration.

        Returns:
            Self for method chaining

        Raises:
            ValueError: If the file is not valid JSON or not a JSON object
            pydantic.ValidationError: If a module's options are malformed
        """
        self._modules = {}
        self._metadata = {}

        if not self.path.exists():
            logger.debug(f"Options file {self.path} not found, using empty configuration")
            return self

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Options file {self.path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Options file {self.path} must contain a JSON object")

        self._metadata = data.get("_metadata", {})
        modules = data.get("modules") or {}
        if not isinstance(modules, dict):
            raise ValueError(f"'modules' in {self.path} must be a JSON object")

        for module_id, options in modules.items():
            self._modules[module_id] = ModuleOptions.model_validate(options or {})

        logger.info(f"Loaded options for {len(self._modules)} modules from {self.path}")
        return self

    def module_ids(self) -> List[str]:
        """Get the identifiers of all configured modules, in file order."""
        return list(self._modules)

    def get(self, module_id: str) -> Optional[ModuleOptions]:
        """Get the options of a module, or None if it is not configured."""
        return self._modules.get(module_id)

    def set(self, module_id: str, options: Union[ModuleOptions, Mapping[str, Any], None] = None) -> None:
        """
        Set the options of a module, adding it to the configuration.

        Args:
            module_id: The module identifier
            options: ModuleOptions or a mapping validated into one
        """
        if not isinstance(options, ModuleOptions):
            options = ModuleOptions.model_validate(dict(options or {}))
        self._modules[module_id] = options

    def remove(self, module_id: str) -> bool:
        """Remove a module from the configuration."""
        return self._modules.pop(module_id, None) is not None

    def set_hook_state(self, module_id: str, hook: str, active: bool,
                       callback: Optional[str] = None) -> None:
        """
        Switch a hook, or a single callback on a hook, on or off.

        Enabling removes the override, since hooks are active by default.
        A hook switched off as a whole stays off: disabling one of its
        callbacks changes nothing, and enabling one is refused.

        Args:
            module_id: The module identifier
            hook: The hook name
            active: Whether the hook should be installed
            callback: Optional callback name to limit the override to

        Raises:
            ValueError: If a callback is enabled on a hook switched off as a whole
        """
        options = self._modules.get(module_id) or ModuleOptions()
        hooks = dict(options.hooks)

        if callback is None:
            if active:
                hooks.pop(hook, None)
            else:
                hooks[hook] = False
        else:
            entry = hooks.get(hook)
            if entry is False:
                if active:
                    raise ValueError(
                        f"Hook '{hook}' is disabled for every callback of {module_id}, enable the hook instead"
                    )
                return

            callbacks = dict(entry) if isinstance(entry, dict) else {}
            if active:
                callbacks.pop(callback, None)
            else:
                callbacks[callback] = False

            if callbacks:
                hooks[hook] = callbacks
            else:
                hooks.pop(hook, None)

        self._modules[module_id] = options.model_copy(update={"hooks": hooks})

    def to_dict(self) -> Dict[str, Any]:
        """Get the configuration in its file format."""
        metadata = dict(self._metadata)
        metadata.update({
            "description": "Ecocide module options",
            "format_version": "1.0",
            "last_updated": time.strftime("%Y-%m-%d %H:%M:%S"),
        })
        return {
            "_metadata": metadata,
            "modules": {
                module_id: options.model_dump(exclude_defaults=True)
                for module_id, options in self._modules.items()
            },
        }

    def save(self) -> None:
        """
        Write the configuration to file atomically.

        Raises:
            RuntimeError: If the file could not be written
        """
        temp_path = self.path.with_suffix('.tmp')
        try:
            # Create directory if it doesn't exist
            self.path.parent.mkdir(parents=True, exist_ok=True)

            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

            # Atomic move
            temp_path.replace(self.path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise RuntimeError(f"Failed to write options to {self.path}: {e}") from e

        logger.debug(f"Saved options for {len(self._modules)} modules to {self.path}")
