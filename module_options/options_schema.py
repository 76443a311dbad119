"""
Module option models.

Defines the shape of the customisation object a module receives at boot time.
The core only understands the ``hooks`` key; every other key is module
specific and passed through untouched.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool

HookActiveState = Union[StrictBool, Dict[str, StrictBool]]
"""Either a switch for the whole hook, or a switch per callback name."""


class ModuleOptions(BaseModel):
    """
    Options for a single module.

    Examples:
        ```python
        # Keep every binding except the X-Pingback header filter
        ModuleOptions(hooks={"wp_headers": False})

        # Keep the 'comments_open' hook but not the return_false callback on it
        ModuleOptions(hooks={"comments_open": {"return_false": False}})

        # Module specific keys are kept as extra fields
        ModuleOptions(dashboard_widgets={"quick_press": True})
        ```

    Attributes:
        hooks: Activation state per hook name
    """

    model_config = ConfigDict(extra="allow")

    hooks: Dict[str, HookActiveState] = Field(
        default_factory=dict,
        description="Activation state per hook name, or per callback name within a hook",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Get the options as the plain mapping modules read at boot time."""
        return self.model_dump()
