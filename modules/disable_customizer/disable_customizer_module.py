"""
Disable Customizer Module Implementation
"""

from typing import List

from module_manager.module_definition import FeatureDisabled, Module, ModuleKind


class DisableCustomizerModule(Module):
    """
    Disable the Customizer.

    The ``customize`` capability is mapped to a capability nobody has, and
    the Customizer screen refuses to load when accessed directly.
    """

    module_id = ModuleKind.DISABLE_CUSTOMIZER.value
    module_description = "Remove the customize capability and block the Customizer"

    def register_hooks(self) -> None:
        self.add_action('admin_init', self.admin_init, 10)
        self.add_action('init', self.init, 10)

    def init(self, *args) -> None:
        """Remove the customize capability."""
        self.add_filter('map_meta_cap', self.filter_to_remove_customize_capability, 10, 2)

    def admin_init(self, *args) -> None:
        """Drop the Customizer loaders and block the Customizer screen."""
        self.remove_action('plugins_loaded', '_wp_customize_include', 10)
        self.remove_action('admin_enqueue_scripts', '_wp_customize_loader_settings', 11)

        self.add_action('load-customize.php', self.override_load_customizer_action)

    def filter_to_remove_customize_capability(self, caps: List[str], cap: str = '') -> List[str]:
        if cap == 'customize':
            return ['nope']
        return caps

    def override_load_customizer_action(self, *args) -> None:
        """
        Raises:
            FeatureDisabled: Always
        """
        raise FeatureDisabled('The Customizer is currently disabled.')
