"""
Emoji, XML-RPC and Customizer Module Tests
"""

import pytest

from module_manager import FeatureDisabled
from modules.disable_customizer import DisableCustomizerModule
from modules.disable_emoji import DisableEmojiModule
from modules.disable_xml_rpc import DisableXmlRpcModule


def print_emoji_detection_script():
    pass


def print_emoji_styles():
    pass


def wp_staticize_emoji(content=None):
    return content


def _wp_customize_include():
    pass


def _wp_customize_loader_settings():
    pass


def register_emoji_callbacks(hooks):
    hooks.add_action('wp_head', print_emoji_detection_script, 7)
    hooks.add_action('admin_print_scripts', print_emoji_detection_script)
    hooks.add_action('wp_print_styles', print_emoji_styles)
    hooks.add_filter('the_content_feed', wp_staticize_emoji)


def test_emoji_callbacks_removed(hooks):
    """Test that the host's emoji callbacks are removed by name."""
    register_emoji_callbacks(hooks)
    DisableEmojiModule(hooks).boot()

    assert hooks.has_action('wp_head') is False
    assert hooks.has_action('admin_print_scripts') is False
    assert hooks.has_action('wp_print_styles') is False
    assert hooks.has_filter('the_content_feed') is False
    assert hooks.apply_filters('emoji_svg_url', 'https://s.w.org/images/core/emoji/svg/') is None


def test_emoji_removal_can_be_switched_off(hooks):
    register_emoji_callbacks(hooks)
    DisableEmojiModule(hooks).boot({'hooks': {
        'wp_head': {'print_emoji_detection_script': False},
        'wp_print_styles': False,
    }})

    assert hooks.has_action('wp_head', print_emoji_detection_script) == 7
    assert hooks.has_action('wp_print_styles') is True
    assert hooks.has_action('admin_print_scripts') is False


def test_xml_rpc_disabled(hooks):
    DisableXmlRpcModule(hooks).boot()

    assert hooks.apply_filters('xmlrpc_enabled', True) is False
    assert hooks.apply_filters('xmlrpc_methods', {'wp.getPosts': 'callback'}) == []
    assert hooks.apply_filters('xmlrpc_element_limit', 30000) == 1


def test_customize_capability_removed_on_init(hooks):
    DisableCustomizerModule(hooks).boot()
    assert hooks.has_filter('map_meta_cap') is False

    hooks.do_action('init')

    assert hooks.apply_filters('map_meta_cap', ['edit_theme_options'], 'customize', 1) == ['nope']
    assert hooks.apply_filters('map_meta_cap', ['edit_posts'], 'edit_posts', 1) == ['edit_posts']


def test_customizer_screen_blocked(admin_hooks):
    admin_hooks.add_action('plugins_loaded', _wp_customize_include)
    admin_hooks.add_action('admin_enqueue_scripts', _wp_customize_loader_settings, 11)
    DisableCustomizerModule(admin_hooks).boot()

    admin_hooks.do_action('admin_init')

    assert admin_hooks.has_action('plugins_loaded') is False
    assert admin_hooks.has_action('admin_enqueue_scripts') is False
    with pytest.raises(FeatureDisabled):
        admin_hooks.do_action('load-customize.php')


def test_capability_filter_can_be_switched_off(hooks):
    DisableCustomizerModule(hooks).boot({'hooks': {'map_meta_cap': False}})
    hooks.do_action('init')

    assert hooks.has_filter('map_meta_cap') is False
