"""
Hook Registry Tests

This module tests the action/filter registry modules install their callbacks on:
- Priority ordering and argument slicing
- Replacement and removal of registrations, by callable and by name
- Callable names
"""

import functools

import pytest

from hooks import HookRegistry, build_unique_id, callable_name, get_hooks, reset_hooks, return_false


def print_emoji_styles():
    pass


class Greeter:
    def greet(self, value):
        return f"{value}!"


def test_filters_run_in_priority_order():
    """Test that lower priorities run first, registration order within a priority."""
    hooks = HookRegistry()
    hooks.add_filter('the_title', lambda value: value + 'c', 20)
    hooks.add_filter('the_title', lambda value: value + 'a', 5)
    hooks.add_filter('the_title', lambda value: value + 'b')
    hooks.add_filter('the_title', lambda value: value + 'B')

    assert hooks.apply_filters('the_title', '') == 'abBc'


def test_accepted_args_limits_arguments():
    """Test that callbacks only receive accepted_args arguments."""
    hooks = HookRegistry()
    received = []

    hooks.add_filter('the_content', lambda value: received.append(('one', value)) or value)
    hooks.add_filter('the_content', lambda value, post_id: received.append(('two', value, post_id)) or value, 10, 2)

    assert hooks.apply_filters('the_content', 'text', 42, 'extra') == 'text'
    assert received == [('one', 'text'), ('two', 'text', 42)]


def test_apply_filters_without_callbacks_returns_value():
    hooks = HookRegistry()
    assert hooks.apply_filters('nothing_registered', 'value', 1) == 'value'


def test_same_callback_twice_replaces_registration():
    """Test that re-adding a callback at the same priority keeps one binding."""
    hooks = HookRegistry()
    greeter = Greeter()

    hooks.add_filter('greeting', greeter.greet)
    hooks.add_filter('greeting', greeter.greet)

    assert len(hooks.registrations('greeting')) == 1
    assert hooks.apply_filters('greeting', 'hi') == 'hi!'


def test_bound_methods_of_different_instances_do_not_collide():
    hooks = HookRegistry()
    hooks.add_filter('greeting', Greeter().greet)
    hooks.add_filter('greeting', Greeter().greet)

    assert hooks.apply_filters('greeting', 'hi') == 'hi!!'


def test_remove_by_callable():
    """Test removal with a freshly bound method of the same instance."""
    hooks = HookRegistry()
    greeter = Greeter()
    hooks.add_filter('greeting', greeter.greet, 20)

    assert hooks.remove_filter('greeting', greeter.greet) is False
    assert hooks.remove_filter('greeting', greeter.greet, 20) is True
    assert hooks.has_filter('greeting') is False


def test_remove_by_name():
    """Test removal of a callback registered by someone else, addressed by name."""
    hooks = HookRegistry()
    hooks.add_action('wp_print_styles', print_emoji_styles)

    assert hooks.remove_action('wp_print_styles', 'print_emoji_styles') is True
    assert hooks.has_action('wp_print_styles') is False
    assert hooks.remove_action('wp_print_styles', 'print_emoji_styles') is False


def test_has_filter_returns_priority():
    hooks = HookRegistry()
    hooks.add_filter('comments_open', return_false, 99)

    assert hooks.has_filter('comments_open') is True
    assert hooks.has_filter('comments_open', return_false) == 99
    assert hooks.has_filter('comments_open', print_emoji_styles) is False


def test_remove_all_filters():
    hooks = HookRegistry()
    hooks.add_filter('the_title', return_false, 5)
    hooks.add_filter('the_title', print_emoji_styles, 10)

    hooks.remove_all_filters('the_title', 5)
    assert hooks.has_filter('the_title', return_false) is False
    assert hooks.has_filter('the_title', print_emoji_styles) == 10

    hooks.remove_all_filters('the_title')
    assert hooks.has_filter('the_title') is False


def test_actions_count_and_current_filter():
    hooks = HookRegistry()
    seen = []

    hooks.add_action('init', lambda: seen.append(hooks.current_filter()))
    hooks.do_action('init')
    hooks.do_action('init')

    assert seen == ['init', 'init']
    assert hooks.did_action('init') == 2
    assert hooks.did_action('wp_loaded') == 0
    assert hooks.current_filter() is None


def test_callbacks_may_change_bindings_while_running():
    """Test that bindings added while a hook runs wait for the next run."""
    hooks = HookRegistry()
    calls = []

    def late():
        calls.append('late')

    def first():
        calls.append('first')
        hooks.add_action('init', late)

    hooks.add_action('init', first)
    hooks.do_action('init')
    assert calls == ['first']

    hooks.do_action('init')
    assert calls == ['first', 'first', 'late']


def test_non_callable_rejected():
    hooks = HookRegistry()
    with pytest.raises(TypeError):
        hooks.add_filter('the_title', 'not_a_function')


def test_callable_names():
    """Test the names callbacks are addressed by."""
    assert callable_name(print_emoji_styles) == 'print_emoji_styles'
    assert callable_name(Greeter().greet) == 'Greeter.greet'
    assert callable_name(lambda: None) is None
    assert callable_name(functools.partial(print_emoji_styles)) is None


def test_unique_ids():
    greeter = Greeter()

    assert build_unique_id(print_emoji_styles) == f"{__name__}.print_emoji_styles"
    assert build_unique_id(greeter.greet) == build_unique_id(greeter.greet)
    assert build_unique_id(greeter.greet) != build_unique_id(Greeter().greet)


def test_global_registry():
    hooks = get_hooks()
    assert get_hooks() is hooks

    reset_hooks()
    assert get_hooks() is not hooks
