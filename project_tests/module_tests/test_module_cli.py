"""
Module CLI Tests
"""

import json

import pytest

import module_cli


@pytest.fixture
def options_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / 'ecocide.json'
    path.write_text(json.dumps({'modules': {'disable-xml-rpc': {}}}), encoding='utf-8')
    return path


def run(options_path, *args):
    return module_cli.main(['--options', str(options_path), *args])


def test_list(options_path, capsys):
    assert run(options_path, 'list') == 0

    output = capsys.readouterr().out
    assert 'disable-attachment-template' in output
    assert 'disable-xml-rpc' in output


def test_info(options_path, capsys):
    assert run(options_path, 'info', 'disable_xml_rpc') == 0
    assert 'ecocide/modules/disable_xml_rpc/' in capsys.readouterr().out

    assert run(options_path, 'info', 'disable-everything') == 1


def test_boot_prints_bindings(options_path, capsys):
    assert run(options_path, 'boot') == 0

    output = capsys.readouterr().out
    assert 'xmlrpc_element_limit' in output
    assert 'filter_xmlrpc_element_limit' in output


def test_boot_admin_context(options_path, capsys):
    assert run(options_path, 'boot', 'disable-post', '--admin') == 0

    output = capsys.readouterr().out
    assert 'admin request' in output
    assert 'wp_dashboard_setup' in output
    assert 'pre_get_posts' not in output


def test_boot_unknown_module(options_path, capsys):
    assert run(options_path, 'boot', 'disable-everything') == 1
    assert 'Module "disable-everything" is not defined.' in capsys.readouterr().out


def test_validate(options_path):
    assert run(options_path, 'validate') == 0

    options_path.write_text(json.dumps({'modules': {'disable-everything': {}}}), encoding='utf-8')
    assert run(options_path, 'validate') == 1

    options_path.write_text('{', encoding='utf-8')
    assert run(options_path, 'validate') == 1


def test_disable_and_enable_hook(options_path):
    """Test editing hook switches in the options file."""
    assert run(options_path, 'disable-hook', 'disable-comments', 'comments_open', '--callback', 'return_false') == 0

    data = json.loads(options_path.read_text(encoding='utf-8'))
    assert data['modules']['disable-comments'] == {'hooks': {'comments_open': {'return_false': False}}}

    assert run(options_path, 'enable-hook', 'disable-comments', 'comments_open', '--callback', 'return_false') == 0

    data = json.loads(options_path.read_text(encoding='utf-8'))
    assert data['modules']['disable-comments'] == {}


def test_disable_hook_on_unknown_module(options_path):
    assert run(options_path, 'disable-hook', 'disable-everything', 'init') == 1


def test_enable_callback_on_disabled_hook(options_path, capsys):
    assert run(options_path, 'disable-hook', 'disable-comments', 'wp_headers') == 0
    assert run(options_path, 'enable-hook', 'disable-comments', 'wp_headers', '--callback', 'filter_wp_headers') == 1
    assert 'wp_headers' in capsys.readouterr().out

    data = json.loads(options_path.read_text(encoding='utf-8'))
    assert data['modules']['disable-comments'] == {'hooks': {'wp_headers': False}}
