"""
Direct Load Tests
=================

Loading a configuration file by name with Confscout.load_sync().
"""

from dataclasses import dataclass

from conftest import write
from confscout import Confscout, dataclass_item
from confscout.messages import Level


@dataclass
class ServerConfig:
    host: str = 'localhost'
    port: int = 8080


def make_finder(tmp_path, gateway, recorder, **kwargs):
    return Confscout('mytool', gateway=gateway, logger=recorder, base_directory=tmp_path, **kwargs)


def test_load_relative_path(tmp_path, gateway, recorder):
    config_file = write(tmp_path / 'configs' / 'app.yaml', 'name: app\n')
    finder = make_finder(tmp_path, gateway, recorder)

    result = finder.load_sync('./configs/app.yaml')

    assert result.configuration == {'name': 'app'}
    assert result.file_name == str(config_file)


def test_load_relative_to_folder(tmp_path, gateway, recorder):
    config_file = write(tmp_path / 'packages' / 'web' / 'app.yaml', 'name: web\n')
    write(tmp_path / 'app.yaml', 'name: root\n')
    finder = make_finder(tmp_path, gateway, recorder)

    result = finder.load_sync('./app.yaml', tmp_path / 'packages' / 'web')

    assert result.configuration == {'name': 'web'}
    assert result.file_name == str(config_file)
    assert finder.load_sync('./app.yaml').configuration == {'name': 'root'}
    assert finder.load_sync('../app.yaml', folder='packages').configuration == {'name': 'root'}


def test_load_absolute_path(tmp_path, gateway, recorder):
    config_file = write(tmp_path / 'app.json', '{"name": "app"}')
    finder = make_finder(tmp_path / 'elsewhere', gateway, recorder)

    assert finder.load_sync(str(config_file)).configuration == {'name': 'app'}


def test_load_missing_file_is_not_found(tmp_path, gateway, recorder):
    """Loading a missing file gives None, never raises."""
    finder = make_finder(tmp_path, gateway, recorder)

    assert finder.load_sync('./missing.yaml') is None
    assert recorder.ids(Level.ERROR) == ['file_not_found']
    assert recorder.messages[-1].parameters == ('./missing.yaml',)


def test_load_unknown_module_is_not_found(tmp_path, gateway, recorder):
    finder = make_finder(tmp_path, gateway, recorder)

    assert finder.load_sync('no_such_module_for_confscout/config.yaml') is None
    assert recorder.ids(Level.ERROR) == ['file_not_found']
    assert gateway.calls == []


def test_load_file_inside_module(tmp_path, gateway, recorder):
    """A module name followed by a path is resolved inside the module folder."""
    write(tmp_path / 'lib' / 'sharedconf' / '__init__.py')
    config_file = write(tmp_path / 'lib' / 'sharedconf' / 'presets' / 'default.yaml', 'preset: default\n')
    finder = make_finder(tmp_path, gateway, recorder, module_paths=['lib'])

    result = finder.load_sync('sharedconf/presets/default.yaml')

    assert result.configuration == {'preset': 'default'}
    assert result.file_name == str(config_file)


def test_load_module_itself(tmp_path, gateway, recorder):
    """A bare module name loads the module file with the Python loader."""
    write(tmp_path / 'lib' / 'mytool_settings.py', "config = {'debug': True}\n")
    finder = make_finder(tmp_path, gateway, recorder, module_paths=tmp_path / 'lib')

    assert finder.load_sync('mytool_settings').configuration == {'debug': True}
    assert 'python' in [m.parameters[0] for m in recorder.messages if m.message_id == 'using_loader']


def test_load_without_loader(tmp_path, gateway, recorder):
    write(tmp_path / 'app.unknown', 'whatever')
    finder = make_finder(tmp_path, gateway, recorder)

    assert finder.load_sync('./app.unknown') is None
    assert recorder.ids(Level.ERROR) == ['no_loader_found']


def test_load_compound_extension(tmp_path, gateway, recorder):
    write(tmp_path / 'mytool.config.yml', 'compound: true\n')
    finder = make_finder(tmp_path, gateway, recorder)

    assert finder.load_sync('./mytool.config.yml').configuration == {'compound': True}


def test_load_empty_file(tmp_path, gateway, recorder):
    write(tmp_path / 'empty.yaml', '')
    finder = make_finder(tmp_path, gateway, recorder)

    assert finder.load_sync('./empty.yaml') is None
    assert recorder.ids(Level.ERROR) == []
    assert 'empty_configuration' in recorder.ids(Level.TRACE)


def test_load_with_description(tmp_path, gateway, recorder):
    write(tmp_path / 'server.yaml', 'port: 9000\n')
    finder = Confscout(
        'mytool', dataclass_item(ServerConfig), gateway=gateway, logger=recorder, base_directory=tmp_path
    )

    assert finder.load_sync('./server.yaml').configuration == ServerConfig(port=9000)


def test_load_invalid_configuration(tmp_path, gateway, recorder):
    """Validation failures are reported as loading errors."""
    write(tmp_path / 'server.yaml', 'port: 9000\nprotocol: udp\n')
    finder = Confscout(
        'mytool', dataclass_item(ServerConfig), gateway=gateway, logger=recorder, base_directory=tmp_path
    )

    assert finder.load_sync('./server.yaml') is None
    assert recorder.ids(Level.ERROR) == ['invalid_configuration']
    assert 'protocol' in recorder.messages[-1].text


def test_load_is_cached(tmp_path, gateway, recorder):
    write(tmp_path / 'app.yaml', 'name: app\n')
    finder = make_finder(tmp_path, gateway, recorder)

    first = finder.load_sync('./app.yaml')

    assert finder.load_sync('./app.yaml') is first
    assert gateway.count('load_config_file') == 1


def test_load_shares_cache_with_search(tmp_path, gateway, recorder):
    write(tmp_path / '.mytoolrc.yaml', 'name: app\n')
    finder = make_finder(tmp_path, gateway, recorder, search_stop=tmp_path)

    found = finder.search_sync()

    assert finder.load_sync('./.mytoolrc.yaml') is found
