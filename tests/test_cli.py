import logging

import subscriber_localization
from subscriber_localization import executable_name, main


def test_executable_name_strips_both_separators():
    assert executable_name('/usr/local/bin/locate') == 'locate'
    assert executable_name('C:\\tools\\locate.exe') == 'locate.exe'
    assert executable_name('locate') == 'locate'


def test_locate_prints_coordinates(capsys):
    code = main(['[{"x": 0,"y": 0,"rssi": -50}, {"x": 10,"y": 10,"rssi": -60}, {"x": 30,"y": 40,"rssi": -80}]'])
    assert code == 0
    assert capsys.readouterr().out.strip() == 'Subscriber coordinates x:4 y:11'


def test_missing_argument_prints_usage(capsys, monkeypatch):
    monkeypatch.setattr(subscriber_localization.sys, 'argv', ['/opt/bin/locator'])
    code = main([])
    out = capsys.readouterr().out
    assert code == 2
    assert out.startswith('Error: Argument required')
    assert 'Usage: locator ' in out


def test_invalid_json_prints_error(capsys):
    code = main(['{broken'])
    assert code == 2
    assert capsys.readouterr().out.startswith('Error: Invalid JSON')


def test_empty_measurements_report_estimation_error(capsys):
    code = main(['[]'])
    assert code == 1
    assert 'Error while calculating subscriber position' in capsys.readouterr().out


def test_measurements_from_file(tmp_path, capsys):
    path = tmp_path / "aps.json"
    path.write_text('[{"x": 3, "y": 4, "rssi": -70}]', encoding='utf-8')
    assert main(['--file', str(path)]) == 0
    assert capsys.readouterr().out.strip() == 'Subscriber coordinates x:3 y:4'


def test_simulate(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("simulation:\n  trials: 5\n  seed: 11\n", encoding='utf-8')
    assert main(['--simulate', '--config', str(path)]) == 0


def test_simulate_with_invalid_trials_reports_error(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("simulation:\n  trials: 0\n", encoding='utf-8')
    assert main(['--simulate', '--config', str(path)]) == 2
    assert capsys.readouterr().out.startswith('Error: Simulation requires a positive number of trials')


def test_configuration_load_is_logged(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text("simulation:\n  trials: 3\n  seed: 2\n", encoding='utf-8')
    with caplog.at_level(logging.INFO, logger='utils.configuration'):
        assert main(['--simulate', '--config', str(path)]) == 0
    assert any('Configuration loaded from' in r.getMessage() for r in caplog.records)
