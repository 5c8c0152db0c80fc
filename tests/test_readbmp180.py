import logging

import pytest

import pybmp180.bus
import pybmp180.logger
import pybmp180.readbmp180
import pybmp180.sampler

from conftest import FakeBus


@pytest.fixture
def fake_sensor(monkeypatch):
    opened = []

    def fake_drive(bus_number):
        bus = FakeBus(pressure_bytes=(0x5D, 0x23, 0x80))
        opened.append((bus_number, bus))
        return bus

    monkeypatch.setattr(pybmp180.bus, 'I2CDrive', fake_drive)
    monkeypatch.setattr(pybmp180.sampler, 'sleep_us', lambda n: None)
    monkeypatch.setattr(
        pybmp180.logger, 'setup_handler', lambda verbose, logfile=None: None)
    return opened


def test_reading(fake_sensor, capsys):
    assert pybmp180.readbmp180.main(['pybmp180-read']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        'Temperature: 15.00 C',
        'Temperature: 59.00 F',
        'Pressure: 699.64 hPa',
        ]
    assert fake_sensor[0][0] == 1


def test_options(fake_sensor, capsys):
    assert pybmp180.readbmp180.main(
        ['pybmp180-read', '-b', '0', '-m', '0', '-c', '-r']) == 0
    out = capsys.readouterr().out
    assert fake_sensor[0][0] == 0
    assert 'AC1 =    408' in out
    assert 'Raw Temp: 0x6cfa (27898)' in out
    assert 'Raw Pressure value: 0x5D23 (23843)' in out


def test_count(fake_sensor, monkeypatch, capsys):
    monkeypatch.setattr(pybmp180.readbmp180.time, 'sleep', lambda s: None)
    assert pybmp180.readbmp180.main(['pybmp180-read', '-n', '3']) == 0
    out = capsys.readouterr().out
    assert out.count('Pressure:') == 3


def test_config_file(fake_sensor, tmp_path, capsys):
    with open(str(tmp_path / 'bmp180.ini'), 'w') as f:
        f.write('[config]\ni2c bus = 5\noversampling = standard\n'
                'altitude = 0\n')
    assert pybmp180.readbmp180.main(
        ['pybmp180-read', '-a', str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert fake_sensor[0][0] == 5
    assert 'Altitude:' in out
    assert 'Sea level pressure: 699.64 hPa' in out


@pytest.mark.parametrize('config', [
    '[config]\ni2c bus = one\n',
    '[config]\naltitude = high\n',
    '[config]\noversampling = fast\n',
    ])
def test_bad_config_file(fake_sensor, tmp_path, capsys, config):
    with open(str(tmp_path / 'bmp180.ini'), 'w') as f:
        f.write(config)
    assert pybmp180.readbmp180.main(['pybmp180-read', str(tmp_path)]) == 2
    assert 'usage:' in capsys.readouterr().err
    assert fake_sensor == []


@pytest.mark.parametrize('argv,status', [
    (['pybmp180-read', '-x'], 1),
    (['pybmp180-read', 'a', 'b'], 2),
    (['pybmp180-read', '-m', '4'], 2),
    (['pybmp180-read', '-b', 'one'], 2),
    ])
def test_usage_errors(fake_sensor, capsys, argv, status):
    assert pybmp180.readbmp180.main(argv) == status
    assert 'usage:' in capsys.readouterr().err
    assert fake_sensor == []


def test_help(fake_sensor, capsys):
    assert pybmp180.readbmp180.main(['pybmp180-read', '--help']) == 0
    assert 'usage:' in capsys.readouterr().out


def test_bus_failure(monkeypatch, caplog):
    def no_bus(bus_number):
        raise pybmp180.bus.BusError('cannot open I2C bus 1')

    monkeypatch.setattr(pybmp180.bus, 'I2CDrive', no_bus)
    monkeypatch.setattr(
        pybmp180.logger, 'setup_handler', lambda verbose, logfile=None: None)
    with caplog.at_level(logging.ERROR):
        assert pybmp180.readbmp180.main(['pybmp180-read']) == 3
    assert 'cannot open I2C bus 1' in caplog.text
