import pytest

import pybmp180.bus
import pybmp180.constants as reg
from pybmp180.bmp180 import BMP180, Reading
from pybmp180.bus import BusError
from pybmp180.sampler import InvalidMode, OversamplingMode

from conftest import REFERENCE, FakeBus


def make_sensor(bus, sleep, **kwds):
    sensor = BMP180(bus=bus, sleep_us=sleep, **kwds)
    del bus.calls[:]
    del sleep.calls[:]
    return sensor


def test_calibration_loaded_once(bus, sleep):
    sensor = BMP180(bus=bus, sleep_us=sleep)
    assert sensor.calibration == REFERENCE
    assert len(bus.calls) == 22
    sensor.take_reading()
    sensor.take_reading()
    reads = [c[1] for c in bus.calls if c[0] == 'read']
    assert reads.count(reg.CAL_AC1) == 1


def test_take_reading_datasheet_example(bus, sleep):
    sensor = make_sensor(bus, sleep, mode=OversamplingMode.ULTRA_LOW_POWER)
    result = sensor.take_reading()
    assert isinstance(result, Reading)
    assert result.temperature == 15.0
    assert result.temperature_f == 59.0
    assert result.pressure_pa == 69964
    assert result.pressure == pytest.approx(699.64)


def test_take_reading_standard_mode(sleep):
    bus = FakeBus(pressure_bytes=(0x5D, 0x23, 0x80))
    sensor = make_sensor(bus, sleep)
    assert sensor.mode is OversamplingMode.STANDARD
    assert sensor.take_reading().pressure_pa == 69964


def test_take_reading_sequence(bus, sleep):
    sensor = make_sensor(bus, sleep)
    sensor.take_reading()
    writes = [c for c in bus.calls if c[0] == 'write']
    # temperature, then fresh temperature for pressure, then pressure
    assert writes == [
        ('write', reg.CONTROL, reg.READTEMPCMD),
        ('write', reg.CONTROL, reg.READTEMPCMD),
        ('write', reg.CONTROL, reg.READPRESSURECMD + (1 << 6)),
        ]
    assert sleep.calls == [5000, 5000, 8000]


def test_mode_override(bus, sleep):
    sensor = make_sensor(bus, sleep)
    sensor.take_reading(mode=3)
    assert sleep.calls == [5000, 5000, 26000]
    assert sensor.mode is OversamplingMode.STANDARD


@pytest.mark.parametrize('mode', [4, -1])
def test_invalid_mode_no_bus_activity(bus, sleep, mode):
    with pytest.raises(InvalidMode):
        BMP180(bus=bus, sleep_us=sleep, mode=mode)
    assert bus.calls == []
    sensor = make_sensor(bus, sleep)
    for method in (sensor.take_reading, sensor.get_pressure,
                   sensor.get_raw_pressure):
        with pytest.raises(InvalidMode):
            method(mode=mode)
    assert bus.calls == []
    assert sleep.calls == []


def test_idempotent(bus, sleep):
    sensor = make_sensor(bus, sleep, mode=0)
    assert sensor.take_reading() == sensor.take_reading()


def test_get_temperature_single_conversion(bus, sleep):
    sensor = make_sensor(bus, sleep)
    assert sensor.get_temperature() == 15.0
    assert sleep.calls == [5000]


def test_get_pressure(bus, sleep):
    sensor = make_sensor(bus, sleep)
    assert sensor.get_pressure(mode=0) == 69964
    assert sensor.get_raw_temperature() == 27898
    assert sensor.get_raw_pressure(mode=0) == 23843


def test_observer(bus, sleep):
    events = []
    sensor = BMP180(bus=bus, sleep_us=sleep, mode=0,
                    observer=lambda event, value: events.append((event, value)))
    result = sensor.take_reading()
    assert events == [
        ('calibration', REFERENCE),
        ('raw_temperature', 27898),
        ('raw_temperature', 27898),
        ('raw_pressure', 23843),
        ('reading', result),
        ]


def test_bus_error_propagates(sleep):
    class FailingBus(FakeBus):
        fail = False

        def write_register(self, address, value):
            if self.fail:
                raise BusError('write of register 0xF4 failed')
            super(FailingBus, self).write_register(address, value)

    bus = FailingBus()
    events = []
    sensor = BMP180(bus=bus, sleep_us=sleep,
                    observer=lambda event, value: events.append(event))
    bus.fail = True
    with pytest.raises(BusError):
        sensor.take_reading()
    assert 'reading' not in events


def test_opens_own_bus(monkeypatch, sleep):
    opened = []

    def fake_drive(bus_number):
        opened.append(bus_number)
        return FakeBus()

    monkeypatch.setattr(pybmp180.bus, 'I2CDrive', fake_drive)
    with BMP180(bus_number=3, sleep_us=sleep) as sensor:
        assert sensor.calibration == REFERENCE
    assert opened == [3]
    assert sensor.bus.calls[-1] == ('close',)


def test_does_not_close_callers_bus(bus, sleep):
    with BMP180(bus=bus, sleep_us=sleep):
        pass
    assert ('close',) not in bus.calls


def test_own_bus_closed_when_calibration_fails(monkeypatch, sleep):
    class FailingBus(FakeBus):
        def read_register(self, address):
            raise BusError('read of register 0x{:02X} failed'.format(address))

    buses = []

    def fake_drive(bus_number):
        buses.append(FailingBus())
        return buses[-1]

    monkeypatch.setattr(pybmp180.bus, 'I2CDrive', fake_drive)
    with pytest.raises(BusError):
        BMP180(bus_number=1, sleep_us=sleep)
    assert buses[0].calls == [('close',)]


def test_callers_bus_left_open_when_calibration_fails(sleep):
    class FailingBus(FakeBus):
        def read_register(self, address):
            raise BusError('read of register 0x{:02X} failed'.format(address))

    bus = FailingBus()
    with pytest.raises(BusError):
        BMP180(bus=bus, sleep_us=sleep)
    assert ('close',) not in bus.calls
