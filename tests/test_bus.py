import pytest
import smbus2

from pybmp180.bus import BusError, I2CDrive


class FakeSMBus(object):
    instances = []

    def __init__(self, bus):
        self.bus = bus
        self.calls = []
        self.fail = False
        FakeSMBus.instances.append(self)

    def read_byte_data(self, address, register):
        self.calls.append(('read', address, register))
        if self.fail:
            raise OSError(121, 'Remote I/O error')
        return 0xAB

    def write_byte_data(self, address, register, value):
        self.calls.append(('write', address, register, value))
        if self.fail:
            raise OSError(121, 'Remote I/O error')

    def close(self):
        self.calls.append(('close',))


@pytest.fixture
def smbus(monkeypatch):
    FakeSMBus.instances = []
    monkeypatch.setattr(smbus2, 'SMBus', FakeSMBus)
    return FakeSMBus


def test_read_write(smbus):
    drive = I2CDrive(1)
    dev = smbus.instances[0]
    assert dev.bus == 1
    assert drive.read_register(0xAA) == 0xAB
    drive.write_register(0xF4, 0x2E)
    assert dev.calls == [('read', 0x77, 0xAA), ('write', 0x77, 0xF4, 0x2E)]


def test_errors_wrapped(smbus):
    drive = I2CDrive(1)
    smbus.instances[0].fail = True
    with pytest.raises(BusError) as excinfo:
        drive.read_register(0xF6)
    assert '0xF6' in str(excinfo.value)
    with pytest.raises(BusError):
        drive.write_register(0xF4, 0x34)
    assert issubclass(BusError, IOError)


def test_open_failure(monkeypatch):
    def no_bus(bus):
        raise FileNotFoundError(2, 'No such file or directory')

    monkeypatch.setattr(smbus2, 'SMBus', no_bus)
    with pytest.raises(BusError):
        I2CDrive(7)


def test_context_manager(smbus):
    with I2CDrive(0) as drive:
        assert drive.bus_number == 0
    assert smbus.instances[0].calls == [('close',)]
