import pytest

import pybmp180.constants as reg
from pybmp180.calibration import CalibrationConstants, calibration_format

# datasheet example coefficients
REFERENCE = CalibrationConstants(
    AC1=408, AC2=-72, AC3=-14383, AC4=32741, AC5=32757, AC6=23153,
    B1=6190, B2=4, MB=-32768, MC=-8711, MD=2868)


class FakeBus(object):
    """Models the BMP180 register file and records every access.

    The result registers 0xF6..0xF8 hold temperature or pressure data
    depending on the last command written to the control register.
    """
    def __init__(self, calibration=REFERENCE, raw_temp=27898,
                 pressure_bytes=(0x5D, 0x23, 0x00)):
        self.registers = {}
        for name, (register, reader) in calibration_format.items():
            value = getattr(calibration, name) & 0xFFFF
            self.registers[register] = value >> 8
            self.registers[register + 1] = value & 0xFF
        self.temp_bytes = (raw_temp >> 8, raw_temp & 0xFF, 0)
        self.pressure_bytes = tuple(pressure_bytes)
        self.command = None
        self.calls = []

    def read_register(self, address):
        self.calls.append(('read', address))
        if reg.TEMPDATA <= address <= reg.TEMPDATA + 2:
            if self.command == reg.READTEMPCMD:
                return self.temp_bytes[address - reg.TEMPDATA]
            return self.pressure_bytes[address - reg.PRESSUREDATA]
        return self.registers.get(address, 0)

    def write_register(self, address, value):
        self.calls.append(('write', address, value))
        if address == reg.CONTROL:
            self.command = value

    def close(self):
        self.calls.append(('close',))


class FakeSleep(object):
    def __init__(self):
        self.calls = []

    def __call__(self, n):
        self.calls.append(n)


@pytest.fixture
def bus():
    return FakeBus()


@pytest.fixture
def sleep():
    return FakeSleep()
