"""Exceptions raised by device sources and the control pipeline."""


class ControllerError(RuntimeError):
    """Base class for gamepad/controller failures"""


class AcquisitionError(ControllerError):
    """No usable controller could be found at startup"""


class DeviceDisconnected(ControllerError):
    """The controller stopped answering polls"""
