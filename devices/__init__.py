"""Device source module"""

from devices.scripted_source import DISCONNECT, DriveScripts, ScriptedSource
from devices.gamepad_source import GamepadSource, acquire_gamepad

__all__ = ["DISCONNECT", "DriveScripts", "ScriptedSource", "GamepadSource", "acquire_gamepad"]
