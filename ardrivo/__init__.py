"""Arduino-style String, Print, Stream, client, SD card and MQTT APIs in Python."""

__version__ = "0.1.0"

__all__ = ["wstring", "arduino", "printing", "stream", "client", "sd", "mqtt"]