"""MQTT client with the Arduino ``MQTTClient`` interface."""

from __future__ import annotations

import logging
from collections.abc import Callable

from paho.mqtt import client as mqtt

from .client import Client, IPAddress
from .wstring import String

_log = logging.getLogger(__name__)

DEFAULT_PORT = 1883
_LOOP_TIMEOUT = 0

SimpleCallback = Callable[[String, String], object]
AdvancedCallback = Callable[["MQTTClient", str, bytes, int], object]


def _payload_bytes(payload) -> bytes:
    if payload is None:
        return b""
    if isinstance(payload, (String, str)):
        return str(payload).encode("utf-8", "surrogateescape")
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    raise TypeError(f"cannot publish {type(payload).__name__}")


def _new_paho(client_id: str, clean_session: bool) -> mqtt.Client:
    kwargs = {"client_id": client_id, "clean_session": clean_session}
    api_version = getattr(mqtt, "CallbackAPIVersion", None)
    if api_version is not None:
        kwargs["callback_api_version"] = api_version.VERSION2
    return mqtt.Client(**kwargs)


class MQTTClient:
    """A client for an MQTT broker; the transport ``Client`` passed to it is unused."""

    def __init__(self, buf_size: int = 128) -> None:
        # The buffer size is accepted for compatibility and has no effect.
        self._client: mqtt.Client | None = None
        self.clean_session = True
        self.keep_alive = 60
        self.timeout = 120
        self.host = "localhost"
        self.port = DEFAULT_PORT
        self._simple: SimpleCallback | None = None
        self._advanced: AdvancedCallback | None = None
        self._will: tuple[str, bytes, int, bool] | None = None

    def begin(self, client: Client | None = None, host=None, port: int = DEFAULT_PORT) -> None:
        """Bind to a transport and optionally set the broker address."""
        if host is not None:
            self.set_host(host, port)

    def on_message(self, callback: SimpleCallback | None) -> None:
        """Register a callback taking ``(topic, payload)`` as :class:`String`."""
        self._simple = callback

    def on_message_advanced(self, callback: AdvancedCallback | None) -> None:
        """Register a callback taking ``(client, topic, payload_bytes, length)``."""
        self._advanced = callback

    def set_host(self, host, port: int = DEFAULT_PORT) -> None:
        """Set the broker address; an :class:`IPAddress` carries nothing and is ignored."""
        if isinstance(host, IPAddress):
            return
        self.host = str(host)
        self.port = port

    def set_will(self, topic, payload="", retained: bool = False, qos: int = 0) -> None:
        will = (str(topic), _payload_bytes(payload), qos, retained)
        self._will = will
        if self._client is not None:
            self._apply_will(self._client)

    def clear_will(self) -> None:
        self._will = None
        if self._client is not None:
            self._client.will_clear()

    def set_keep_alive(self, keep_alive: int) -> None:
        self.keep_alive = keep_alive

    def set_clean_session(self, clean_session: bool) -> None:
        self.clean_session = clean_session

    def set_timeout(self, timeout: int) -> None:
        self.timeout = timeout

    def set_options(self, keep_alive: int, clean_session: bool, timeout: int) -> None:
        self.set_keep_alive(keep_alive)
        self.set_clean_session(clean_session)
        self.set_timeout(timeout)

    def _apply_will(self, paho: mqtt.Client) -> None:
        if self._will is None:
            return
        topic, payload, qos, retained = self._will
        try:
            paho.will_set(topic, payload, qos, retained)
        except ValueError as exc:
            _log.error("MQTTClient.set_will failed: %s", exc)

    def _handle_message(self, paho_client, userdata, message) -> None:
        topic = message.topic
        payload = bytes(message.payload)
        if self._advanced is not None:
            self._advanced(self, topic, payload, len(payload))
            return
        if self._simple is not None:
            self._simple(String(topic), String(payload))

    def connect(self, client_id: str, username: str | None = None, password: str | None = None,
                skip: bool = False) -> bool:
        """Connect to the broker, dropping any current connection first."""
        if self.connected():
            self.disconnect()
        try:
            paho = _new_paho(client_id, self.clean_session)
        except ValueError as exc:
            _log.error("MQTTClient.connect failed: %s", exc)
            return False
        self._client = paho
        if username is not None or password is not None:
            paho.username_pw_set(username, password)
        paho.on_message = self._handle_message
        self._apply_will(paho)
        try:
            result = paho.connect(self.host, self.port, self.keep_alive)
        except ValueError as exc:
            _log.error(
                "MQTTClient.connect failed: invalid arguments (%s, %d, %d): %s",
                self.host, self.port, self.keep_alive, exc,
            )
            return False
        except OSError as exc:
            _log.error("MQTTClient.connect failed: %s", exc)
            return False
        if result != mqtt.MQTT_ERR_SUCCESS:
            _log.error("MQTTClient.connect failed: unknown return code %s", result)
            return False
        return True

    def publish(self, topic, payload="", retained: bool = False, qos: int = 0) -> bool:
        if self._client is None:
            return False
        try:
            info = self._client.publish(str(topic), _payload_bytes(payload), qos, retained)
        except ValueError:
            return False
        return info.rc == mqtt.MQTT_ERR_SUCCESS

    def subscribe(self, topic, qos: int = 0) -> bool:
        if self._client is None:
            return False
        try:
            result, _mid = self._client.subscribe(str(topic), qos)
        except ValueError:
            return False
        return result == mqtt.MQTT_ERR_SUCCESS

    def unsubscribe(self, topic) -> bool:
        if self._client is None:
            return False
        try:
            result, _mid = self._client.unsubscribe(str(topic))
        except ValueError:
            return False
        return result == mqtt.MQTT_ERR_SUCCESS

    def loop(self) -> bool:
        """Process pending network traffic without blocking."""
        if self._client is None:
            return False
        return self._client.loop(_LOOP_TIMEOUT) == mqtt.MQTT_ERR_SUCCESS

    def connected(self) -> bool:
        return self._client is not None and self._client.socket() is not None

    def disconnect(self) -> bool:
        if self._client is None:
            return False
        return self._client.disconnect() == mqtt.MQTT_ERR_SUCCESS