import json
import logging
from typing import Optional

import zmq

from src.core.extlog.log_entry import LogEntry


class ZmqLogHandler(logging.Handler):
    """
    Handler that publishes records on a ZMQ socket.

    Each record goes out as a two-frame message: [topic, LogEntry JSON].
    The default PUB socket connects to the endpoint so many processes can
    feed one collector that binds a SUB socket.

    Socket ownership:
      - the socket is created in __init__ and only touched under the
        handler lock, so emitting from several threads is safe
      - close() closes the socket with linger=0; the shared context
        is left alone
    """

    def __init__(
        self,
        endpoint: str,
        *,
        topic: str = "log",
        socket_type: int = zmq.PUB,
        bind: bool = False,
        context: Optional[zmq.Context] = None,
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self.endpoint = endpoint
        self.topic = topic
        self._ctx = context or zmq.Context.instance()
        self._sock = self._ctx.socket(socket_type)
        try:
            if bind:
                self._sock.bind(endpoint)
            else:
                self._sock.connect(endpoint)
        except zmq.ZMQError:
            self._sock.close(linger=0)
            raise

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntry.from_record(record, self.formatter)
            payload = json.dumps(entry.to_dict(), ensure_ascii=False, default=str).encode("utf-8")
            self._sock.send_multipart([self.topic.encode("utf-8"), payload])
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            if not self._sock.closed:
                self._sock.close(linger=0)
        finally:
            self.release()
        super().close()
