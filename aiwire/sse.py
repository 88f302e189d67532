"""Splitting a server-sent event stream into event blocks."""

from __future__ import annotations


def find_event_delimiter(buffer):
    """Return ``(index, length)`` of the first blank-line delimiter, or ``None``."""
    crlf = buffer.find("\r\n\r\n")
    lf = buffer.find("\n\n")
    if crlf < 0 and lf < 0:
        return None
    if lf < 0 or (crlf >= 0 and crlf <= lf):
        return crlf, 4
    return lf, 2


def _strip_field(line: str, name: str) -> str | None:
    for prefix in (f"{name}: ", f"{name}:"):
        if line.startswith(prefix):
            return line[len(prefix):]
    return None


def _parse_block(block: str) -> tuple[str | None, str]:
    event_name = None
    data_lines: list[str] = []
    for raw_line in block.split("\n"):
        line = raw_line.rstrip("\r")
        event = _strip_field(line, "event")
        if event is not None:
            name = event.strip()
            if name:
                event_name = name
            continue
        content = _strip_field(line, "data")
        if content:
            data_lines.append(content)
    return event_name, "\n".join(data_lines)


class EventBuffer:
    """Collects stream chunks and hands out complete events with data."""

    def __init__(self) -> None:
        self.buffer = ""

    def feed(self, chunk):
        """Append a chunk; bytes are decoded as UTF-8, replacing bad sequences."""
        if isinstance(chunk, (bytes, bytearray, memoryview)):
            chunk = bytes(chunk).decode("utf-8", errors="replace")
        self.buffer += chunk

    def next_event(self):
        """Return ``(event_name, data)`` for the next event, or ``None`` if none is complete.

        Events without any data are skipped.
        """
        while (found := find_event_delimiter(self.buffer)) is not None:
            index, length = found
            block = self.buffer[:index]
            self.buffer = self.buffer[index + length:]
            event_name, data = _parse_block(block)
            if data:
                return event_name, data
        return None