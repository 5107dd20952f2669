"""Per-peer transfer statistics and their rendering as chart scripts."""

from __future__ import annotations

import time
from collections import deque
from typing import Callable

Clock = Callable[[], float]

_STATS_BUFFER_SIZE = 120
_STATS_INTERVAL_MS = 1000


class DataTransmissionBuffer:
    """Fixed-size history of data and packet counts, one slot per time interval."""

    def __init__(
        self,
        buffer_size: int,
        interval_in_milisec: int,
        clock: Clock = time.time,
    ) -> None:
        if buffer_size < 1:
            raise ValueError(f"Buffer size must be positive, got {buffer_size}")
        if interval_in_milisec < 1:
            raise ValueError(f"Interval must be positive, got {interval_in_milisec}")
        self.data_sent: deque[int] = deque([0] * buffer_size, maxlen=buffer_size)
        self.data_read: deque[int] = deque([0] * buffer_size, maxlen=buffer_size)
        self.packets_sent: deque[int] = deque([0] * buffer_size, maxlen=buffer_size)
        self.packets_read: deque[int] = deque([0] * buffer_size, maxlen=buffer_size)
        self.interval = interval_in_milisec
        self._clock = clock
        self._reference_time = clock()
        self._last_sent = 0
        self._last_read = 0

    def _units_now(self) -> int:
        elapsed_ms = (self._clock() - self._reference_time) * 1000.0
        return int(elapsed_ms / self.interval)

    @staticmethod
    def _advance(data: deque[int], packets: deque[int], distance: int) -> None:
        for _ in range(min(distance, data.maxlen or 0)):
            data.append(0)
            packets.append(0)

    def update_sent_buffer(self, data_size: int) -> None:
        """Move the sent history to the current interval and record data_size octets."""
        units = self._units_now()
        self._advance(self.data_sent, self.packets_sent, units - self._last_sent)
        self._last_sent = units
        if data_size:
            self.data_sent[-1] += data_size
            self.packets_sent[-1] += 1

    def update_read_buffer(self, data_size: int) -> None:
        """Move the read history to the current interval and record data_size octets."""
        units = self._units_now()
        self._advance(self.data_read, self.packets_read, units - self._last_read)
        self._last_read = units
        if data_size:
            self.data_read[-1] += data_size
            self.packets_read[-1] += 1

    def _table_js(
        self,
        name: str,
        columns: tuple[str, str],
        read: deque[int],
        sent: deque[int],
    ) -> str:
        self.update_read_buffer(0)
        self.update_sent_buffer(0)
        header = (
            f" var {name} = google.visualization.arrayToDataTable("
            f"[['Seconds', '{columns[0]}', '{columns[1]}'],"
        )
        rows = "".join(
            f"['{index}', {r}, {s}]," for index, (r, s) in enumerate(zip(read, sent))
        )
        text = header + rows
        return text[:-1] + " " + "]);"

    def get_data_buffer_as_js_str(self, var: str) -> str:
        """Script defining the data table of read and sent octets per interval."""
        return self._table_js(
            f"d{var}", ("Read data", "Sent data"), self.data_read, self.data_sent
        )

    def get_packets_buffer_as_js_str(self, var: str) -> str:
        """Script defining the data table of read and sent packets per interval."""
        return self._table_js(
            f"p{var}", ("Read packets", "Sent packets"), self.packets_read, self.packets_sent
        )

    @staticmethod
    def get_charts_as_js_str(var: str, display_big_chart: bool) -> str:
        """Script drawing the small charts, and the big ones when asked."""
        parts = [
            f"var cd{var} = new google.visualization.AreaChart("
            f"document.getElementById('cd_div{var}'));",
            f"cd{var}.draw(d{var}, data_options);",
            f"var cp{var} = new google.visualization.AreaChart("
            f"document.getElementById('cp_div{var}'));",
            f"cp{var}.draw(p{var}, packets_options);",
        ]
        if display_big_chart:
            parts += [
                f"var bcd{var} = new google.visualization.AreaChart("
                f"document.getElementById('bcd_div{var}'));",
                f"bcd{var}.draw(d{var}, data_options_big);",
                f"var bcp{var} = new google.visualization.AreaChart("
                f"document.getElementById('bcp_div{var}'));",
                f"bcp{var}.draw(p{var}, packets_options_big);",
            ]
        return "".join(parts)


class PeeringStats:
    """Totals of data exchanged with one peer, plus a per-second history."""

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock
        self.size_of_sent_data = 0
        self.size_of_read_data = 0
        self.number_of_sent_packets = 0
        self.number_of_read_packets = 0
        self.connection_time = clock()
        self.data_buffer = DataTransmissionBuffer(
            _STATS_BUFFER_SIZE, _STATS_INTERVAL_MS, clock
        )

    def update_sent_stats(self, size: int) -> None:
        """Record one sent packet of the given size."""
        self.data_buffer.update_sent_buffer(size)
        self.size_of_sent_data += size
        self.number_of_sent_packets += 1

    def update_read_stats(self, size: int) -> None:
        """Record one read packet of the given size."""
        self.data_buffer.update_read_buffer(size)
        self.size_of_read_data += size
        self.number_of_read_packets += 1

    def get_connection_time(self) -> str:
        """Time since the connection started, as HH:MM:SS."""
        seconds = int((self._clock() - self.connection_time) * 1000.0 / 1000)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    def reset_connection_time(self) -> None:
        """Start counting the connection time from now."""
        self.connection_time = self._clock()