import pytest

from hashmesh.peering_stats import DataTransmissionBuffer, PeeringStats


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_buffers_start_filled_with_zeros():
    buf = DataTransmissionBuffer(5, 1000, FakeClock())
    assert list(buf.data_sent) == [0] * 5
    assert list(buf.packets_read) == [0] * 5


def test_update_in_same_interval_accumulates():
    clock = FakeClock()
    buf = DataTransmissionBuffer(3, 1000, clock)
    buf.update_sent_buffer(10)
    buf.update_sent_buffer(5)
    assert list(buf.data_sent) == [0, 0, 15]
    assert list(buf.packets_sent) == [0, 0, 2]
    assert list(buf.data_read) == [0, 0, 0]


def test_zero_size_does_not_count_packet():
    buf = DataTransmissionBuffer(3, 1000, FakeClock())
    buf.update_read_buffer(0)
    assert list(buf.packets_read) == [0, 0, 0]


def test_advancing_time_shifts_history():
    clock = FakeClock()
    buf = DataTransmissionBuffer(3, 1000, clock)
    buf.update_sent_buffer(10)
    clock.now += 1.5
    buf.update_sent_buffer(7)
    assert list(buf.data_sent) == [0, 10, 7]
    clock.now += 10
    buf.update_sent_buffer(0)
    assert list(buf.data_sent) == [0, 0, 0]
    assert len(buf.data_sent) == 3


def test_data_table_script_format():
    buf = DataTransmissionBuffer(3, 1000, FakeClock())
    buf.update_sent_buffer(10)
    text = buf.get_data_buffer_as_js_str("x")
    assert text == (
        " var dx = google.visualization.arrayToDataTable("
        "[['Seconds', 'Read data', 'Sent data'],"
        "['0', 0, 0],['1', 0, 0],['2', 0, 10] ]);"
    )


def test_packets_table_script_rows():
    buf = DataTransmissionBuffer(2, 1000, FakeClock())
    buf.update_read_buffer(4)
    text = buf.get_packets_buffer_as_js_str("y")
    assert text.startswith(" var py = google.visualization.arrayToDataTable(")
    assert "'Read packets', 'Sent packets'" in text
    assert "['1', 1, 0] ]);" in text
    assert text.endswith("]);")


def test_table_script_advances_buffers_to_now():
    clock = FakeClock()
    buf = DataTransmissionBuffer(2, 1000, clock)
    buf.update_read_buffer(4)
    clock.now += 1.0
    text = buf.get_data_buffer_as_js_str("z")
    assert list(buf.data_read) == [4, 0]
    assert "['0', 4, 0]" in text


def test_charts_small_only():
    text = DataTransmissionBuffer.get_charts_as_js_str("ab", False)
    assert text.startswith(
        "var cdab = new google.visualization.AreaChart(document.getElementById('cd_divab'));"
    )
    assert "cpab.draw(pab, packets_options);" in text
    assert "bcd" not in text


def test_charts_with_big():
    text = DataTransmissionBuffer.get_charts_as_js_str("ab", True)
    assert "bcdab.draw(dab, data_options_big);" in text
    assert text.endswith("bcpab.draw(pab, packets_options_big);")


def test_invalid_buffer_arguments():
    with pytest.raises(ValueError):
        DataTransmissionBuffer(0, 1000)
    with pytest.raises(ValueError):
        DataTransmissionBuffer(3, 0)


def test_peering_stats_totals():
    stats = PeeringStats(FakeClock())
    stats.update_sent_stats(100)
    stats.update_sent_stats(50)
    stats.update_read_stats(0)
    assert stats.size_of_sent_data == 150
    assert stats.number_of_sent_packets == 2
    assert stats.size_of_read_data == 0
    assert stats.number_of_read_packets == 1
    assert list(stats.data_buffer.data_sent)[-1] == 150
    assert len(stats.data_buffer.data_sent) == 120


def test_connection_time_format_and_reset():
    clock = FakeClock()
    stats = PeeringStats(clock)
    assert stats.get_connection_time() == "00:00:00"
    clock.now += 3725
    assert stats.get_connection_time() == "01:02:05"
    stats.reset_connection_time()
    assert stats.get_connection_time() == "00:00:00"