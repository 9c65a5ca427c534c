import struct

import pytest

from uniwar.pointsview import PTYPES, format_points
from uniwar.ringbuffer import RingBuffer


def points_buffer(shx, scores, fed_ships, emp_ships, stardates):
    data = struct.pack("<h", shx)
    for triple in scores:
        data += struct.pack("<iii", *triple)
    data += struct.pack("<hh", fed_ships, emp_ships)
    data += struct.pack("<iii", *stardates)
    buf = RingBuffer(len(data) + 4)
    buf.put(data)
    return buf


def default_scores(total=(40, 60, 80)):
    return [(1, 2, 3)] * (len(PTYPES) - 1) + [total]


def test_header_names_ship():
    text = format_points(points_buffer(0, default_scores(), 2, 3, (1, 1, 1)))
    lines = text.splitlines()
    assert lines[0] == f"{'Excalibur':>16}    Fed    Emp"
    assert lines[1] == "-" * 30


def test_score_rows_follow_labels():
    text = format_points(points_buffer(7, default_scores(), 2, 3, (1, 1, 1)))
    lines = text.splitlines()
    assert lines[2].startswith("enemy hit")
    assert lines[2].split()[-3:] == ["1", "2", "3"]
    assert lines[9].startswith("  TOTAL: ")
    assert lines[9].split()[-3:] == ["40", "60", "80"]
    assert lines[10] == "-----"


def test_ships_used_and_zero_divisors():
    buf = points_buffer(0, default_scores(), 4, 0, (0, 0, 0))
    text = format_points(buf)
    lines = text.splitlines()
    assert lines[11].startswith("ships used")
    assert lines[11].split()[-2:] == ["4", "0"]
    assert lines[12].split()[-1] == "80"
    assert lines[13].split()[-3:] == ["40", "60", "80"]
    assert len(buf) == 0


def test_division_truncates_toward_zero():
    text = format_points(points_buffer(0, default_scores((0, -7, 0)), 2, 1, (1, 1, 1)))
    score_line = text.splitlines()[12]
    assert score_line.split()[-2] == "-3"


def test_bad_ship_index():
    with pytest.raises(ValueError):
        format_points(points_buffer(99, default_scores(), 1, 1, (1, 1, 1)))