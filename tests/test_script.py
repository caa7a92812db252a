import pytest

from mk1tools.script import MAX_FLAGS, ScriptRunner


def test_default_flags():
    runner = ScriptRunner(b"")
    assert runner.flags == [0] * MAX_FLAGS


def test_read_byte_advances():
    runner = ScriptRunner(b"\x07\x09")
    assert runner.read_byte() == 7
    assert runner.read_byte() == 9
    assert runner.position == 2


def test_read_byte_past_end():
    runner = ScriptRunner(b"\x01")
    runner.read_byte()
    with pytest.raises(IndexError):
        runner.read_byte()


def test_read_vbyte_literal_and_flag():
    runner = ScriptRunner(b"\x05\x81", flags=[0, 42, 0, 0, 0])
    assert runner.read_vbyte() == 5
    assert runner.read_vbyte() == 42


def test_read_xy():
    runner = ScriptRunner(b"\x03\x82", flags=[0, 0, 9, 0, 0])
    assert runner.read_xy() == (3, 9)


def test_read_flag_pair_resolves_references():
    runner = ScriptRunner(b"\x80\x02", flags=[4, 0, 0, 0, 0])
    assert runner.read_flag_pair() == (4, 2)


def test_run_script_single_clause():
    data = bytes([4, 0, 0, 0]) + bytes([2, 0xFF, 0xFF, 0xFF])
    runner = ScriptRunner(data)
    assert runner.run_script(0) == 1
    assert runner.position == len(data)


def test_run_script_two_clauses():
    data = bytes([4, 0, 0, 0]) + bytes([2, 0xFF, 0xFF, 2, 0xFF, 0xFF, 0xFF])
    runner = ScriptRunner(data)
    assert runner.run_script(0) == 2


def test_run_script_missing_pointer():
    data = bytes([4, 0, 0, 0]) + bytes([2, 0xFF, 0xFF, 0xFF])
    runner = ScriptRunner(data)
    assert runner.run_script(1) == 0
    assert runner.position == 0


def test_run_script_respects_level_offset():
    level = bytes([4, 0, 0, 0]) + bytes([2, 0xFF, 0xFF, 0xFF])
    data = b"\x00" * 10 + level
    runner = ScriptRunner(data, offset=10)
    assert runner.run_script(0) == 1
    assert runner.position == len(data)


def test_run_script_truncated_data():
    data = bytes([2, 0]) + bytes([2, 0xFF])
    runner = ScriptRunner(data)
    with pytest.raises(IndexError):
        runner.run_script(0)


def test_run_script_unknown_entry():
    runner = ScriptRunner(bytes([0, 0]))
    with pytest.raises(IndexError):
        runner.run_script(5)