import pytest

from melo.memory import Ram, Rom


def test_zero_ram_reads_zeros():
    ram = Ram.zero(8)
    assert len(ram) == 8
    assert ram.data == bytes(8)


def test_ram_write_then_read():
    ram = Ram.zero(4)
    ram.write_byte(1, 0xAA)
    assert ram.read_byte(1) == 0xAA
    assert ram.data == bytes([0, 0xAA, 0, 0])


def test_ram_out_of_range():
    ram = Ram([1, 2])
    ram.write_byte(5, 9)
    assert ram.read_byte(5) == 0
    assert ram.data == bytes([1, 2])


def test_ram_copies_its_input():
    source = bytearray([1, 2, 3])
    ram = Ram(source)
    ram.write_byte(0, 7)
    assert source == bytearray([1, 2, 3])


def test_rand_ram_has_requested_size():
    ram = Ram.rand(64)
    assert len(ram) == 64
    assert all(0 <= ram.read_byte(i) <= 0xFF for i in range(64))


def test_ram_equality():
    assert Ram([1, 2, 3]) == Ram(bytes([1, 2, 3]))
    assert not Ram([1, 2, 3]) == Ram([1, 2, 4])


def test_ram_word_round_trip():
    ram = Ram.zero(4)
    ram.write_le_word(1, 0xBEEF)
    assert ram.read_le_word(1) == 0xBEEF


def test_rom_reads_data():
    rom = Rom([0x34, 0x12])
    assert rom.read_byte(0) == 0x34
    assert rom.read_le_word(0) == 0x1234
    assert rom.read_byte(2) == 0


def test_rom_ignores_writes():
    rom = Rom([1, 2, 3])
    rom.write_byte(0, 0xFF)
    rom.write_le_word(1, 0xFFFF)
    assert rom.data == bytes([1, 2, 3])


def test_rom_is_hashable_and_comparable():
    assert Rom([1, 2]) == Rom([1, 2])
    assert len({Rom([1, 2]), Rom([1, 2]), Rom([3])}) == 2


def test_ram_is_not_hashable():
    with pytest.raises(TypeError):
        hash(Ram.zero(1))