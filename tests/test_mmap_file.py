import pytest

from jonoondb.exceptions import (
    ApiMisuseException,
    FileIOException,
    IndexOutOfBoundException,
    InvalidArgumentException,
)
from jonoondb.mmap_file import MemoryMappedFile, MemoryMappedFileMode

FILE_SIZE = 8192


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.0"
    path.write_bytes(b"\0" * FILE_SIZE)
    return path


def test_write_advances_offset_and_is_readable(data_file):
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_WRITE, 0, False) as mf:
        payload = b"This is the string!"
        mf.write(payload)
        assert mf.current_write_offset == len(payload)
        assert mf.view(0, len(payload)) == payload
        assert mf.size == FILE_SIZE


def test_write_starts_at_given_offset(data_file):
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_WRITE, 100, False) as mf:
        mf.write(b"abc")
        assert mf.current_write_offset == 103
        assert mf.view(100, 3) == b"abc"
        assert mf.view(99, 1) == b"\0"


def test_flush_persists_to_disk(data_file):
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_WRITE, 5000, True) as mf:
        mf.write(b"persisted")
        mf.flush(5000, len(b"persisted"))
    assert data_file.read_bytes()[5000:5009] == b"persisted"


def test_read_only_mapping_reads_and_refuses_writes(data_file):
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_WRITE) as mf:
        mf.write(b"hello")
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_ONLY) as ro:
        assert ro.view(0, 5) == b"hello"
        with pytest.raises(ApiMisuseException):
            ro.write(b"x")


def test_write_past_end_raises(data_file):
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_WRITE, FILE_SIZE - 2) as mf:
        with pytest.raises(IndexOutOfBoundException):
            mf.write(b"abc")
        assert mf.current_write_offset == FILE_SIZE - 2


def test_set_write_offset(data_file):
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_WRITE) as mf:
        mf.current_write_offset = 10
        mf.write(b"z")
        assert mf.view(10, 1) == b"z"
        with pytest.raises(InvalidArgumentException):
            mf.current_write_offset = FILE_SIZE + 1


def test_invalid_mode_rejected(data_file):
    with pytest.raises(InvalidArgumentException):
        MemoryMappedFile(data_file, 3)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileIOException):
        MemoryMappedFile(tmp_path / "absent", MemoryMappedFileMode.READ_ONLY)


def test_view_out_of_range_raises(data_file):
    with MemoryMappedFile(data_file, MemoryMappedFileMode.READ_ONLY) as mf:
        with pytest.raises(IndexOutOfBoundException):
            mf.view(FILE_SIZE - 1, 2)
        assert mf.file_name == str(data_file)