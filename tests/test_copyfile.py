import errno
import io
import os
from unittest import mock

import pytest

from liteutil.copyfile import CopyOption, copyfile, fcopyfile, fsendfile, movefile


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "passwd"
    path.write_bytes(b"root:x:0:0:root:/root:/bin/sh\n" * 100)
    return path


def test_copy_file_to_file(source, tmp_path):
    dst = tmp_path / "mypwd"
    copied = copyfile(str(source), str(dst))
    assert copied == source.stat().st_size
    assert dst.read_bytes() == source.read_bytes()


def test_copy_file_to_dir_with_slash(source, tmp_path):
    target = tmp_path / "out"
    target.mkdir()
    copyfile(str(source), str(target) + "/")
    assert (target / "passwd").read_bytes() == source.read_bytes()


def test_copy_file_to_dir_without_slash(source, tmp_path):
    target = tmp_path / "out"
    target.mkdir()
    copyfile(str(source), str(target))
    assert (target / "passwd").read_bytes() == source.read_bytes()


def test_copy_file_to_missing_dir_with_slash(source, tmp_path):
    target = tmp_path / "dst"
    copyfile(str(source), str(target) + "/", 0, CopyOption.KEEP_MTIME)
    assert target.is_dir()
    assert (target / "passwd").is_file()


def test_copy_limited_size(tmp_path):
    sz = 32768
    src = tmp_path / "big"
    src.write_bytes(b"\0" * (sz * 3))
    dst = tmp_path / "zeroes"
    copied = copyfile(str(src), str(dst), sz)
    assert copied == sz
    assert dst.stat().st_size == sz


def test_copy_empty_file_creates_target(tmp_path):
    src = tmp_path / "empty"
    src.write_bytes(b"")
    dst = tmp_path / "copy"
    assert copyfile(str(src), str(dst)) == 0
    assert dst.exists()


def test_copy_directory_source_raises(tmp_path):
    with pytest.raises(IsADirectoryError):
        copyfile(str(tmp_path), str(tmp_path / "x"))


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copyfile(str(tmp_path / "missing"), str(tmp_path / "x"))


def test_copy_keeps_permissions(source, tmp_path):
    os.chmod(source, 0o640)
    dst = tmp_path / "perm"
    copyfile(str(source), str(dst))
    assert dst.stat().st_mode & 0o777 == 0o640


def test_copy_keep_mtime(source, tmp_path):
    os.utime(source, ns=(1_000_000_000_000_000_000, 1_000_000_000_000_000_000))
    dst = tmp_path / "timed"
    copyfile(str(source), str(dst), 0, CopyOption.KEEP_MTIME)
    assert dst.stat().st_mtime_ns == source.stat().st_mtime_ns


def test_copy_symlink_recreated(source, tmp_path):
    link = tmp_path / "link"
    os.symlink("passwd", link)
    dst = tmp_path / "link-copy"
    assert copyfile(str(link), str(dst), 0, CopyOption.SYM) == 1
    assert os.readlink(dst) == os.readlink(link)


def test_copy_symlink_followed_without_sym(source, tmp_path):
    link = tmp_path / "link"
    os.symlink("passwd", link)
    dst = tmp_path / "followed"
    copyfile(str(link), str(dst))
    assert not dst.is_symlink()
    assert dst.read_bytes() == source.read_bytes()


def test_movefile_rename(source, tmp_path):
    data = source.read_bytes()
    dst = tmp_path / "moved"
    movefile(str(source), str(dst))
    assert not source.exists()
    assert dst.read_bytes() == data


def test_movefile_into_directory(source, tmp_path):
    data = source.read_bytes()
    target = tmp_path / "dir"
    target.mkdir()
    movefile(str(source), str(target))
    assert (target / "passwd").read_bytes() == data
    assert not source.exists()


def test_movefile_across_devices(source, tmp_path):
    data = source.read_bytes()
    dst = tmp_path / "other"
    with mock.patch("os.rename", side_effect=OSError(errno.EXDEV, "cross-device")):
        movefile(str(source), str(dst))
    assert dst.read_bytes() == data
    assert not source.exists()


def test_movefile_other_error_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        movefile(str(tmp_path / "missing"), str(tmp_path / "dst"))


def test_fcopyfile_copies_lines(source, tmp_path):
    dst = tmp_path / "fcopy"
    with open(source) as fin, open(dst, "w") as fout:
        fcopyfile(fin, fout)
    assert dst.read_text() == source.read_text()


def test_fcopyfile_none_raises():
    with pytest.raises(ValueError):
        fcopyfile(None, io.StringIO())


def test_fsendfile_length(source, tmp_path):
    dst = tmp_path / "tok"
    with open(source, "rb") as fin, open(dst, "wb") as fout:
        assert fsendfile(fin, fout, 512) == 512
    assert dst.read_bytes() == source.read_bytes()[:512]


def test_fsendfile_until_eof(source):
    out = io.BytesIO()
    with open(source, "rb") as fin:
        total = fsendfile(fin, out, 0)
    assert total == source.stat().st_size
    assert out.getvalue() == source.read_bytes()


def test_fsendfile_discard_advances(source):
    data = source.read_bytes()
    with open(source, "rb") as fin:
        assert fsendfile(fin, None, 100) == 100
        assert fin.read() == data[100:]


def test_fsendfile_none_source_raises():
    with pytest.raises(ValueError):
        fsendfile(None, io.BytesIO(), 10)