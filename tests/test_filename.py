"""Tests for filename parsing."""

import pytest

from orphan_jpeg_cleaner.core.filename import FileRecord, split_name


class TestSplitName:
    """Test split_name."""

    @pytest.mark.parametrize(
        "name, stem, extension",
        [
            ("DSC0001.ARW", "DSC0001", "ARW"),
            ("archive.tar.gz", "archive.tar", "gz"),
            ("README", "README", ""),
            (".hidden", ".hidden", ""),
            ("._DSC0001.JPG", "._DSC0001", "JPG"),
            ("trailing.", "trailing", ""),
            ("", "", ""),
        ],
    )
    def test_split(self, name, stem, extension):
        """Test stem/extension splitting on the final dot."""
        assert split_name(name) == (stem, extension)


class TestFileRecord:
    """Test FileRecord."""

    def test_from_name_lowercases_extension_only(self):
        """Test that only the extension is lowercased."""
        record = FileRecord.from_name("IMG_0042.JPEG")

        assert record.full_name == "IMG_0042.JPEG"
        assert record.stem == "IMG_0042"
        assert record.extension == "jpeg"

    def test_from_entry(self, tmp_path):
        """Test building a record from a path."""
        record = FileRecord.from_entry(tmp_path / "photo.Jpg")

        assert record == FileRecord("photo.Jpg", "photo", "jpg")

    def test_undecodable_name_degrades_to_empty(self):
        """Test that names with undecodable bytes become empty strings."""
        name = b"caf\xe9.jpg".decode("utf-8", errors="surrogateescape")

        record = FileRecord.from_name(name)

        assert record.full_name == ""
        assert record.stem == ""
        assert record.extension == "jpg"

    def test_records_are_immutable(self):
        """Test that records cannot be modified."""
        record = FileRecord.from_name("a.jpg")

        with pytest.raises(AttributeError):
            record.stem = "b"
