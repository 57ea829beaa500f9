"""Tests for the command-line interface."""

import subprocess
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from orphan_jpeg_cleaner import __version__
from orphan_jpeg_cleaner.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def shoot(tmp_path):
    """Create a RAW folder with one matched and one orphaned JPEG."""
    raw_folder = tmp_path / "DCIM"
    jpg_folder = raw_folder / "JPG"
    jpg_folder.mkdir(parents=True)
    (raw_folder / "img001.arw").touch()
    (jpg_folder / "img001.jpg").touch()
    (jpg_folder / "img002.jpg").touch()
    return raw_folder


def config_args(tmp_path):
    return ["--config", str(tmp_path / "config.json")]


def fake_osascript(command, capture_output):
    """Answer osascript calls like Finder would."""
    script = command[2]
    if script.startswith("POSIX file"):
        return subprocess.CompletedProcess(command, 0, b"Macintosh HD:DCIM:JPG:\n", b"")
    if '"a.jpg"' in script:
        return subprocess.CompletedProcess(
            command, 1, b"", b"29:106: execution error: Finder got an error. (-1728)\n"
        )
    return subprocess.CompletedProcess(command, 0, b"", b"")


def test_version(runner):
    """Test the --version option."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


@patch("orphan_jpeg_cleaner.platforms.trash.send2trash")
def test_trash_backend(mock_send2trash, runner, shoot, tmp_path):
    """Test a full run with the trash backend."""
    result = runner.invoke(
        cli, ["--folder", str(shoot), "--backend", "trash"] + config_args(tmp_path)
    )

    assert result.exit_code == 0, result.output
    mock_send2trash.assert_called_once_with(str(shoot / "JPG" / "img002.jpg"))
    assert "Start deleting duplicated files" in result.output
    assert "Deleted img002.jpg" in result.output
    assert "Done" in result.output


@patch("orphan_jpeg_cleaner.platforms.finder.subprocess.run")
def test_finder_backend_not_found_and_deleted(mock_run, runner, tmp_path):
    """Test that a not-found file still exits successfully."""
    raw_folder = tmp_path / "DCIM"
    (raw_folder / "JPG").mkdir(parents=True)
    (raw_folder / "JPG" / "a.jpg").touch()
    (raw_folder / "JPG" / "b.jpg").touch()
    mock_run.side_effect = fake_osascript

    result = runner.invoke(
        cli, ["--folder", str(raw_folder), "--backend", "finder"] + config_args(tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert "couldn't find the file a.jpg" in result.output
    assert "Deleted b.jpg" in result.output


@patch("orphan_jpeg_cleaner.platforms.trash.send2trash")
def test_dry_run(mock_send2trash, runner, shoot, tmp_path):
    """Test that --dry-run deletes nothing."""
    result = runner.invoke(
        cli,
        ["--folder", str(shoot), "--backend", "trash", "--dry-run"] + config_args(tmp_path),
    )

    assert result.exit_code == 0, result.output
    mock_send2trash.assert_not_called()
    assert "Would delete img002.jpg" in result.output
    assert (shoot / "JPG" / "img002.jpg").exists()


def test_empty_jpg_folder(runner, tmp_path):
    """Test that an empty JPG folder completes successfully."""
    raw_folder = tmp_path / "DCIM"
    (raw_folder / "JPG").mkdir(parents=True)

    result = runner.invoke(
        cli, ["--folder", str(raw_folder), "--backend", "trash"] + config_args(tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert "Done" in result.output
    assert "Deleted" not in result.output


def test_missing_jpg_folder_fails(runner, tmp_path):
    """Test that a missing JPG folder exits with an error."""
    raw_folder = tmp_path / "DCIM"
    raw_folder.mkdir()

    result = runner.invoke(
        cli, ["--folder", str(raw_folder), "--backend", "trash"] + config_args(tmp_path)
    )

    assert result.exit_code == 1
    assert "Done" not in result.output


@patch("orphan_jpeg_cleaner.platforms.finder.subprocess.run")
def test_localization_failure_fails(mock_run, runner, shoot, tmp_path):
    """Test that a failed HFS conversion exits before deleting."""
    mock_run.side_effect = FileNotFoundError("osascript")

    result = runner.invoke(
        cli, ["--folder", str(shoot), "--backend", "finder"] + config_args(tmp_path)
    )

    assert result.exit_code == 1
    assert mock_run.call_count == 1
    assert "Cannot get HFS path" in result.output


@patch("orphan_jpeg_cleaner.platforms.trash.send2trash")
def test_defaults_to_program_folder(mock_send2trash, runner, shoot, tmp_path):
    """Test that the RAW folder defaults to the program's own folder."""
    with patch("sys.argv", [str(shoot / "orphan-jpeg-cleaner")]):
        result = runner.invoke(cli, ["--backend", "trash"] + config_args(tmp_path))

    assert result.exit_code == 0, result.output
    mock_send2trash.assert_called_once_with(str(shoot / "JPG" / "img002.jpg"))
