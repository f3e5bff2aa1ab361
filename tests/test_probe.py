"""Tests for the ffprobe duration adapter."""

import subprocess
from pathlib import Path

import pytest

from ytdl_album.exceptions import ProbeError
from ytdl_album.media.probe import probe_duration
from ytdl_album.models.track import TimeSpan


def install_run(monkeypatch, stdout: str = "", error: Exception | None = None):
    calls = []

    def fake_run(cmd, check, capture_output, text):
        calls.append(cmd)
        if error:
            raise error
        return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr="")

    monkeypatch.setattr("ytdl_album.media.probe.subprocess.run", fake_run)
    return calls


def test_duration_is_truncated_to_seconds(monkeypatch):
    calls = install_run(monkeypatch, stdout="2712.640000\n")
    assert probe_duration(Path("album.opus")) == TimeSpan(45, 12)
    assert calls[0][0] == "ffprobe"
    assert calls[0][-1] == "album.opus"


def test_unusable_output(monkeypatch):
    install_run(monkeypatch, stdout="N/A\n")
    with pytest.raises(ProbeError, match="no usable duration"):
        probe_duration(Path("album.opus"))


def test_probe_failure(monkeypatch):
    install_run(monkeypatch, error=subprocess.CalledProcessError(1, ["ffprobe"]))
    with pytest.raises(ProbeError, match="exit code 1"):
        probe_duration(Path("album.opus"))


def test_missing_ffprobe(monkeypatch):
    install_run(monkeypatch, error=FileNotFoundError("ffprobe"))
    with pytest.raises(ProbeError, match="not found"):
        probe_duration(Path("album.opus"), ffprobe="ffprobe")
