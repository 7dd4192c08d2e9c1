"""pytest 공용 fixture.

- client: 미리보기 API TestClient (lifespan 포함)
- app_settings: 외부 프로그램 이름만 바꾼 테스트용 Settings
- fake_run: subprocess.run을 대신해 호출된 명령을 기록하는 가짜 러너
- album_file: tmp_path에 앨범 JSON을 써 주는 헬퍼
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# src/ 디렉토리를 import path에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from core.config import Settings
from main import app


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def app_settings(tmp_path):
    return Settings(
        OUTPUT_PARENT=str(tmp_path),
        CONVERTER_BIN="gm",
        BROWSER_BIN="dolphin",
        BROWSER_ARGS=["--new-window"],
    )


class FakeRun:
    """subprocess.run 대체. 변환 명령이면 출력 파일을 실제로 만들어 준다."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.fail_on: int | None = None
        self.missing: set[str] = set()
        self.on_browser = None

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if cmd[0] == "gm":
            if self.fail_on is not None and len(self.calls) == self.fail_on:
                return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="gm convert: unable to open image")
            Path(cmd[-1]).write_bytes(b"converted")
        elif self.on_browser is not None:
            self.on_browser(cmd)
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


@pytest.fixture()
def fake_run(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture()
def album_file(tmp_path):
    def _write(document, name: str = "album.json") -> str:
        path = tmp_path / name
        if isinstance(document, (dict, list)):
            document = json.dumps(document)
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_bytes(document)
        return str(path)

    return _write
