"""동기 순차 처리 러너.

ResolvedUnit 하나당 변환 프로그램을 한 번 실행한다. 앨범 순서대로,
한 번에 하나씩 실행하고 첫 번째 실패에서 멈춘다 (재시도 없음).
"""

import subprocess

from loguru import logger

from core.config import Settings
from core.exceptions import BrowserUnavailable, ConversionFailed, ConverterUnavailable
from model.resolved import ResolvedUnit
from processor.commands import browser_command, convert_command


def convert(unit: ResolvedUnit, settings: Settings) -> None:
    cmd = convert_command(unit, settings)
    logger.debug(f"run: {' '.join(cmd)}")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ConverterUnavailable(f"{settings.CONVERTER_BIN} 실행 실패: {e}") from e
    if proc.returncode != 0:
        raise ConversionFailed(unit, proc.returncode, proc.stderr)


def run(units: list[ResolvedUnit], settings: Settings) -> list[str]:
    """모든 unit을 순서대로 변환하고 생성된 출력 경로 목록을 반환한다."""
    produced = []
    for position, unit in enumerate(units, start=1):
        logger.info(f"[{position}/{len(units)}] {unit.input_path} -> {unit.output_path}")
        convert(unit, settings)
        produced.append(unit.output_path)
    return produced


def open_browser(directory: str, settings: Settings) -> None:
    """파일 브라우저를 띄우고 닫힐 때까지 기다린다."""
    cmd = browser_command(directory, settings)
    logger.info(f"open: {' '.join(cmd)}")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise BrowserUnavailable(f"{settings.BROWSER_BIN} 실행 실패: {e}") from e
    if proc.returncode != 0:
        logger.warning(f"{settings.BROWSER_BIN} exited with {proc.returncode}")
