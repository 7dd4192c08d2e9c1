import os
import uuid

from loguru import logger
from pydantic import ValidationError

from core.config import Settings
from core.exceptions import AlbumConfigError, AlbumNotFound, OutputRootUnavailable
from model.album import Album
from model.resolved import ResolvedUnit
from processor import sync_runner
from processor.commands import convert_command
from processor.resolver import resolve_album
from utility.timer import timer


def load_album(path: str) -> Album:
    """앨범 설정 파일(JSON, UTF-8)을 읽어 Album으로 만든다."""
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except FileNotFoundError:
        raise AlbumNotFound(f"앨범 설정 파일이 없습니다: {path}") from None

    try:
        document = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise AlbumConfigError(f"{path}: UTF-8 문서가 아닙니다 ({e.reason})") from e

    try:
        return Album.model_validate_json(document)
    except ValidationError as e:
        raise AlbumConfigError(f"{path}: {e}") from e


def new_output_root(settings: Settings) -> str:
    """실행마다 새로운 출력 디렉토리 경로를 만든다. (디렉토리 생성은 하지 않음)"""
    return os.path.join(settings.OUTPUT_PARENT, f"{settings.OUTPUT_PREFIX}{uuid.uuid4()}")


def cleanup(units: list[ResolvedUnit], output_root: str) -> None:
    """이번 실행이 만든 출력 파일과 출력 디렉토리를 지운다."""
    for unit in units:
        if os.path.exists(unit.output_path):
            os.remove(unit.output_path)
    if os.path.isdir(output_root):
        try:
            os.rmdir(output_root)
        except OSError as e:
            # 브라우저 등이 남긴 파일은 지우지 않는다
            logger.warning(f"출력 디렉토리를 남겨 둡니다: {output_root} ({e.strerror})")


def process_album(
    album: Album, output_root: str, settings: Settings, dry_run: bool = False
) -> list[ResolvedUnit]:
    """앨범 전체를 처리한다.

    1. 전체 해석 (실패하면 디렉토리도 만들지 않고 중단)
    2. 출력 디렉토리 생성
    3. 이미지마다 변환 프로그램 실행 (순차)
    4. 파일 브라우저로 결과 확인
    5. 출력 파일/디렉토리 정리 (중간에 실패해도 실행)
    """
    units = resolve_album(album, output_root)
    logger.info(f"album {album.name!r}: {len(units)}장 해석 완료 -> {output_root}")

    if dry_run:
        for unit in units:
            logger.info(f"(dry run) {' '.join(convert_command(unit, settings))}")
        return units

    try:
        os.mkdir(output_root)
    except OSError as e:
        raise OutputRootUnavailable(f"출력 디렉토리를 만들 수 없습니다: {output_root} ({e.strerror})") from e

    try:
        with timer(f"convert {album.name}", count=len(units)):
            sync_runner.run(units, settings)
        sync_runner.open_browser(output_root, settings)
    finally:
        cleanup(units, output_root)

    return units
