"""앨범 → ResolvedUnit 목록.

변환 프로그램을 돌리기 전에 전체 앨범을 한 번에 해석한다.
첫 번째 오류에서 바로 중단하며 부분 결과는 돌려주지 않는다.
파일이나 디렉토리는 만들지 않는다 (경로 문자열만 계산).
"""

from loguru import logger

from core.exceptions import PathEncodingError, UnknownTransformationSet
from model.album import Album
from model.resolved import ResolvedUnit
from processor.catalog import DEFAULT_SET, TransformationCatalog
from processor.paths import build_paths, digit_count


def resolve_album(album: Album, output_root: str) -> list[ResolvedUnit]:
    catalog = TransformationCatalog(album.transformations)
    total = len(album.images)
    width = digit_count(total)
    units = []

    for position, image in enumerate(album.images, start=1):
        set_name = DEFAULT_SET if image.transformation_set is None else image.transformation_set
        try:
            operations = catalog.resolve(set_name)
        except UnknownTransformationSet as e:
            raise UnknownTransformationSet(set_name, image.filename, position, e.available) from None

        try:
            input_path, output_path = build_paths(
                album.base, output_root, image, position, total, width
            )
        except PathEncodingError as e:
            raise PathEncodingError(
                f"이미지 #{position} {image.filename!r}: {e.detail}", image.filename, position
            ) from e

        logger.debug(f"[{position}/{total}] {input_path} -> {output_path} ({set_name}, {len(operations)} ops)")
        units.append(
            ResolvedUnit(
                input_path=input_path,
                output_path=output_path,
                operations=tuple(operations),
            )
        )

    return units
