"""입력/출력 경로 계산.

출력 파일명 앞에 0으로 채운 순번을 붙여서, 이름순 정렬이 앨범에 적힌
순서와 같아지도록 한다. (total_count=125 → "007_a.jpg")
"""

import os

from core.exceptions import PathEncodingError
from model.album import Image


def digit_count(number: int) -> int:
    """10진수 자릿수. digit_count(5) == 1, digit_count(3472) == 4."""
    return len(str(number))


def pad_position(position: int, width: int) -> str:
    return str(position).zfill(width)


def _check_encodable(path: str) -> str:
    if "\x00" in path:
        raise PathEncodingError(f"경로에 NUL 문자가 포함되어 있습니다: {path!r}")
    try:
        os.fsencode(path)
    except UnicodeEncodeError as e:
        raise PathEncodingError(f"경로를 인코딩할 수 없습니다: {path!r} ({e.reason})") from e
    return path


def _check_segment(filename: str) -> None:
    if filename in ("", ".", "..") or os.sep in filename or (os.altsep and os.altsep in filename):
        raise PathEncodingError(f"파일 이름은 경로 구성요소 하나여야 합니다: {filename!r}")


def build_paths(
    base: str,
    output_root: str,
    image: Image,
    position: int,
    total_count: int,
    width: int | None = None,
) -> tuple[str, str]:
    """(input_path, output_path)를 반환한다.

    position은 1부터 시작한다. width를 미리 계산해 넘기면 그대로 쓰고,
    없으면 total_count의 자릿수를 쓴다.
    """
    if not 1 <= position <= total_count:
        raise ValueError(f"position {position} is out of range 1..{total_count}")
    if width is None:
        width = digit_count(total_count)

    _check_segment(image.filename)
    input_path = os.path.join(base, image.filename)
    output_path = os.path.join(output_root, f"{pad_position(position, width)}_{image.filename}")
    return _check_encodable(input_path), _check_encodable(output_path)
