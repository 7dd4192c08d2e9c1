"""변환 목록 → 변환 프로그램(gm convert) 인자.

변환 종류마다 고정된 플래그/값 쌍에 대응한다. 새 변환을 추가하면
ARGUMENTS에도 반드시 추가해야 한다 (없으면 TypeError).
"""

from core.config import Settings
from model.album import Enhance, Normalize, Size, Transformation, Unsharp
from model.resolved import ResolvedUnit


def _size(op: Size) -> list[str]:
    return ["-size", f"{op.width}x{op.height}"]


def _normalize(op: Normalize) -> list[str]:
    return ["-normalize"]


def _enhance(op: Enhance) -> list[str]:
    return ["-enhance"]


def _unsharp(op: Unsharp) -> list[str]:
    return ["-unsharp", str(op.radius)]


ARGUMENTS = {
    Size: _size,
    Normalize: _normalize,
    Enhance: _enhance,
    Unsharp: _unsharp,
}


def operation_args(op: Transformation) -> list[str]:
    to_args = ARGUMENTS.get(type(op))
    if to_args is None:
        raise TypeError(f"지원하지 않는 변환: {op!r}")
    return to_args(op)


def convert_args(unit: ResolvedUnit) -> list[str]:
    """서브커맨드 뒤에 붙는 인자: 변환 플래그들, 입력 경로, 출력 경로 순."""
    args: list[str] = []
    for op in unit.operations:
        args.extend(operation_args(op))
    args.append(unit.input_path)
    args.append(unit.output_path)
    return args


def convert_command(unit: ResolvedUnit, settings: Settings) -> list[str]:
    return settings.converter_command + convert_args(unit)


def browser_command(directory: str, settings: Settings) -> list[str]:
    return [settings.BROWSER_BIN, *settings.BROWSER_ARGS, directory]
