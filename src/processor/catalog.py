"""이름 붙은 변환 세트 카탈로그.

앨범의 transformations 매핑을 복사해서 만들고, "default"가 없으면
기본 파이프라인을 채워 넣는다. 원본 앨범 데이터는 건드리지 않는다.
"""

from collections.abc import Mapping, Sequence

from core.exceptions import UnknownTransformationSet
from model.album import Enhance, Normalize, Size, Transformation, Unsharp

DEFAULT_SET = "default"

DEFAULT_TRANSFORMATIONS: tuple[Transformation, ...] = (
    Size(width=1920, height=1080),
    Normalize(),
    Enhance(),
    Unsharp(radius=3),
)


class TransformationCatalog:
    def __init__(self, sets: Mapping[str, Sequence[Transformation]] | None = None):
        self._sets: dict[str, tuple[Transformation, ...]] = {
            name: tuple(ops) for name, ops in (sets or {}).items()
        }
        if DEFAULT_SET not in self._sets:
            self._sets[DEFAULT_SET] = DEFAULT_TRANSFORMATIONS

    def resolve(self, name: str) -> list[Transformation]:
        """세트 이름 → 변환 목록(새 리스트). 없는 이름이면 UnknownTransformationSet."""
        try:
            return list(self._sets[name])
        except KeyError:
            raise UnknownTransformationSet(name, available=self.names()) from None

    def names(self) -> list[str]:
        return sorted(self._sets)

    def __contains__(self, name: object) -> bool:
        return name in self._sets
