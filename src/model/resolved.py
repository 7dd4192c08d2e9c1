from pydantic import BaseModel, ConfigDict

from model.album import Transformation


class ResolvedUnit(BaseModel):
    """이미지 한 장에 대해 해석이 끝난 결과. 변환 프로그램 호출 1회에 대응한다."""

    model_config = ConfigDict(frozen=True)

    input_path: str
    output_path: str
    operations: tuple[Transformation, ...]
