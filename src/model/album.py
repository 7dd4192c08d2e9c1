"""앨범 설정 문서의 데이터 모델.

변환(Transformation)은 닫힌 집합(Size, Normalize, Enhance, Unsharp)이며
kind 필드로 구분하는 tagged union이다. 설정 파일에서는 외부 태그 형식을 쓴다.

    "Normalize"                               # payload 없는 변환
    {"Normalize": null}                       # 위와 같음
    {"Size": {"width": 1920, "height": 1080}}
    {"Unsharp": {"radius": 3}}
"""

from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

UINT32_MAX = 2**32 - 1

UInt = Annotated[int, Field(strict=True, ge=0, le=UINT32_MAX)]


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["Size"] = "Size"
    width: UInt
    height: UInt


class Normalize(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["Normalize"] = "Normalize"


class Enhance(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["Enhance"] = "Enhance"


class Unsharp(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["Unsharp"] = "Unsharp"
    radius: UInt


def _untag(value: Any) -> Any:
    """외부 태그 형식을 {"kind": ...} 형식으로 바꾼다. 이미 바뀐 값은 그대로 둔다."""
    if isinstance(value, str):
        return {"kind": value}
    if isinstance(value, dict) and "kind" not in value and len(value) == 1:
        ((tag, payload),) = value.items()
        if payload is None:
            return {"kind": tag}
        if isinstance(payload, dict):
            return {"kind": tag, **payload}
    return value


Transformation = Annotated[
    Union[Size, Normalize, Enhance, Unsharp],
    Field(discriminator="kind"),
    BeforeValidator(_untag),
]


class Image(BaseModel):
    """앨범에 속한 이미지 한 장.

    transformation_set이 없으면 "default" 세트를 쓴다.
    설정 파일에서는 "transformations" 키로 적는다.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    transformation_set: str | None = Field(
        default=None,
        validation_alias=AliasChoices("transformations", "transformation_set"),
    )


class Album(BaseModel):
    name: str
    base: str
    transformations: dict[str, list[Transformation]] | None = None
    images: list[Image]
