from fastapi import APIRouter, Request
from pydantic import BaseModel

from model.album import Album, Transformation
from processor.commands import convert_command
from processor.resolver import resolve_album
from service.album_service import new_output_root

router = APIRouter(prefix="/api/albums", tags=["albums"])


class ResolvedUnitResponse(BaseModel):
    input_path: str
    output_path: str
    operations: list[Transformation]
    command: list[str]


@router.post("/resolve", response_model=list[ResolvedUnitResponse])
def resolve(album: Album, request: Request, output_root: str | None = None):
    """앨범을 해석만 한다. 디렉토리 생성이나 변환 프로그램 실행은 하지 않는다."""
    settings = request.app.state.settings
    root = output_root or new_output_root(settings)
    return [
        ResolvedUnitResponse(
            input_path=unit.input_path,
            output_path=unit.output_path,
            operations=list(unit.operations),
            command=convert_command(unit, settings),
        )
        for unit in resolve_album(album, root)
    ]
