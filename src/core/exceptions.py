"""앱 전역 커스텀 예외 클래스.

AppException을 상속하면 전역 핸들러(error_handlers.py)가 자동으로
{"error_code": "...", "message": "..."} 형식의 JSON 응답을 생성하고,
CLI는 같은 error_code/message를 로그로 남긴 뒤 종료 코드 1로 끝난다.
"""


class AppException(Exception):
    """앱 전역 베이스 예외.

    서브클래스에서 status_code, error_code, message를 클래스 변수로 정의하면
    전역 핸들러가 해당 값을 읽어 HTTP 응답을 생성한다.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    message: str = "내부 오류가 발생했습니다"

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


# --- 해석(resolution) 단계 ---


class UnknownTransformationSet(AppException):
    """이미지가 카탈로그에 없는 변환 세트 이름을 참조한다."""

    status_code = 422
    error_code = "UNKNOWN_TRANSFORMATION_SET"
    message = "정의되지 않은 변환 세트입니다"

    def __init__(
        self,
        name: str,
        filename: str | None = None,
        position: int | None = None,
        available: list[str] | None = None,
    ):
        self.name = name
        self.filename = filename
        self.position = position
        self.available = available or []
        detail = f"정의되지 않은 변환 세트: {name!r}"
        if filename is not None:
            detail += f" (이미지 #{position} {filename!r})"
        if self.available:
            detail += f" | 사용 가능: {', '.join(self.available)}"
        super().__init__(detail)


class PathEncodingError(AppException):
    status_code = 422
    error_code = "PATH_ENCODING_ERROR"
    message = "경로를 파일시스템 인코딩으로 표현할 수 없습니다"

    def __init__(self, detail: str, filename: str | None = None, position: int | None = None):
        self.detail = detail
        self.filename = filename
        self.position = position
        super().__init__(detail)


# --- 앨범 문서 ---


class AlbumNotFound(AppException):
    status_code = 404
    error_code = "ALBUM_NOT_FOUND"
    message = "앨범 설정 파일을 찾을 수 없습니다"


class AlbumConfigError(AppException):
    status_code = 400
    error_code = "INVALID_ALBUM"
    message = "앨범 설정 파일 형식이 올바르지 않습니다"


# --- 출력 디렉토리 ---


class OutputRootUnavailable(AppException):
    error_code = "OUTPUT_ROOT_UNAVAILABLE"
    message = "출력 디렉토리를 만들 수 없습니다"


# --- 외부 프로그램 ---


class ConverterUnavailable(AppException):
    error_code = "CONVERTER_UNAVAILABLE"
    message = "이미지 변환 프로그램을 실행할 수 없습니다"


class ConversionFailed(AppException):
    error_code = "CONVERSION_FAILED"
    message = "이미지 변환에 실패했습니다"

    def __init__(self, unit, returncode: int, stderr: str = ""):
        self.unit = unit
        self.returncode = returncode
        self.stderr = stderr
        detail = f"변환 실패 (exit {returncode}): {unit.input_path} -> {unit.output_path}"
        if stderr:
            detail += f" | {stderr.strip()}"
        super().__init__(detail)


class BrowserUnavailable(AppException):
    error_code = "BROWSER_UNAVAILABLE"
    message = "파일 브라우저를 실행할 수 없습니다"
