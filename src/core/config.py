import sys

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 앱 설정
    APP_NAME: str = "album-creator"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 미리보기 API 서버 설정
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # 출력 디렉토리: <OUTPUT_PARENT>/<OUTPUT_PREFIX><uuid4>
    OUTPUT_PARENT: str = "/tmp"
    OUTPUT_PREFIX: str = "album_creator_"

    # 외부 프로그램
    CONVERTER_BIN: str = "gm"
    CONVERTER_SUBCOMMAND: str = "convert"
    BROWSER_BIN: str = "dolphin"
    BROWSER_ARGS: list[str] = ["--new-window"]

    @property
    def python_version(self) -> str:
        return f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    @property
    def converter_command(self) -> list[str]:
        return [self.CONVERTER_BIN, self.CONVERTER_SUBCOMMAND]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
