import shutil
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from core.config import settings
from utility.logger import setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # === 시작 ===
    setup_logger(settings.LOG_LEVEL)
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Python {settings.python_version}")

    converter = shutil.which(settings.CONVERTER_BIN)
    if converter:
        logger.info(f"Converter: {converter} {settings.CONVERTER_SUBCOMMAND}")
    else:
        # 미리보기 API는 변환 프로그램 없이도 동작한다
        logger.warning(f"{settings.CONVERTER_BIN} not found on PATH")

    app.state.settings = settings

    yield

    # === 종료 ===
    logger.info("Shutting down")
