"""처리 시간 측정 유틸리티."""

import time
from contextlib import contextmanager

from loguru import logger


@contextmanager
def timer(label: str = "", count: int | None = None):
    """컨텍스트 매니저: 블록 실행 시간을 측정한다.

    count를 주면 항목당 평균 시간도 함께 기록한다.

    사용법:
        with timer("convert", count=len(units)) as t:
            ...
        print(t.elapsed, t.per_item)
    """
    t = _TimerResult()
    start = time.perf_counter()
    try:
        yield t
    finally:
        t.elapsed = time.perf_counter() - start
        if count:
            t.per_item = t.elapsed / count
        if label:
            if count:
                logger.info(f"[{label}] {t.elapsed:.3f}s ({count}장, {t.per_item * 1000:.1f}ms/장)")
            else:
                logger.info(f"[{label}] {t.elapsed:.3f}s")


class _TimerResult:
    elapsed: float = 0.0
    per_item: float = 0.0
