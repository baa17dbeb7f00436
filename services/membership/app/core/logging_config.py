"""
로깅 설정
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다.
    이미 핸들러가 있으면 (테스트 실행, 앱 재생성 등) 다시 설정하지 않습니다.

    Args:
        level: 로그 레벨 이름 (예: "DEBUG", "INFO"), 대소문자 무관
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
