"""
환경 설정 및 구성 관리
"""

import os
import re
import logging

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

OUTPUT_FORMATS = ("json", "markdown", "tree")


class Config:
    """애플리케이션 설정 클래스"""

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # h1 감지 설정
    H1_PATTERN = os.getenv("TOC_H1_PATTERN", r'mdx\("h1"')

    # 출력 설정
    OUTPUT_FORMAT = os.getenv("TOC_OUTPUT_FORMAT", "json")
    JSON_INDENT = int(os.getenv("TOC_JSON_INDENT", "2"))

    @property
    def log_level(self):
        """로그 레벨"""
        return self.LOG_LEVEL

    @property
    def h1_pattern(self):
        """h1 감지 정규식"""
        return self.H1_PATTERN

    @property
    def output_format(self):
        """기본 출력 형식"""
        return self.OUTPUT_FORMAT

    @property
    def json_indent(self):
        """JSON 출력 들여쓰기"""
        return self.JSON_INDENT

    @classmethod
    def validate(cls):
        """설정 유효성 검사"""
        errors = []

        if not isinstance(logging.getLevelName(str(cls.LOG_LEVEL).upper()), int):
            errors.append(f"LOG_LEVEL이 올바르지 않습니다: {cls.LOG_LEVEL}")

        try:
            re.compile(cls.H1_PATTERN)
        except re.error as e:
            errors.append(f"TOC_H1_PATTERN을 컴파일할 수 없습니다: {e}")

        if cls.OUTPUT_FORMAT not in OUTPUT_FORMATS:
            errors.append(
                f"TOC_OUTPUT_FORMAT은 {', '.join(OUTPUT_FORMATS)} 중 하나여야 합니다."
            )

        if cls.JSON_INDENT < 0:
            errors.append("TOC_JSON_INDENT는 0 이상이어야 합니다.")

        return errors

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  h1 감지 패턴: {cls.H1_PATTERN}")
        print(f"  기본 출력 형식: {cls.OUTPUT_FORMAT}")
        print(f"  JSON 들여쓰기: {cls.JSON_INDENT}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
