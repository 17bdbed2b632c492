"""Exceptions for tocmap package."""


class TOCError(Exception):
    """tocmap 예외의 기본 클래스"""


class TOCInputError(TOCError, ValueError):
    """헤딩 트리 입력 형식이 잘못된 경우"""
