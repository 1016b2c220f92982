#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
사용자 입력 프롬프트 모듈
"""

import getpass

from config import PROMPTS
from github_visibility import InputError


def prompt_user_input(message, input_func=input):
    """메시지를 표시하고 사용자 입력을 받아 앞뒤 공백을 제거해 반환합니다."""
    return input_func(message).strip()


def prompt_for_token(getpass_func=getpass.getpass):
    """화면에 표시하지 않고 GitHub 토큰을 입력받습니다."""
    return getpass_func(PROMPTS["token"]).strip()


def parse_privacy(value):
    """'true' 또는 'false' 문자열만 bool 값으로 변환합니다."""
    text = value.strip()
    if text == "true":
        return True
    if text == "false":
        return False
    raise InputError(f"`true` 또는 `false`를 입력해주세요 (입력값: {value!r})")
