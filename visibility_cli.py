#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
레포지토리 공개 여부 변경 명령줄 인터페이스
GitHub 사용자 이름, 레포지토리 이름, private 여부(true/false)를 입력받아
GitHub API로 레포지토리를 비공개/공개로 전환하는 CLI 도구
"""

import argparse
import logging
import sys

from config import (
    LOG_LEVEL,
    LOG_FORMAT,
    PROMPTS,
    SUCCESS_ICON,
    ERROR_ICON,
    get_pat_token,
    get_request_timeout
)
from github_visibility import (
    ConfigError,
    VisibilityError,
    make_visibility_request,
    update_visibility
)
from prompter import parse_privacy, prompt_for_token, prompt_user_input

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """명령줄 인수를 파싱합니다."""
    parser = argparse.ArgumentParser(
        description="GitHub 레포지토리를 비공개(private) 또는 공개(public)로 전환합니다. "
                    "PAT_TOKEN은 .env 파일 또는 환경 변수에서 읽습니다."
    )

    # 선택적 인수 (지정하지 않으면 프롬프트로 입력받음)
    parser.add_argument(
        "--owner", "-u",
        type=str,
        default=None,
        help="GitHub 사용자 이름 (기본값: 프롬프트 입력)"
    )

    parser.add_argument(
        "--repo", "-r",
        type=str,
        default=None,
        help="레포지토리 이름 (기본값: 프롬프트 입력)"
    )

    parser.add_argument(
        "--private", "-p",
        type=str,
        default=None,
        help="비공개 여부: true 또는 false (기본값: 프롬프트 입력)"
    )

    parser.add_argument(
        "--ask-token",
        action="store_true",
        help="PAT_TOKEN이 없으면 토큰을 직접 입력받음"
    )

    parser.add_argument(
        "--timeout", "-t",
        type=str,
        default=None,
        help="요청 타임아웃 (초, 기본값: REQUEST_TIMEOUT 환경 변수 또는 requests 기본값)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="상세 출력 모드 활성화"
    )

    return parser.parse_args(argv)


def setup_logging(verbose=False):
    """로깅을 설정합니다."""
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def resolve_token(ask_token=False, getpass_func=None):
    """PAT를 가져옵니다. 없으면 ConfigError를 발생시킵니다."""
    token = get_pat_token()
    if not token and ask_token:
        token = prompt_for_token(getpass_func) if getpass_func else prompt_for_token()

    if not token:
        raise ConfigError("`PAT_TOKEN`이 설정되지 않았습니다 (.env 파일 또는 환경 변수 확인)")
    return token


def resolve_timeout(value=None):
    """타임아웃 값을 확인합니다. 숫자가 아니면 ConfigError를 발생시킵니다."""
    try:
        return get_request_timeout(value)
    except ValueError:
        raise ConfigError(f"타임아웃 값이 올바르지 않습니다: {value if value is not None else 'REQUEST_TIMEOUT'}") from None


def run(args, input_func=input, getpass_func=None, session=None):
    """입력을 받아 공개 여부 변경 요청을 한 번 실행합니다."""
    # 토큰이 없으면 다른 입력을 받기 전에 종료
    token = resolve_token(args.ask_token, getpass_func)
    timeout = resolve_timeout(args.timeout)

    owner = args.owner if args.owner is not None else prompt_user_input(PROMPTS["username"], input_func)
    repo = args.repo if args.repo is not None else prompt_user_input(PROMPTS["repository"], input_func)
    privacy = args.private if args.private is not None else prompt_user_input(PROMPTS["privacy"], input_func)

    request = make_visibility_request(owner, repo, parse_privacy(privacy), token)
    result = update_visibility(request, session=session, timeout=timeout)

    visibility = "private" if result.private else "public"
    print(f"{SUCCESS_ICON} 레포지토리 {request.full_name}이(가) {visibility}로 변경되었습니다 (HTTP {result.status_code})")
    if result.html_url:
        print(f"   {result.html_url}")
    return result


def main(argv=None, input_func=input, getpass_func=None, session=None):
    """메인 함수"""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        run(args, input_func=input_func, getpass_func=getpass_func, session=session)
    except VisibilityError as e:
        print(f"{ERROR_ICON} {e.message}")
        return e.exit_code
    except (KeyboardInterrupt, EOFError):
        print(f"\n{ERROR_ICON} 입력이 취소되었습니다.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
