#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
GitHub API를 사용하여 레포지토리 공개 여부(private/public)를 변경하는 모듈

PATCH https://api.github.com/repos/{owner}/{repo} 요청 한 번으로
{"private": true|false} 값을 전송합니다. 재시도는 하지 않습니다.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import quote

import requests

from config import (
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_ACCEPT,
    USER_AGENT
)

logger = logging.getLogger(__name__)


# 오류 분류
class VisibilityError(Exception):
    """공개 여부 변경 중 발생하는 모든 오류의 기본 클래스"""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(VisibilityError):
    """토큰 누락 등 설정 오류 (네트워크 요청 전에 발생)"""

    exit_code = 2


class InputError(VisibilityError):
    """사용자 입력 오류 (네트워크 요청 전에 발생)"""

    exit_code = 2


class TransportError(VisibilityError):
    """DNS, 연결, TLS 등 전송 계층 오류"""

    exit_code = 3


class RemoteRejection(VisibilityError):
    """GitHub API가 2xx 이외의 상태 코드로 응답한 경우"""

    exit_code = 4

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        message = f"GitHub API 요청 실패 (HTTP {status_code})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


@dataclass
class VisibilityRequest:
    """한 번의 공개 여부 변경 요청"""

    owner: str
    repo: str
    private: bool
    token: str = field(repr=False)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class VisibilityResult:
    status_code: int
    private: bool
    html_url: Optional[str] = None


def build_api_url(owner: str, repo: str, base_url: str = GITHUB_API_URL) -> str:
    """레포지토리 API URL을 생성합니다.

    owner/repo 값은 검증하지 않고, 경로 구분 문자만 퍼센트 인코딩합니다.
    """
    return f"{base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def build_headers(token: str) -> Dict[str, str]:
    """인증 헤더를 생성합니다."""
    if not token:
        raise ConfigError("PAT (Personal Access Token)가 필요합니다")

    # HTTP 헤더는 latin-1로 인코딩됨
    try:
        token.encode("latin-1")
    except UnicodeEncodeError:
        raise ConfigError("PAT에 사용할 수 없는 문자가 포함되어 있습니다 (.env 파일의 따옴표 등 확인)") from None

    return {
        "Authorization": f"token {token}",
        "Accept": GITHUB_ACCEPT,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT
    }


def build_payload(private: bool) -> Dict[str, bool]:
    """요청 본문을 생성합니다. private 필드 외에는 포함하지 않습니다."""
    if not isinstance(private, bool):
        raise InputError(f"private 값은 true 또는 false여야 합니다: {private!r}")
    return {"private": private}


def make_visibility_request(owner: str, repo: str, private: bool, token: str) -> VisibilityRequest:
    """입력값을 확인하고 VisibilityRequest를 생성합니다."""
    if not token:
        raise ConfigError("PAT (Personal Access Token)가 필요합니다")
    if not owner:
        raise InputError("`username`이 필요합니다")
    if not repo:
        raise InputError("`repository`가 필요합니다")
    build_payload(private)

    return VisibilityRequest(owner=owner, repo=repo, private=private, token=token)


def _error_detail(response: requests.Response) -> str:
    # 표시용으로만 사용하며 응답 내용은 해석하지 않음
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text.strip()


def _html_url(response: requests.Response) -> Optional[str]:
    # 출력용 링크만 가져오며 응답 본문은 검증하지 않음
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("html_url"), str):
        return body["html_url"]
    return None


def update_visibility(
    request: VisibilityRequest,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    base_url: str = GITHUB_API_URL
) -> VisibilityResult:
    """GitHub API를 사용하여 레포지토리 공개 여부를 변경합니다.

    Args:
        request: 변경할 레포지토리와 토큰 정보
        session: 사용할 requests 세션 (없으면 requests 모듈 함수 사용)
        timeout: 요청 타임아웃 (초, None이면 requests 기본값)
        base_url: GitHub API 기본 URL

    Returns:
        VisibilityResult

    Raises:
        ConfigError: 토큰이 비어 있는 경우
        TransportError: 네트워크 오류가 발생한 경우
        RemoteRejection: 2xx 이외의 응답을 받은 경우
    """
    headers = build_headers(request.token)
    data = build_payload(request.private)
    url = build_api_url(request.owner, request.repo, base_url)

    logger.info(f"{request.full_name} 공개 여부 변경 요청 (private={request.private})")

    client = session if session is not None else requests
    try:
        response = client.patch(url, headers=headers, json=data, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"{request.full_name} 요청 중 전송 오류: {e}")
        raise TransportError(f"요청 전송 실패: {e}") from e

    logger.debug(f"{request.full_name} 응답 상태 코드: {response.status_code}")

    if not 200 <= response.status_code < 300:
        detail = _error_detail(response)
        logger.error(f"{request.full_name} 요청 거부: HTTP {response.status_code}")
        raise RemoteRejection(response.status_code, detail)

    return VisibilityResult(
        status_code=response.status_code,
        private=request.private,
        html_url=_html_url(response)
    )
