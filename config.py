# API 토큰 및 설정 관리 파일
import os
from dotenv import find_dotenv, load_dotenv

# 현재 작업 디렉토리 기준으로 .env 파일 로드 (있는 경우)
load_dotenv(find_dotenv(usecwd=True))

# GitHub REST API 설정
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
GITHUB_ACCEPT = os.getenv("GITHUB_ACCEPT", "application/vnd.github+json")
USER_AGENT = "repo-visibility"

# 요청 타임아웃 (초, 비어 있으면 requests 기본값 사용). 실행 시점에 숫자로 변환
REQUEST_TIMEOUT = os.getenv("REQUEST_TIMEOUT", "").strip()

# 로깅 설정
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# 출력 아이콘
SUCCESS_ICON = "\u2705"  # ✅
ERROR_ICON = "\u274c"  # ❌

# 프롬프트 메시지
PROMPTS = {
    "username": "Enter username: ",
    "repository": "Enter repository: ",
    "privacy": "Make it private?: (true/false) ",
    "token": "Enter token: "
}


def get_pat_token():
    """현재 환경에서 PAT를 읽습니다. (.env 로드 이후 값)"""
    return os.getenv("PAT_TOKEN", "").strip()


def get_request_timeout(value=None):
    """타임아웃 설정을 초 단위 float로 변환합니다. 비어 있으면 None을 반환합니다.

    숫자가 아니면 ValueError가 발생합니다.
    """
    text = (REQUEST_TIMEOUT if value is None else str(value)).strip()
    if not text:
        return None
    return float(text)
