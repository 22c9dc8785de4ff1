"""Shared test fixtures for Blog Zen."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from blogzen.config.models import BlogZenConfig
from blogzen.extractor import ContextExtractor
from blogzen.llm.base import LLMProvider
from blogzen.llm.models import LLMConfig, LLMResponse, TokenUsage

SAMPLE_DRAFT = """\
# 건강한 식습관을 위한 7가지 원칙

바쁜 일상 속에서도 지킬 수 있는 식습관을 소개합니다.

## 아침 식사의 중요성
아침을 거르지 마세요.

## 균형 잡힌 한 끼
단백질과 채소를 함께 드세요.

## 간식 고르기
견과류가 좋은 선택입니다.

## 결론
작은 습관이 건강을 만듭니다.

Tags: #건강 #식습관 #영양
"""

SAMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>My Blog</title>
  <style>body { color: red; }</style>
  <script type="text/javascript">var tracking = "secret";</script>
</head>
<body>
  <h1>Hello   World</h1>
  <p>This is my
     writing style.</p>
  <SCRIPT>alert("x")</SCRIPT>
</body>
</html>
"""


@pytest.fixture
def sample_config():
    return BlogZenConfig()


@pytest.fixture
def mock_llm_provider():
    provider = MagicMock(spec=LLMProvider)
    provider.config = LLMConfig(provider="openai", model="test-model", api_key="sk-test")
    provider.generate = AsyncMock(
        return_value=LLMResponse(
            content=SAMPLE_DRAFT,
            usage=TokenUsage(input_tokens=120, output_tokens=400),
            model="test-model",
        )
    )
    return provider


@pytest.fixture
def mock_extractor():
    """Extractor whose extract() is observable; returns no context by default."""
    extractor = MagicMock(spec=ContextExtractor)
    extractor.extract = AsyncMock(return_value=None)
    return extractor


@pytest.fixture
def sample_draft():
    return SAMPLE_DRAFT


@pytest.fixture
def sample_html():
    return SAMPLE_HTML


@pytest.fixture
def html_transport():
    """Factory for an httpx.MockTransport that serves ``body`` for every request."""

    def _make(body: str = SAMPLE_HTML, status_code: int = 200, seen: list | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(
                status_code,
                text=body,
                headers={"Content-Type": "text/html; charset=utf-8"},
            )

        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def failing_transport():
    """Factory for an httpx.MockTransport that fails every request with a connection error."""

    def _make(seen: list | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            raise httpx.ConnectError("Name or service not known", request=request)

        return httpx.MockTransport(handler)

    return _make
