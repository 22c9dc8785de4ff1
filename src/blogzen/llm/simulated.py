"""Simulated provider: a deterministic stand-in when no real service is wired in."""

from __future__ import annotations

import asyncio
import re

from blogzen.llm.base import LLMProvider
from blogzen.llm.models import LLMConfig, LLMResponse, TokenUsage

# Parses the "- **Topic:**" line of USER_PROMPT_TEMPLATE in blogzen/drafter/prompts.py;
# the two must change together.
_TOPIC_RE = re.compile(r"^- \*\*Topic:\*\* (.+)$", re.MULTILINE)

_DRAFT_TEMPLATE = """\
# [실전] {topic}에 대하여

> **인증 완료**: 사용자의 API Key({key_hint})를 사용하여 생성 프로세스가 가동되었습니다.

## 🔍 서론: {topic}의 중요성
우리는 현재 {topic}이(가) 일상과 산업 전반에 깊숙이 자리 잡은 시대에 살고 있습니다. \
왜 지금 {topic}에 주목해야 할까요? 그 이유를 본문에서 자세히 다루어 보겠습니다.

## 📌 {topic}의 핵심 개념
{topic}을(를) 이해하기 위해 꼭 알아야 할 기본 개념을 정리합니다.

## 🛠️ {topic} 실전 활용법
바로 적용할 수 있는 구체적인 방법과 사례를 소개합니다.

## ⚠️ {topic}에서 흔히 하는 실수
많은 사람들이 놓치는 부분과 그 해결책을 살펴봅니다.

## ✅ 결론
{topic}은(는) 앞으로도 더 중요해질 것입니다. 오늘 다룬 내용을 바탕으로 한 걸음씩 실천해 보세요.

Tags: #{tag} #블로그 #초안
"""


def mask_key(api_key: str) -> str:
    """Show only the first five and last three characters of a key."""
    return f"{api_key[:5]}...{api_key[-3:]}"


class SimulatedProvider(LLMProvider):
    """Returns a fixed Markdown skeleton for the topic without any network call."""

    def __init__(self, config: LLMConfig, delay: float = 0.0) -> None:
        super().__init__(config)
        self.delay = delay

    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        if self.delay:
            await asyncio.sleep(self.delay)

        match = _TOPIC_RE.search(user)
        if match:
            topic = match.group(1).strip()
        else:
            topic = (user.strip().splitlines() or ["Untitled"])[0]
        content = _DRAFT_TEMPLATE.format(
            topic=topic,
            key_hint=mask_key(self.config.api_key or ""),
            tag=re.sub(r"\s+", "", topic),
        ).strip()
        return LLMResponse(
            content=content,
            usage=TokenUsage(input_tokens=len(user.split()), output_tokens=len(content.split())),
            model=self.config.model,
        )
