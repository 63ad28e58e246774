from __future__ import annotations

from typing import Awaitable, Callable, Optional

from .config import Settings
from .prompt_templates import SYSTEM_PROMPT

PromptBuilder = Callable[[str, str], str]
Provider = Callable[[str, Optional[int]], Awaitable[str]]


class ProviderError(Exception):
    pass


class OpenAIProvider:
    """Chat-completions provider. Raises ProviderError when LLM mode is off."""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def __call__(self, prompt: str, max_tokens: Optional[int] = None) -> str:
        if not self.settings.use_llm:
            raise ProviderError("LLM mode disabled (set ENABLE_LLM=1 and OPENAI_API_KEY)")

        from openai import AsyncOpenAI  # type: ignore

        async with AsyncOpenAI(
            api_key=self.settings.openai_api_key,
            timeout=self.settings.timeout,
        ) as client:
            resp = await client.chat.completions.create(
                model=self.settings.openai_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.settings.temperature,
                max_tokens=max_tokens or self.settings.max_tokens,
            )
        if not resp.choices:
            raise ProviderError("provider returned no choices")
        return resp.choices[0].message.content


async def attempt_generate(
    resume_text: str,
    job_description: str,
    prompt_builder: PromptBuilder,
    provider: Provider,
    *,
    max_tokens: Optional[int] = None,
) -> str:
    prompt = prompt_builder(resume_text, job_description)
    text = await provider(prompt, max_tokens)
    if not isinstance(text, str) or not text.strip():
        raise ProviderError("provider returned an empty response")
    return text
