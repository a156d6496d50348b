"""OpenAI client for batch translation and translation review."""

import json
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel, Field, RootModel, StrictStr, ValidationError

from ...config import config
from ...models.translation_result import AnalysisCandidate, AnalysisItem, BatchItem
from .base import TranslationClient, TranslationServiceError


class TranslationResponse(RootModel[Dict[str, StrictStr]]):
    """``{"string_0": "translated text", ...}``"""


class AnalysisEntry(BaseModel):
    suggested: StrictStr
    confidence: int = Field(ge=1, le=5)
    reasoning: StrictStr


class AnalysisResponse(RootModel[Dict[str, AnalysisEntry]]):
    """``{"string_0": {"suggested": ..., "confidence": 1-5, "reasoning": ...}, ...}``"""


RULES = """1. Preserve ALL placeholders exactly as they appear (e.g., %@, %d, %.0f, %1$@, {variable})
2. Preserve formatting characters like \\n (newlines) and special characters
3. Preserve capitalization style: if a string is lowercased and has no ending punctuation, keep it lowercased (don't make it a sentence)"""


class OpenAIClient(TranslationClient):
    """Client for OpenAI chat completions, one request per batch."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        app_description: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key. If not provided, uses OPENAI_API_KEY from environment.
            model: Chat model name, defaults to the configured model
            app_description: Optional description of the app, added to every prompt
            client: Pre-built AsyncOpenAI instance (mainly for tests)
        """
        self.api_key = api_key or config.openai_api_key
        if client is None and not self.api_key:
            raise ValueError("OpenAI API key is required")
        self.client = client or AsyncOpenAI(api_key=self.api_key)
        self.model = model or config.openai_model
        self.app_description = app_description
        self.max_tokens = config.max_completion_tokens
        self.analysis_temperature = config.analysis_temperature

    def language_name(self, code: str) -> str:
        return config.language_name(code)

    async def translate_batch(
        self,
        items: List[BatchItem],
        target_language: str,
    ) -> Dict[str, str]:
        """
        Translate a batch of strings in one request.

        Args:
            items: Strings to translate, with optional developer comments
            target_language: Target language code

        Returns:
            Dict of {key: translation} for every item the model answered
        """
        if not items:
            return {}

        lang_name = self.language_name(target_language)
        payload = {}
        for index, item in enumerate(items):
            entry = {"text": item.text}
            if item.context:
                entry["context"] = item.context
            payload[f"string_{index}"] = entry

        system_prompt = self._build_translate_system_prompt(lang_name)
        user_prompt = (
            f"Strings to translate to {lang_name} (JSON format):\n"
            f"{json.dumps(payload, indent=2, ensure_ascii=False)}"
        )

        content = await self._complete(system_prompt, user_prompt)
        data = self._parse_json(content)
        try:
            translations = TranslationResponse.model_validate(data).root
        except ValidationError as e:
            raise TranslationServiceError(f"Unexpected translation response: {e}") from e

        result = {}
        for index, item in enumerate(items):
            translated = translations.get(f"string_{index}")
            if translated is not None:
                result[item.key] = translated
        return result

    async def analyze_batch(
        self,
        items: List[AnalysisItem],
        target_language: str,
        source_language: str = "en",
    ) -> List[AnalysisCandidate]:
        """
        Ask the model to review existing translations.

        Every answered item is returned, including low-confidence ones;
        filtering is left to the caller.
        """
        if not items:
            return []

        lang_name = self.language_name(target_language)
        payload = {}
        for index, item in enumerate(items):
            entry = {"original": item.original, "translation": item.translation}
            if item.context:
                entry["context"] = item.context
            payload[f"string_{index}"] = entry

        system_prompt = self._build_analysis_system_prompt(
            self.language_name(source_language), lang_name
        )
        user_prompt = (
            "Translations to analyze (JSON format):\n"
            f"{json.dumps(payload, indent=2, ensure_ascii=False)}"
        )

        content = await self._complete(
            system_prompt, user_prompt, temperature=self.analysis_temperature
        )
        data = self._parse_json(content)
        try:
            analysis = AnalysisResponse.model_validate(data).root
        except ValidationError as e:
            raise TranslationServiceError(f"Unexpected analysis response: {e}") from e

        candidates = []
        for index, item in enumerate(items):
            entry = analysis.get(f"string_{index}")
            if entry is None:
                continue
            candidates.append(
                AnalysisCandidate(
                    key=item.key,
                    suggested=entry.suggested,
                    confidence=entry.confidence,
                    reasoning=entry.reasoning,
                )
            )
        return candidates

    async def _complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: Optional[float] = None,
    ) -> str:
        """Send one chat completion request and return the message text."""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_completion_tokens": self.max_tokens,
            "response_format": {"type": "json_object"},
        }
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            raise TranslationServiceError(f"OpenAI request failed: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise TranslationServiceError("No response from OpenAI API")

        return response.choices[0].message.content

    def _parse_json(self, content: str) -> Any:
        """Decode a JSON reply, tolerating markdown code fences."""
        cleaned = (
            content.strip()
            .replace("```json", "")
            .replace("```", "")
            .strip()
        )
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise TranslationServiceError(f"Invalid JSON from OpenAI API: {e}") from e

    def _app_context_line(self, number: int) -> str:
        if not self.app_description:
            return ""
        return f"\n{number}. App context: {self.app_description}"

    def _build_translate_system_prompt(self, lang_name: str) -> str:
        """Build the system prompt for batch translation."""
        return f"""You are an expert iOS app translator. Translate the given strings to {lang_name}.

IMPORTANT RULES:
{RULES}
4. Maintain the same tone and style
5. If the text is a UI element, keep it concise
6. Use the optional "context" of each string only as a hint, never translate it{self._app_context_line(7)}

Return your translations as a JSON object using the same ids:
{{
  "string_0": "translated text here",
  "string_1": "translated text here"
}}

Return ONLY the JSON, no explanations."""

    def _build_analysis_system_prompt(self, source_name: str, lang_name: str) -> str:
        """Build the system prompt for reviewing existing translations."""
        return f"""You are analyzing existing translations from {source_name} to {lang_name}.
For each translation provided, evaluate if there is a SIGNIFICANTLY better alternative.

IMPORTANT RULES:
{RULES}
4. Only suggest improvements if you have HIGH confidence (4 or 5 out of 5)
5. Consider: naturalness, cultural appropriateness, tone, and UI context
6. If the current translation is good enough, set confidence to 1-3{self._app_context_line(7)}

Return your analysis as a JSON object using the same ids:
{{
  "string_0": {{
    "suggested": "improved translation (or same if no improvement needed)",
    "confidence": 1,
    "reasoning": "brief explanation"
  }}
}}

Return ONLY the JSON, no explanations."""
