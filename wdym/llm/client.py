"""
Gemini client for wdym.

Talks to Gemini through its OpenAI-compatible endpoint. Each request kind
builds a prompt from wdym.prompts and asks for exactly one completion.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from .. import prompts
from ..config import DEFAULT_BASE_URL, DEFAULT_MODEL
from ..errors import ClientError
from .utils import debug_log, extract_text_from_content

logger = logging.getLogger(__name__)

# Low-variance sampling so the same request gives similar answers.
TEMPERATURE = 0.1
TOP_P = 0.95
MAX_OUTPUT_TOKENS = 2048


class GeminiClient:
    """
    Wraps a single AsyncOpenAI connection to the Gemini API.

    Call initialize() before generating and cleanup() on every exit path.
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL,
                 base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.client: Optional[AsyncOpenAI] = None

    def initialize(self) -> None:
        """Create the underlying HTTP client."""
        try:
            self.client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        except OpenAIError as e:
            raise ClientError(f"failed to create Gemini client: {e}") from e
        logger.debug(f"Initialized Gemini client with model: {self.model}")

    async def generate_response(self, prompt: str) -> str:
        """Send one prompt and return the text of the first candidate."""
        if not self.client:
            raise ClientError("Gemini client not initialized. Call initialize() first.")

        chat_params = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": TEMPERATURE,
            "top_p": TOP_P,
            "max_tokens": MAX_OUTPUT_TOKENS,
        }
        logger.debug(f"Gemini request: model={self.model}, prompt={len(prompt)} chars")
        debug_log("REQUEST", chat_params)

        try:
            response = await self.client.chat.completions.create(**chat_params)
        except OpenAIError as e:
            debug_log("ERROR", str(e))
            raise ClientError(f"failed to generate content: {e}") from e

        if not response.choices:
            raise ClientError("no response candidates generated")

        message = response.choices[0].message
        if message is None or not message.content:
            raise ClientError("empty response from AI")

        text = extract_text_from_content(message.content)
        debug_log("RESPONSE", text)
        return text

    async def generate_shell_command(self, query: str, shell: str = "zsh",
                                     os_info: str = "macOS (Darwin)") -> str:
        return await self.generate_response(
            prompts.build_shell_prompt(query, shell=shell, os_info=os_info)
        )

    async def generate_code(self, query: str) -> str:
        return await self.generate_response(prompts.build_code_prompt(query))

    async def analyze_file(self, content: str, query: str) -> str:
        return await self.generate_response(prompts.build_file_analysis_prompt(content, query))

    async def analyze_command(self, command: str, output: str = "") -> str:
        return await self.generate_response(prompts.build_command_analysis_prompt(command, output))

    async def edit_file(self, file_path: str, content: str, instruction: str) -> str:
        return await self.generate_response(
            prompts.build_edit_file_prompt(file_path, content, instruction)
        )

    async def cleanup(self):
        """Close the HTTP client."""
        if self.client:
            await self.client.close()
        self.client = None

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(model='{self.model}')"
