"""Text generation client for Gemini's OpenAI-compatible endpoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from ..exceptions import GenerationError, ReviewAgentError

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

MAX_STEPS = 10


@dataclass(frozen=True)
class Tool:
    """A function the model may call while generating."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], Any]

    def to_openai(self) -> dict[str, Any]:
        """Tool definition in the chat completions format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_model.model_json_schema(),
            },
        }

    def invoke(self, arguments: str) -> str:
        """Validate raw JSON arguments, run the handler and encode its result."""
        params = self.input_model.model_validate_json(arguments or "{}")
        return json.dumps(self.handler(params))


@dataclass
class ToolCall:
    """A tool call assembled from streamed deltas."""

    id: str
    name: str = ""
    arguments: str = ""


class TextGenerationClient:
    """Wrapper around the chat completions API with one-shot and streaming modes."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.client = OpenAI(api_key=settings.api_key, base_url=settings.base_url)

    def _request(self, messages: list[dict[str, Any]], **kwargs: Any) -> Any:
        try:
            return self.client.chat.completions.create(
                model=self.settings.model_id,
                messages=messages,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
                **kwargs,
            )
        except OpenAIError as e:
            raise GenerationError(str(e)) from e

    def generate(self, prompt: str, system: str | None = None) -> str:
        """
        Generate a complete response for a prompt.

        Args:
            prompt: User prompt.
            system: Optional system instructions.

        Returns:
            The completion text.

        Raises:
            GenerationError: If the request fails or the response is empty.
        """
        response = self._request(_initial_messages(prompt, system))

        content = response.choices[0].message.content
        if content is None:
            raise GenerationError("Empty response from model")
        return content

    def stream(
        self,
        prompt: str,
        system: str | None = None,
        tools: Sequence[Tool] = (),
        max_steps: int = MAX_STEPS,
    ) -> Iterator[str]:
        """
        Stream a response, running tool calls between generation steps.

        Each step is one model request. Text is yielded as it arrives. If a
        step ends with tool calls, their results are appended to the
        conversation and the next step starts, up to ``max_steps`` requests.

        Raises:
            GenerationError: If a request fails or the stream breaks.
        """
        if max_steps < 1:
            raise ValueError("max_steps must be at least 1")

        messages = _initial_messages(prompt, system)
        tools_by_name = {tool.name: tool for tool in tools}
        tool_specs = [tool.to_openai() for tool in tools]

        for step in range(1, max_steps + 1):
            text, calls = yield from self._stream_step(messages, tool_specs)
            if not calls:
                return

            logger.debug("Step %d requested %d tool call(s)", step, len(calls))
            messages.append(
                {
                    "role": "assistant",
                    "content": text or None,
                    "tool_calls": [
                        {
                            "id": call.id,
                            "type": "function",
                            "function": {"name": call.name, "arguments": call.arguments},
                        }
                        for call in calls
                    ],
                }
            )
            for call in calls:
                messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": call.id,
                        "content": self._run_tool(tools_by_name, call),
                    }
                )

        logger.warning("Stopped after reaching the step budget of %d", max_steps)

    def _stream_step(
        self,
        messages: list[dict[str, Any]],
        tool_specs: list[dict[str, Any]],
    ) -> Generator[str, None, tuple[str, list[ToolCall]]]:
        """Run one streamed request, yielding text and returning tool calls."""
        kwargs: dict[str, Any] = {"stream": True}
        if tool_specs:
            kwargs["tools"] = tool_specs

        response = self._request(messages, **kwargs)
        parts: list[str] = []
        calls: dict[int, ToolCall] = {}

        try:
            for chunk in response:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta

                if delta.content:
                    parts.append(delta.content)
                    yield delta.content

                for fragment in delta.tool_calls or []:
                    index = fragment.index
                    if index is None:
                        # Some providers omit the index and send whole calls
                        index = len(calls) if fragment.id or not calls else max(calls)
                    call = calls.setdefault(index, ToolCall(id=fragment.id or f"call_{index}"))
                    if fragment.id:
                        call.id = fragment.id
                    if fragment.function:
                        if fragment.function.name:
                            call.name = fragment.function.name
                        if fragment.function.arguments:
                            call.arguments += fragment.function.arguments
        except OpenAIError as e:
            raise GenerationError(str(e)) from e

        return "".join(parts), [calls[i] for i in sorted(calls)]

    def _run_tool(self, tools_by_name: dict[str, Tool], call: ToolCall) -> str:
        """Run a requested tool; failures are reported back to the model."""
        tool = tools_by_name.get(call.name)
        if tool is None:
            logger.warning("Model requested unknown tool %r", call.name)
            return json.dumps({"error": f"Unknown tool: {call.name}"})

        try:
            return tool.invoke(call.arguments)
        except (ValidationError, ReviewAgentError) as e:
            logger.warning("Tool %s failed: %s", call.name, e)
            return json.dumps({"error": str(e)})


def _initial_messages(prompt: str, system: str | None) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})
    return messages
