"""Main orchestrator for conversational, tool-using generation.

The orchestrator owns the conversation, the tool registry and the active
provider adapter. One ``generate`` call appends the user prompt, talks to
the provider, executes any requested tools and feeds their results back
until the model answers or the round bound is reached.
"""

import asyncio
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from ..config.constants import DEFAULT_MAX_TOKENS, MAX_TOOL_ROUNDS
from ..config.models import get_default_model, get_models_for_provider
from ..config.settings import LLMConfig
from ..conversation.history import Conversation
from ..models.conversation_types import ConversationMessage, TurnRole
from ..models.generation import ErrorResponse, ProviderRequest, ProviderResponse, ProviderType
from ..observability.logging import Diagnostics
from ..providers.base import ProviderAdapter
from ..providers.factory import create_provider
from ..providers.transport import Transport
from .cancellation import CancellationToken
from .errors import ConfigurationError, GenerationCancelled, LoopLimitExceeded
from .tool_registry import Tool, ToolRegistry

# Keys of additional_parameters / extra_params that map onto request fields;
# everything else is passed through to the vendor body.
REQUEST_FIELDS = ("model", "temperature", "max_tokens", "top_p", "top_k", "system")


class OrchestratorState(str, Enum):
    INIT = "init"
    AWAITING_FIRST_RESPONSE = "awaiting_first_response"
    EXECUTING_TOOLS = "executing_tools"
    AWAITING_TOOL_RESPONSE = "awaiting_tool_response"
    DONE = "done"
    LOOP_LIMIT_EXCEEDED = "loop_limit_exceeded"
    ERROR = "error"


class Orchestrator:
    """Drives provider rounds and the tool loop for one conversation.

    Example:
        orchestrator = Orchestrator(LLMConfig(api_key="..."))
        orchestrator.add_tool(FunctionTool(get_weather))
        response = await orchestrator.generate("What's the weather in Paris?")
    """

    def __init__(
        self,
        config: Optional[LLMConfig] = None,
        transport: Optional[Transport] = None,
        diagnostics: Optional[Diagnostics] = None,
        max_tool_rounds: int = MAX_TOOL_ROUNDS,
        parallel_tool_calls: bool = False,
        provider_adapter: Optional[ProviderAdapter] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Provider, credentials and sampling defaults
            transport: HTTP collaborator handed to every adapter created
            diagnostics: Parent diagnostics; adapters and tools get children
            max_tool_rounds: Follow-up provider calls allowed per generate
            parallel_tool_calls: Execute the calls of one round concurrently
            provider_adapter: Use this adapter instead of building one
        """
        if max_tool_rounds < 0:
            raise ValueError(f"max_tool_rounds must be non-negative, got {max_tool_rounds}")

        self._config = config or LLMConfig()
        self._transport = transport
        self.diagnostics = diagnostics or Diagnostics("orchestrator")
        self.max_tool_rounds = max_tool_rounds
        self.parallel_tool_calls = parallel_tool_calls

        self._conversation = Conversation(self._config.max_message_history)
        self._tools = ToolRegistry(self.diagnostics.child("tools"))
        self._lock = asyncio.Lock()
        self._in_flight = False
        self._state = OrchestratorState.INIT
        self._call_count = 0

        if provider_adapter is not None:
            self._adapter: Optional[ProviderAdapter] = provider_adapter
            self.diagnostics.info(
                "orchestrator.initialized",
                "Using injected provider adapter",
                provider=provider_adapter.get_provider_name(),
                model=self._config.model,
            )
        else:
            self._init_adapter()

    @property
    def config(self) -> LLMConfig:
        return self._config.model_copy(deep=True)

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    @property
    def tools(self) -> ToolRegistry:
        return self._tools

    @property
    def provider(self) -> Optional[ProviderAdapter]:
        return self._adapter

    @property
    def state(self) -> OrchestratorState:
        return self._state

    @property
    def call_count(self) -> int:
        """Provider calls made by the most recent ``generate``."""
        return self._call_count

    @property
    def is_configured(self) -> bool:
        return self._adapter is not None

    def _init_adapter(self) -> None:
        self._adapter = None
        provider = self._config.provider.value
        if not self._config.api_key:
            self.diagnostics.warning(
                "orchestrator.adapter_unavailable",
                "No API key configured; generate will fail until one is set",
                provider=provider,
            )
            return
        try:
            self._adapter = create_provider(
                self._config.provider,
                self._config.api_key,
                transport=self._transport,
                diagnostics=self.diagnostics,
            )
        except ValueError as e:
            self.diagnostics.error(
                "orchestrator.adapter_unavailable",
                "Could not create provider adapter",
                error=ConfigurationError(str(e)),
                provider=provider,
            )
            return
        self.diagnostics.info(
            "orchestrator.initialized",
            "Provider adapter ready",
            provider=provider,
            model=self._config.model,
        )

    def add_tool(self, tool: Tool) -> None:
        self._tools.register(tool)

    def remove_tool(self, name: str) -> bool:
        return self._tools.unregister(name)

    def set_provider(self, provider: Union[ProviderType, str], api_key: str) -> None:
        """
        Replace the active provider and credential.

        The previous adapter is discarded. The model falls back to the new
        provider's default when the current one is not in its catalog.

        Raises:
            ConfigurationError: If a generate is in progress or the provider is unknown
        """
        if self._in_flight:
            raise ConfigurationError("Cannot change provider while a generation is in progress")
        try:
            provider_type = ProviderType(provider)
        except ValueError as e:
            raise ConfigurationError(f"Unknown provider: {provider}") from e

        updates: Dict[str, Any] = {"provider": provider_type, "api_key": api_key}
        if self._config.model not in get_models_for_provider(provider_type):
            updates["model"] = get_default_model(provider_type)
        self._config = self._config.merged(updates)
        self._init_adapter()
        self.diagnostics.info(
            "orchestrator.provider_replaced",
            "Provider replaced",
            provider=provider_type.value,
            model=self._config.model,
        )

    def update_config(self, partial: Mapping[str, Any]) -> LLMConfig:
        """
        Merge ``partial`` into the configuration.

        ``additional_parameters`` is merged key by key. Changing
        ``provider`` or ``api_key`` re-creates the adapter; changing
        ``max_message_history`` resizes the conversation.

        Raises:
            ValueError: If ``partial`` names an unknown field or an invalid value
            ConfigurationError: If the adapter would change during a generate
        """
        previous = self._config
        updated = previous.merged(partial)
        reinitialize = updated.provider != previous.provider or updated.api_key != previous.api_key
        if reinitialize and self._in_flight:
            raise ConfigurationError("Cannot change provider while a generation is in progress")

        if updated.provider != previous.provider and "model" not in partial:
            if updated.model not in get_models_for_provider(updated.provider):
                updated = updated.merged({"model": get_default_model(updated.provider)})

        self._config = updated
        if updated.max_message_history != previous.max_message_history:
            self._conversation.set_capacity(updated.max_message_history)
        if reinitialize:
            self._init_adapter()
        self.diagnostics.debug(
            "orchestrator.config_updated",
            "Configuration updated",
            fields=",".join(sorted(partial)),
            reinitialized=reinitialize,
        )
        return self.config

    def set_max_message_history(self, n: int) -> None:
        self._conversation.set_capacity(n)
        self._config = self._config.merged({"max_message_history": n})

    def clear_message_history(self) -> None:
        self._conversation.clear()

    def get_available_models(self):
        if self._adapter is not None:
            return self._adapter.get_available_models()
        return get_models_for_provider(self._config.provider)

    def _build_request(self, extra_params: Optional[Mapping[str, Any]]) -> ProviderRequest:
        """Request fields from config, then additional_parameters, then extra_params."""
        params = {**self._config.additional_parameters, **dict(extra_params or {})}
        fields: Dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "max_tokens": DEFAULT_MAX_TOKENS,
        }
        extra: Dict[str, Any] = {}
        for key, value in params.items():
            if key in REQUEST_FIELDS:
                fields[key] = value
            else:
                extra[key] = value
        try:
            return ProviderRequest(extra=extra, **fields)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid request parameters: {e}") from e

    def _configuration_error(self, message: str) -> ErrorResponse:
        return ErrorResponse(
            message=message,
            error_type="configuration",
            provider=self._config.provider.value,
            model=self._config.model,
        )

    async def _call_provider(
        self,
        adapter: ProviderAdapter,
        request: ProviderRequest,
        cancel_token: Optional[CancellationToken],
    ) -> ProviderResponse:
        if cancel_token is None:
            self._call_count += 1
            return await adapter.generate(request)

        cancel_token.raise_if_cancelled()
        self._call_count += 1
        call = asyncio.ensure_future(adapter.generate(request))
        waiter = asyncio.ensure_future(cancel_token.wait())
        try:
            done, _ = await asyncio.wait({call, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            pending = [task for task in (call, waiter) if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.wait(pending)
        if call in done:
            return call.result()
        raise GenerationCancelled("Generation cancelled while waiting for the provider")

    def _append_response(self, adapter: ProviderAdapter, response: ProviderResponse) -> None:
        for message in adapter.extract_response_messages(response.raw):
            self._conversation.append(message)

    def _finish(self, response: ProviderResponse) -> ProviderResponse:
        self._state = OrchestratorState.ERROR if response.is_error else OrchestratorState.DONE
        return response

    async def generate(
        self,
        prompt: str,
        extra_params: Optional[Mapping[str, Any]] = None,
        use_tools: bool = True,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ProviderResponse:
        """
        Run one user turn to completion.

        Args:
            prompt: User message appended to the conversation
            extra_params: Per-call overrides for request fields and vendor knobs
            use_tools: Set False to skip the tool loop for this call
            cancel_token: Abort the call when this token is cancelled

        Returns:
            The final provider response. Failures (transport, vendor,
            malformed, configuration, cancellation) come back as an
            ``ErrorResponse`` rather than being raised.
        """
        async with self._lock:
            self._in_flight = True
            self._call_count = 0
            self._state = OrchestratorState.INIT
            try:
                return await self._generate(prompt, extra_params, use_tools, cancel_token)
            except ConfigurationError as e:
                self._state = OrchestratorState.ERROR
                self.diagnostics.warning(
                    "orchestrator.not_configured", "Generate rejected", error=e
                )
                return self._configuration_error(str(e))
            except GenerationCancelled as e:
                self._state = OrchestratorState.ERROR
                self.diagnostics.warning(
                    "orchestrator.cancelled",
                    "Generate cancelled",
                    error=e,
                    calls=self._call_count,
                )
                return ErrorResponse(
                    message=str(e),
                    error_type="cancelled",
                    provider=self._config.provider.value,
                    model=self._config.model,
                )
            finally:
                self._in_flight = False

    async def _generate(
        self,
        prompt: str,
        extra_params: Optional[Mapping[str, Any]],
        use_tools: bool,
        cancel_token: Optional[CancellationToken],
    ) -> ProviderResponse:
        adapter = self._adapter
        if adapter is None:
            raise ConfigurationError(
                f"Provider '{self._config.provider.value}' is not configured; set an API key"
            )
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        request = self._build_request(extra_params)
        self._conversation.append(ConversationMessage(role=TurnRole.USER, content=prompt))
        request.messages = self._conversation.snapshot()

        tool_path = use_tools and len(self._tools) > 0 and adapter.supports_tool_use()
        if tool_path:
            request.tools = adapter.prepare_tools_for_request(self._tools.definitions())

        self._state = OrchestratorState.AWAITING_FIRST_RESPONSE
        response = await self._call_provider(adapter, request, cancel_token)
        self._append_response(adapter, response)
        if not tool_path:
            return self._finish(response)

        rounds_left = self.max_tool_rounds
        while adapter.has_tool_calls(response.raw) and rounds_left > 0:
            self._state = OrchestratorState.EXECUTING_TOOLS
            calls = adapter.extract_tool_calls(response.raw)
            results = await self._tools.execute_all(calls, parallel=self.parallel_tool_calls)
            if results:
                self._conversation.append(ConversationMessage(
                    role=TurnRole.USER,
                    content=adapter.format_tool_results(results),
                ))

            self.diagnostics.debug(
                "orchestrator.round",
                "Sending tool results",
                round=self.max_tool_rounds - rounds_left + 1,
                tool_calls=len(calls),
                results=len(results),
            )
            request = request.model_copy(update={"messages": self._conversation.snapshot()})
            self._state = OrchestratorState.AWAITING_TOOL_RESPONSE
            response = await self._call_provider(adapter, request, cancel_token)
            self._append_response(adapter, response)
            rounds_left -= 1

        if adapter.has_tool_calls(response.raw):
            self._state = OrchestratorState.LOOP_LIMIT_EXCEEDED
            self.diagnostics.warning(
                "tool_loop.limit_reached",
                "Provider still requested tools after the last allowed round",
                error=LoopLimitExceeded(self.max_tool_rounds),
                calls=self._call_count,
            )
            return response
        return self._finish(response)
