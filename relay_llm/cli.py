"""CLI entry point for Relay LLM SDK."""

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .config.constants import ENV_PREFIX, PROVIDER_API_KEY_ENV_VARS
from .config.models import DEFAULT_MODELS, PROVIDER_MODELS
from .config.settings import LLMConfig
from .models.generation import ErrorResponse, ProviderType, ToolUseRequested
from .orchestration.orchestrator import Orchestrator


async def generate_text(config: LLMConfig, prompt: str, max_tokens: Optional[int] = None,
                        system: Optional[str] = None) -> int:
    """Run one orchestrated generate and print the outcome."""
    orchestrator = Orchestrator(config)

    params: Dict[str, Any] = {}
    if max_tokens:
        params['max_tokens'] = max_tokens
    if system:
        params['system'] = system

    response = await orchestrator.generate(prompt, params)
    if isinstance(response, ErrorResponse):
        print(f"Error ({response.error_type}): {response.message}", file=sys.stderr)
        return 1

    print(f"Response from {response.model or config.model}:\n")
    print(response.text)
    if isinstance(response, ToolUseRequested):
        print("\nStopped with pending tool calls: "
              + ", ".join(call.name for call in response.tool_calls))
    if response.usage:
        print(f"\nTokens used: {response.usage}")
    return 0


def list_models(provider: Optional[str] = None) -> int:
    """Print the model catalog, marking each provider's default."""
    providers: List[ProviderType] = [ProviderType(provider)] if provider else list(PROVIDER_MODELS)

    print("Available Models:")
    print("-" * 50)
    for provider_type in providers:
        print(f"{provider_type.value}:")
        for model in PROVIDER_MODELS[provider_type]:
            marker = " (default)" if model == DEFAULT_MODELS.get(provider_type) else ""
            print(f"   {model}{marker}")
        print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Relay LLM SDK CLI")
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    provider_choices = [provider.value for provider in ProviderType]

    # Generate command
    generate_parser = subparsers.add_parser('generate', help='Generate text using an LLM')
    generate_parser.add_argument('prompt', help='Text prompt')
    generate_parser.add_argument('--provider', choices=provider_choices, help='Provider to use')
    generate_parser.add_argument('--model', help='Model identifier (defaults to the provider default)')
    generate_parser.add_argument('--max-tokens', type=int, help='Maximum tokens to generate')
    generate_parser.add_argument('--temperature', type=float, help='Temperature (0.0-2.0)')
    generate_parser.add_argument('--system', help='System prompt')

    # List models command
    list_parser = subparsers.add_parser('list-models', help='List known models')
    list_parser.add_argument('--provider', choices=provider_choices, help='Only this provider')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if args.command == 'generate':
        config = LLMConfig.from_env()
        overrides: Dict[str, Any] = {}
        if args.provider and args.provider != config.provider.value:
            overrides['provider'] = args.provider
            # The model from the environment belongs to the previous provider
            overrides['model'] = args.model or DEFAULT_MODELS[ProviderType(args.provider)]
            overrides['api_key'] = (os.getenv(f"{ENV_PREFIX}API_KEY")
                                    or os.getenv(PROVIDER_API_KEY_ENV_VARS[args.provider], ""))
        elif args.model:
            overrides['model'] = args.model
        if args.temperature is not None:
            overrides['temperature'] = args.temperature
        if overrides:
            config = config.merged(overrides)
        return asyncio.run(generate_text(config, args.prompt, args.max_tokens, args.system))
    elif args.command == 'list-models':
        return list_models(args.provider)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
