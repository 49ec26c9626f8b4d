"""
Example: Tool Use with the Orchestrator

This example registers a function as a tool and lets the model call it.
Set ANTHROPIC_API_KEY (or RELAY_LLM_API_KEY) in the environment or a .env
file before running.
"""

import asyncio
import logging

from relay_llm import FunctionTool, InMemoryDiagnosticsSink, LLMConfig, Orchestrator


def get_weather(city: str, unit: str = "celsius") -> dict:
    """Return the current weather for a city."""
    # Stand-in for a real weather service
    return {"city": city, "forecast": "sunny", "temperature": 22, "unit": unit}


async def example_weather():
    """Ask a question that needs the weather tool."""
    print("=== Tool Use ===\n")

    orchestrator = Orchestrator(LLMConfig.from_env())
    sink = InMemoryDiagnosticsSink()
    orchestrator.diagnostics.add_sink(sink)
    orchestrator.add_tool(FunctionTool(get_weather))

    response = await orchestrator.generate("What's the weather like in Paris right now?")

    if response.is_error:
        print(f"Error ({response.error_type}): {response.message}")
        return

    print(response.text)
    print(f"\nProvider calls: {orchestrator.call_count}")
    print(f"Messages in history: {len(orchestrator.conversation)}")
    print(f"Diagnostic events: {', '.join(sink.names())}")


async def example_follow_up():
    """History carries over between generate calls."""
    print("\n=== Follow-up Question ===\n")

    orchestrator = Orchestrator(LLMConfig.from_env())
    await orchestrator.generate("My favourite city is Lisbon.", use_tools=False)
    response = await orchestrator.generate("Which city did I mention?", use_tools=False)
    print(response.message if response.is_error else response.text)


async def main():
    logging.basicConfig(level=logging.INFO)
    await example_weather()
    await example_follow_up()


if __name__ == "__main__":
    asyncio.run(main())
