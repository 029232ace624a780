"""LLM clients implementing core.ports.LLMClient."""
