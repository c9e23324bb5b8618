"""Request and response dataclasses for common and provider-specific LLM API formats."""