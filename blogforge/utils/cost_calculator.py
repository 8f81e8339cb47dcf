"""
OpenAI API cost calculator.
Prices per 1M tokens.
"""

GPT4O_PRICING = {
    "prompt": 2.50,
    "completion": 10.00,
}

GPT4O_MINI_PRICING = {
    "prompt": 0.150,
    "completion": 0.600,
}

GPT4_TURBO_PRICING = {
    "prompt": 10.00,
    "completion": 30.00,
}

MODEL_PRICING = {
    "gpt-4o": GPT4O_PRICING,
    "gpt-4o-mini": GPT4O_MINI_PRICING,
    "gpt-4-turbo": GPT4_TURBO_PRICING,
}


def get_model_pricing(model: str = "gpt-4o") -> dict:
    """Pricing for a model; unknown models are priced as gpt-4o."""
    return MODEL_PRICING.get(model, GPT4O_PRICING)


def calculate_openai_cost(
    prompt_tokens: int,
    completion_tokens: int,
    model: str = "gpt-4o"
) -> float:
    """
    Calculate the cost of an OpenAI API call.

    Args:
        prompt_tokens: Number of input tokens
        completion_tokens: Number of output tokens
        model: Model name (default: gpt-4o)

    Returns:
        Cost in USD (as float)
    """
    pricing = get_model_pricing(model)

    prompt_cost = (prompt_tokens / 1_000_000) * pricing["prompt"]
    completion_cost = (completion_tokens / 1_000_000) * pricing["completion"]

    return round(prompt_cost + completion_cost, 6)
