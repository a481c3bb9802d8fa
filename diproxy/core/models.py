"""Model catalogue served by the proxy."""

import time
from typing import Iterable, Optional

OWNED_BY = "deepinfra"

# Exact identifiers accepted by the allowlist policy.
ALLOWED_MODELS: frozenset[str] = frozenset(
    {
        "deepseek-ai/DeepSeek-V3.1",
        "openai/gpt-oss-120b",
        "Qwen/Qwen3-Coder-480B-A35B-Instruct-Turbo",
        "zai-org/GLM-4.5",
        "moonshotai/Kimi-K2-Instruct",
        "allenai/olmOCR-7B-0725-FP8",
        "Qwen/Qwen3-235B-A22B-Thinking-2507",
        "Qwen/Qwen3-Coder-480B-A35B-Instruct",
        "zai-org/GLM-4.5-Air",
        "mistralai/Voxtral-Small-24B-2507",
        "mistralai/Voxtral-Mini-3B-2507",
        "deepseek-ai/DeepSeek-R1-0528-Turbo",
        "Qwen/Qwen3-235B-A22B-Instruct-2507",
        "Qwen/Qwen3-30B-A3B",
        "Qwen/Qwen3-32B",
        "Qwen/Qwen3-14B",
        "deepseek-ai/DeepSeek-V3-0324-Turbo",
        "bigcode/starcoder2-15b",
        "Phind/Phind-CodeLlama-34B-v2",
        "Gryphe/MythoMax-L2-13b",
        "openchat/openchat_3.5",
        "openai/whisper-tiny",
        "meta-llama/Llama-3.3-70B-Instruct",
    }
)

# Used by the default-model policy when neither config nor env names one.
FALLBACK_DEFAULT_MODEL = "deepseek-ai/DeepSeek-V3.1"


def build_model_list(models: Iterable[str], created: Optional[int] = None) -> dict:
    """Build an OpenAI-style model listing.

    Args:
        models: Model identifiers to list.
        created: Timestamp reported for every entry. Defaults to now.

    Returns:
        A ``{"object": "list", "data": [...]}`` payload.
    """
    if created is None:
        created = int(time.time())
    data = [
        {
            "id": model_id,
            "object": "model",
            "created": created,
            "owned_by": OWNED_BY,
        }
        for model_id in sorted(models)
    ]
    return {"object": "list", "data": data}
