"""
PHP Blueprint Prompts

The project plan prompt compiler and the framework presets that feed it.
"""

from .plan_prompt import (
    PLAN_PROMPT_TEMPLATE,
    NOT_SPECIFIED,
    THINKING_BUDGET,
    CompiledPrompt,
    build_model_config,
    build_prompt_text,
    compile_prompt,
)
from .framework_presets import (
    FRAMEWORK_PRESETS,
    FrameworkPreset,
    resolve,
    apply_preset,
    list_presets,
)

__all__ = [
    "PLAN_PROMPT_TEMPLATE",
    "NOT_SPECIFIED",
    "THINKING_BUDGET",
    "CompiledPrompt",
    "build_model_config",
    "build_prompt_text",
    "compile_prompt",
    "FRAMEWORK_PRESETS",
    "FrameworkPreset",
    "resolve",
    "apply_preset",
    "list_presets",
]
