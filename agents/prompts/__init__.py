# =============================================================================
# agents/prompts/ - System Prompts for the Trading Assistant
# =============================================================================
# - assistant_system.py: chat system prompt, context blocks, and the
#   structured portfolio-suggestion prompt
#
# Organized with XML tags for clear structure.
# =============================================================================

from agents.prompts.assistant_system import (
    ASSISTANT_SYSTEM_PROMPT,
    RESPONSE_INSTRUCTION,
    build_context_block,
    build_portfolio_analysis_prompt,
)

__all__ = [
    "ASSISTANT_SYSTEM_PROMPT",
    "RESPONSE_INSTRUCTION",
    "build_context_block",
    "build_portfolio_analysis_prompt",
]
