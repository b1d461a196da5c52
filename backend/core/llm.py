"""
Minimal LangChain wrapper for report narrative generation.
The LLM receives only computed report figures; constrained to avoid diagnosis
and invented metrics.
"""
import json
import logging

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from core.config import OPENAI_API_KEY

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You write short, encouraging summaries of a personal health report.
Rules:
- Do NOT use medical diagnosis language (e.g. "you have", "diagnosis", "condition").
- Use ONLY the scores and figures provided in the input; never invent metrics or numbers.
- Mention the weakest area as something to focus on.
- Keep the response to 1-3 sentences. Output plain text only."""

FALLBACK_SUMMARY = ""


def generate_report_text(payload: dict) -> str:
    """
    Generate a narrative from structured report figures. Returns
    FALLBACK_SUMMARY when no API key is configured or the call fails.
    """
    api_key = (OPENAI_API_KEY or "").strip()
    if not api_key:
        return FALLBACK_SUMMARY

    try:
        llm = ChatOpenAI(
            model="gpt-4o-mini",
            temperature=0.3,
            api_key=api_key,
        )
        body = json.dumps(payload, default=str)
        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=f"Summarize this health report.\n\n{body}"),
        ]
        message = llm.invoke(messages)
        if message and hasattr(message, "content") and message.content:
            return message.content.strip()
    except Exception:
        logger.warning("Report narrative generation failed", exc_info=True)
    return FALLBACK_SUMMARY
