# application/services/partial_classifier.py
"""Lenient conversion of an in-progress interview into requirements.

Every coercion here is total: any value of any type maps to a default
instead of raising, so a half-finished interview can always be scored.
"""
from typing import Dict, Any, List, Optional

from application.services.recommendation_builder import round_percent
from domain.models.agent_requirements import (
    AgentRequirements,
    AgentCapabilities,
    EnvironmentPreferences,
    InteractionStyle,
    MemoryType,
    RuntimeEnvironment
)

DEFAULT_AGENT_NAME = "Unnamed Agent"

# Interview question ids accepted in place of field names
QUESTION_ID_ALIASES: Dict[str, str] = {
    "q1_agent_name": "name",
    "q2_primary_outcome": "primary_outcome",
    "q3_target_audience": "target_audience",
    "q4_interaction_style": "interaction_style",
    "q5_delivery_channels": "delivery_channels",
    "q6_success_metrics": "success_metrics",
    "q7_memory_needs": "memory",
    "q8_file_access": "file_access",
    "q9_web_access": "web_access",
    "q10_code_execution": "code_execution",
    "q11_data_analysis": "data_analysis",
    "q12_tool_integrations": "tool_integrations",
    "q13_runtime_preference": "runtime",
    "q14_constraints": "constraints",
    "q15_additional_notes": "additional_notes",
}

KEY_FIELDS = (
    "name",
    "description",
    "primary_outcome",
    "interaction_style",
    "file_access",
    "web_access",
    "code_execution",
    "data_analysis",
    "memory",
)

def normalize_responses(responses: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Map question ids onto field names; field names win over aliases"""
    if not responses:
        return {}

    normalized: Dict[str, Any] = {}
    for key, value in responses.items():
        field_name = QUESTION_ID_ALIASES.get(key)
        if field_name is not None and field_name not in responses:
            normalized[field_name] = value
        elif field_name is None:
            normalized[key] = value
    return normalized

def is_answered(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict)):
        return len(value) > 0
    return True

def calculate_data_completeness(responses: Dict[str, Any]) -> int:
    """Percentage of key interview fields that hold an answer"""
    answered = sum(1 for field_name in KEY_FIELDS if is_answered(responses.get(field_name)))
    return round_percent(answered / len(KEY_FIELDS) * 100)

def coerce_text(value: Any, default: str = "") -> str:
    if isinstance(value, str):
        return value
    return default

def coerce_list(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return []

def coerce_flag(value: Any) -> bool:
    return value is True or value == "Yes"

def infer_memory(value: Any) -> MemoryType:
    text = coerce_text(value).lower()
    if "long" in text:
        return MemoryType.LONG_TERM
    if "short" in text or "session" in text:
        return MemoryType.SHORT_TERM
    return MemoryType.NONE

def infer_interaction_style(value: Any) -> str:
    text = coerce_text(value).lower()
    if "conversation" in text:
        return InteractionStyle.CONVERSATIONAL.value
    if "collaborat" in text:
        return InteractionStyle.COLLABORATIVE.value
    return InteractionStyle.TASK_FOCUSED.value

def infer_environment(value: Any) -> Optional[EnvironmentPreferences]:
    text = coerce_text(value).strip().lower()
    for runtime in RuntimeEnvironment:
        if text == runtime.value:
            return EnvironmentPreferences(runtime=runtime)
    return None

def build_partial_requirements(responses: Dict[str, Any]) -> AgentRequirements:
    """Minimal requirements from normalized responses, every default spelled out"""
    capabilities = AgentCapabilities(
        memory=infer_memory(responses.get("memory")),
        file_access=coerce_flag(responses.get("file_access")),
        web_access=coerce_flag(responses.get("web_access")),
        code_execution=coerce_flag(responses.get("code_execution")),
        data_analysis=coerce_flag(responses.get("data_analysis")),
        tool_integrations=coerce_list(responses.get("tool_integrations"))
    )

    constraints = coerce_list(responses.get("constraints"))
    additional_notes = coerce_text(responses.get("additional_notes")).strip()

    return AgentRequirements(
        name=coerce_text(responses.get("name")) or DEFAULT_AGENT_NAME,
        description=coerce_text(responses.get("description")),
        primary_outcome=coerce_text(responses.get("primary_outcome")),
        target_audience=coerce_list(responses.get("target_audience")),
        interaction_style=infer_interaction_style(responses.get("interaction_style")),
        delivery_channels=coerce_list(responses.get("delivery_channels")),
        success_metrics=coerce_list(responses.get("success_metrics")),
        capabilities=capabilities,
        constraints=constraints or None,
        environment=infer_environment(responses.get("runtime")),
        additional_notes=additional_notes or None
    )
