# domain/models/agent_requirements.py
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional, List
from enum import Enum

class MemoryType(str, Enum):
    NONE = "none"
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"

class InteractionStyle(str, Enum):
    CONVERSATIONAL = "conversational"
    TASK_FOCUSED = "task-focused"
    COLLABORATIVE = "collaborative"

class RuntimeEnvironment(str, Enum):
    CLOUD = "cloud"
    LOCAL = "local"
    HYBRID = "hybrid"

@dataclass(frozen=True)
class AgentCapabilities:
    """Immutable capability flags gathered during the interview"""
    memory: MemoryType = MemoryType.NONE
    file_access: bool = False
    web_access: bool = False
    code_execution: bool = False
    data_analysis: bool = False
    tool_integrations: List[str] = field(default_factory=list)
    notes: Optional[str] = None

@dataclass(frozen=True)
class EnvironmentPreferences:
    """Immutable deployment preferences"""
    runtime: RuntimeEnvironment
    deployment_targets: Optional[List[str]] = None
    compliance_requirements: Optional[List[str]] = None

@dataclass(frozen=True)
class AgentRequirements:
    """Immutable input for template classification.

    ``interaction_style`` is kept as a plain string: unknown or empty styles
    are legal and score with the permissive default.
    """
    name: str
    description: str
    primary_outcome: str
    target_audience: List[str]
    interaction_style: str
    delivery_channels: List[str]
    success_metrics: List[str]
    capabilities: AgentCapabilities
    constraints: Optional[List[str]] = None
    preferred_technologies: Optional[List[str]] = None
    environment: Optional[EnvironmentPreferences] = None
    additional_notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def interaction_style_name(self) -> str:
        """Interaction style as plain text, whether given as enum or string"""
        style = self.interaction_style
        return style.value if isinstance(style, InteractionStyle) else style
