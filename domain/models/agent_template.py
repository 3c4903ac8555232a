# domain/models/agent_template.py
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional, List
from enum import Enum

class Complexity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class AuthenticationMode(str, Enum):
    API_KEY = "apiKey"
    OAUTH = "oauth"
    NONE = "none"

@dataclass(frozen=True)
class ToolConfiguration:
    """Immutable tool definition shipped with a template"""
    name: str
    description: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    required_permissions: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class AgentTemplate:
    """Immutable catalog entry describing an agent archetype"""
    id: str
    name: str
    description: str
    capability_tags: List[str]
    ideal_for: List[str]
    system_prompt: str
    default_tools: List[ToolConfiguration] = field(default_factory=list)
    required_dependencies: List[str] = field(default_factory=list)
    recommended_integrations: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class TemplateScore:
    """Immutable result of scoring one template against requirements"""
    template_id: str
    score: float
    matched_capabilities: List[str]
    missing_capabilities: List[str]
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class MCPServerConfiguration:
    name: str
    description: str
    url: str
    authentication: AuthenticationMode = AuthenticationMode.NONE

@dataclass(frozen=True)
class AgentRecommendations:
    """Immutable output of a full classification"""
    agent_type: str
    required_dependencies: List[str]
    mcp_servers: List[MCPServerConfiguration]
    system_prompt: str
    tool_configurations: List[ToolConfiguration]
    estimated_complexity: Complexity
    implementation_steps: List[str]
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class PartialArchetypeResult:
    """Immutable mid-interview archetype preview"""
    archetype: str
    archetype_name: str
    confidence: int
    raw_score: int
    data_completeness: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class TemplateSummary:
    id: str
    name: str
    description: str
    tool_count: int
    capability_tags: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
