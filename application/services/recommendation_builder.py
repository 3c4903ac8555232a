# application/services/recommendation_builder.py
"""Artifacts derived from the winning template: MCP servers, system prompt,
complexity, implementation plan and classification notes."""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

from domain.models.agent_requirements import AgentRequirements, MemoryType, RuntimeEnvironment
from domain.models.agent_template import (
    AgentTemplate,
    AuthenticationMode,
    Complexity,
    MCPServerConfiguration,
    TemplateScore
)

MCP_SERVERS_REPOSITORY = "https://github.com/modelcontextprotocol/servers"

WEB_FETCH_SERVER = MCPServerConfiguration(
    name="web-fetch",
    description="Web content fetching and scraping capabilities",
    url=f"{MCP_SERVERS_REPOSITORY}/tree/main/src/fetch",
    authentication=AuthenticationMode.NONE
)

FILESYSTEM_SERVER = MCPServerConfiguration(
    name="filesystem",
    description="Local filesystem read/write operations",
    url=f"{MCP_SERVERS_REPOSITORY}/tree/main/src/filesystem",
    authentication=AuthenticationMode.NONE
)

DATA_TOOLS_SERVER = MCPServerConfiguration(
    name="data-tools",
    description="Statistical analysis and data processing utilities (reference example)",
    url=MCP_SERVERS_REPOSITORY,
    authentication=AuthenticationMode.NONE
)

MEMORY_SERVER = MCPServerConfiguration(
    name="memory",
    description="Persistent memory and context management",
    url=f"{MCP_SERVERS_REPOSITORY}/tree/main/src/memory",
    authentication=AuthenticationMode.NONE
)

ALTERNATIVE_THRESHOLD = 50
LISTED_ITEMS_LIMIT = 3

def round_percent(value: float) -> int:
    """Round to a whole percent, halves away from zero"""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def _truncated_list(items: Sequence[str]) -> str:
    listed = ", ".join(items[:LISTED_ITEMS_LIMIT])
    if len(items) > LISTED_ITEMS_LIMIT:
        listed += ", ..."
    return listed

def generate_mcp_servers(requirements: AgentRequirements) -> List[MCPServerConfiguration]:
    """MCP servers implied by the capability flags, in web, file, data, memory order"""
    capabilities = requirements.capabilities
    servers = []

    if capabilities.web_access:
        servers.append(WEB_FETCH_SERVER)
    if capabilities.file_access:
        servers.append(FILESYSTEM_SERVER)
    if capabilities.data_analysis:
        servers.append(DATA_TOOLS_SERVER)
    if capabilities.memory == MemoryType.LONG_TERM:
        servers.append(MEMORY_SERVER)

    return servers

def customize_system_prompt(template: AgentTemplate, requirements: AgentRequirements) -> str:
    sections = [
        f"# {requirements.name}",
        requirements.description,
        template.system_prompt
    ]

    if requirements.target_audience:
        sections.append(
            f"## Target Audience\nYou are designed to serve: {', '.join(requirements.target_audience)}"
        )

    sections.append(f"## Primary Objective\n{requirements.primary_outcome}")

    if requirements.success_metrics:
        metrics = "\n".join(f"- {metric}" for metric in requirements.success_metrics)
        sections.append(f"## Success Metrics\nMeasure success by:\n{metrics}")

    if requirements.constraints:
        constraints = "\n".join(f"- {constraint}" for constraint in requirements.constraints)
        sections.append(f"## Constraints\n{constraints}")

    sections.append(
        f"## Interaction Style\nMaintain a {requirements.interaction_style_name} approach in all interactions."
    )

    return "\n\n".join(sections)

def assess_complexity(requirements: AgentRequirements, template: AgentTemplate) -> Complexity:
    """Bucket an additive complexity score: <=3 low, <=7 medium, else high"""
    complexity_score = 0

    tool_count = len(template.default_tools)
    if tool_count > 6:
        complexity_score += 2
    elif tool_count > 3:
        complexity_score += 1

    capabilities = requirements.capabilities
    if capabilities.web_access:
        complexity_score += 1
    if capabilities.file_access:
        complexity_score += 1
    if capabilities.code_execution:
        complexity_score += 2
    if capabilities.data_analysis:
        complexity_score += 1
    if capabilities.memory == MemoryType.LONG_TERM:
        complexity_score += 2
    elif capabilities.memory == MemoryType.SHORT_TERM:
        complexity_score += 1

    integration_count = len(capabilities.tool_integrations)
    if integration_count > 3:
        complexity_score += 2
    elif integration_count > 0:
        complexity_score += 1

    if len(requirements.delivery_channels) > 2:
        complexity_score += 1

    environment = requirements.environment
    if environment is not None:
        if environment.runtime == RuntimeEnvironment.HYBRID:
            complexity_score += 2
        if environment.compliance_requirements:
            complexity_score += 2

    if complexity_score <= 3:
        return Complexity.LOW
    if complexity_score <= 7:
        return Complexity.MEDIUM
    return Complexity.HIGH

def generate_implementation_steps(requirements: AgentRequirements, template: AgentTemplate,
                                  complexity: Complexity) -> List[str]:
    tools = template.default_tools
    steps = [
        "Initialize project structure and install dependencies",
        f"Configure {template.name} template with {len(tools)} core tools",
        "Set up LLM provider integration with the Claude Agent SDK"
    ]

    if tools:
        tool_names = [tool.name for tool in tools]
        steps.append(f"Implement {len(tools)} tool handlers: {_truncated_list(tool_names)}")

    capabilities = requirements.capabilities
    if capabilities.file_access:
        steps.append("Configure filesystem access and file operation handlers")
    if capabilities.web_access:
        steps.append("Set up web fetching and content extraction capabilities")
    if capabilities.data_analysis:
        steps.append("Implement data processing and analysis utilities")
    if capabilities.memory != MemoryType.NONE:
        memory = getattr(capabilities.memory, "value", capabilities.memory)
        steps.append(f"Configure {memory} memory management system")

    if capabilities.tool_integrations:
        steps.append(f"Integrate with external services: {_truncated_list(capabilities.tool_integrations)}")

    steps.append("Create test suite for tool validation and error handling")
    steps.append("Configure environment variables and deployment settings")

    if complexity == Complexity.HIGH:
        steps.append("Implement comprehensive error recovery and fallback strategies")
        steps.append("Set up monitoring and performance optimization")

    steps.append("Document API usage and deployment instructions")

    return steps

def generate_notes(best_match: TemplateScore, alternatives: Sequence[TemplateScore],
                   requirements: AgentRequirements) -> str:
    notes = [
        f"Selected {best_match.template_id} template with {round_percent(best_match.score)}% confidence."
    ]

    if best_match.missing_capabilities:
        notes.append(
            f"Note: Template does not natively support: {', '.join(best_match.missing_capabilities)}. "
            "These may require custom implementation."
        )

    # Ranked descending, so checking the first alternative covers both
    if alternatives and alternatives[0].score > ALTERNATIVE_THRESHOLD:
        options = ", ".join(
            f"{alternative.template_id} ({round_percent(alternative.score)}%)"
            for alternative in alternatives
        )
        notes.append(f"Alternative options: {options}")

    if requirements.additional_notes:
        notes.append(f"Additional context: {requirements.additional_notes}")

    return "\n".join(notes)
