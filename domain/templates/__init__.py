# domain/templates/__init__.py
"""Built-in catalog of agent templates.

The catalog order is significant: it breaks ranking ties and picks the
default archetype for an empty interview.
"""
from typing import Iterable, List, Optional, Tuple

from domain.models.agent_template import AgentTemplate, TemplateSummary
from domain.templates.data_analyst import data_analyst_template
from domain.templates.content_creator import content_creator_template
from domain.templates.code_assistant import code_assistant_template
from domain.templates.research_agent import research_agent_template
from domain.templates.automation_agent import automation_agent_template

ALL_TEMPLATES: Tuple[AgentTemplate, ...] = (
    data_analyst_template,
    content_creator_template,
    code_assistant_template,
    research_agent_template,
    automation_agent_template,
)

TEMPLATE_COUNT = len(ALL_TEMPLATES)

def get_template_by_id(template_id: str) -> Optional[AgentTemplate]:
    for template in ALL_TEMPLATES:
        if template.id == template_id:
            return template
    return None

def get_templates_by_capability(tag: str) -> List[AgentTemplate]:
    return [template for template in ALL_TEMPLATES if tag in template.capability_tags]

def get_all_capability_tags() -> List[str]:
    tags = set()
    for template in ALL_TEMPLATES:
        tags.update(template.capability_tags)
    return sorted(tags)

def summarize_templates(templates: Iterable[AgentTemplate]) -> List[TemplateSummary]:
    return [
        TemplateSummary(
            id=template.id,
            name=template.name,
            description=template.description,
            tool_count=len(template.default_tools),
            capability_tags=list(template.capability_tags),
        )
        for template in templates
    ]

def get_template_summaries() -> List[TemplateSummary]:
    return summarize_templates(ALL_TEMPLATES)

def is_valid_template_id(template_id: str) -> bool:
    return get_template_by_id(template_id) is not None
