"""
Shared fixtures and factories for the classifier test suite
"""
import pytest
from dataclasses import replace

from application.services.template_classifier import TemplateClassifier
from domain.models.agent_requirements import AgentRequirements, AgentCapabilities
from domain.models.agent_template import AgentTemplate, ToolConfiguration
from domain.templates import ALL_TEMPLATES


def make_requirements(**overrides) -> AgentRequirements:
    """Minimal valid requirements; capability flags go through ``capabilities``"""
    base = AgentRequirements(
        name="Test Agent",
        description="A test agent for unit testing",
        primary_outcome="Test outcome",
        target_audience=["Developers"],
        interaction_style="task-focused",
        delivery_channels=["CLI"],
        success_metrics=["Task completion rate"],
        capabilities=AgentCapabilities(),
    )
    return replace(base, **overrides)


def make_tool(**overrides) -> ToolConfiguration:
    base = ToolConfiguration(
        name="test-tool",
        description="A test tool for unit testing",
        parameters={
            "type": "object",
            "properties": {"input": {"type": "string", "description": "Input parameter"}},
            "required": ["input"],
        },
        required_permissions=["read"],
    )
    return replace(base, **overrides)


def make_template(**overrides) -> AgentTemplate:
    base = AgentTemplate(
        id="test-template",
        name="Test Template",
        description="A test template for unit testing",
        capability_tags=["testing", "development"],
        ideal_for=["Unit testing", "Integration testing"],
        system_prompt="You are a test agent for unit testing purposes.",
        default_tools=[make_tool()],
        required_dependencies=["@test/dependency"],
        recommended_integrations=["Test API"],
    )
    return replace(base, **overrides)


@pytest.fixture
def classifier():
    """Classifier over the built-in catalog"""
    return TemplateClassifier(ALL_TEMPLATES)


@pytest.fixture
def empty_classifier():
    return TemplateClassifier([])


@pytest.fixture
def base_requirements():
    return make_requirements()


@pytest.fixture
def requirements_factory():
    return make_requirements


@pytest.fixture
def template_factory():
    return make_template


@pytest.fixture
def tool_factory():
    return make_tool
