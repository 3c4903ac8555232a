# domain/templates/code_assistant.py
from domain.models.agent_template import AgentTemplate, ToolConfiguration

CODE_ASSISTANT_TOOLS = [
    ToolConfiguration(
        name="review_code",
        description="Review code for quality, security, performance or style issues",
        parameters={
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "language": {"type": "string"},
                "reviewType": {
                    "type": "string",
                    "enum": ["quality", "security", "performance", "style"],
                },
            },
            "required": ["code", "language"],
        },
        required_permissions=["file:read"],
    ),
    ToolConfiguration(
        name="suggest_refactoring",
        description="Suggest refactorings with before/after examples",
        parameters={
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "language": {"type": "string"},
                "focus": {
                    "type": "string",
                    "enum": ["readability", "performance", "maintainability"],
                },
            },
            "required": ["code", "language"],
        },
        required_permissions=["file:read"],
    ),
    ToolConfiguration(
        name="generate_tests",
        description="Generate unit tests for the given code",
        parameters={
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "language": {"type": "string"},
                "framework": {"type": "string"},
                "coverageTargets": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["code", "language"],
        },
        required_permissions=["file:read", "file:write"],
    ),
    ToolConfiguration(
        name="analyze_debug_info",
        description="Find the root cause of an error from a stack trace and context",
        parameters={
            "type": "object",
            "properties": {
                "stackTrace": {"type": "string"},
                "errorMessage": {"type": "string"},
                "context": {"type": "string"},
            },
            "required": ["errorMessage"],
        },
        required_permissions=["file:read"],
    ),
]

code_assistant_template = AgentTemplate(
    id="code-assistant",
    name="Code Assistant Agent",
    description=(
        "Specializes in code review, refactoring suggestions, test generation, and debugging "
        "assistance. Ideal for code quality improvement, technical debt reduction, and development workflows."
    ),
    capability_tags=["code-review", "refactoring", "testing", "debugging", "development"],
    ideal_for=[
        "Automated code review and quality checks",
        "Refactoring legacy code and technical debt reduction",
        "Test case generation and coverage improvement",
        "Debugging assistance and root cause analysis",
        "Code documentation and explanation",
    ],
    system_prompt=(
        "You are a code assistant agent specializing in code review, refactoring, "
        "test generation, and debugging."
    ),
    default_tools=CODE_ASSISTANT_TOOLS,
    required_dependencies=["@anthropic-ai/claude-agent-sdk"],
    recommended_integrations=["GitHub API", "GitLab API"],
)
