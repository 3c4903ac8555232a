# domain/templates/automation_agent.py
from domain.models.agent_template import AgentTemplate, ToolConfiguration

AUTOMATION_AGENT_TOOLS = [
    ToolConfiguration(
        name="schedule_task",
        description="Schedule a task with a cron expression",
        parameters={
            "type": "object",
            "properties": {
                "cronExpression": {"type": "string"},
                "taskDefinition": {"type": "object"},
                "timezone": {"type": "string", "default": "UTC"},
                "enabled": {"type": "boolean", "default": True},
            },
            "required": ["cronExpression", "taskDefinition"],
        },
        required_permissions=["scheduler"],
    ),
    ToolConfiguration(
        name="execute_workflow",
        description="Run a multi-step workflow with step dependencies",
        parameters={
            "type": "object",
            "properties": {
                "workflowDefinition": {"type": "object"},
                "parameters": {"type": "object"},
                "options": {"type": "object"},
            },
            "required": ["workflowDefinition"],
        },
        required_permissions=["scheduler"],
    ),
    ToolConfiguration(
        name="manage_queue",
        description="Add, remove, pause or resume tasks in a named queue",
        parameters={
            "type": "object",
            "properties": {
                "action": {"type": "string", "enum": ["add", "remove", "pause", "resume"]},
                "queueName": {"type": "string"},
                "task": {"type": "object"},
                "priority": {"type": "integer"},
            },
            "required": ["action", "queueName"],
        },
        required_permissions=["queue"],
    ),
    ToolConfiguration(
        name="integrate_system",
        description="Register a webhook, API or event integration",
        parameters={
            "type": "object",
            "properties": {
                "integrationType": {"type": "string", "enum": ["webhook", "api", "event"]},
                "configuration": {"type": "object"},
                "authConfig": {"type": "object"},
            },
            "required": ["integrationType", "configuration"],
        },
        required_permissions=["network"],
    ),
]

automation_agent_template = AgentTemplate(
    id="automation-agent",
    name="Automation Agent",
    description=(
        "Specializes in task scheduling, workflow orchestration, queue management, and process "
        "automation. Ideal for repetitive task automation, workflow optimization, and system integration."
    ),
    capability_tags=["automation", "scheduling", "workflow", "orchestration", "integration"],
    ideal_for=[
        "Repetitive task automation and elimination",
        "Multi-step workflow orchestration",
        "Task queue management and processing",
        "System integration and data synchronization",
        "Scheduled job execution and monitoring",
    ],
    system_prompt=(
        "You are an automation agent specializing in task scheduling, workflow orchestration, "
        "and queue management."
    ),
    default_tools=AUTOMATION_AGENT_TOOLS,
    required_dependencies=["@anthropic-ai/claude-agent-sdk", "node-cron", "bull"],
    recommended_integrations=["Redis", "PostgreSQL"],
)
