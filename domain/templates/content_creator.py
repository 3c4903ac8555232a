# domain/templates/content_creator.py
from domain.models.agent_template import AgentTemplate, ToolConfiguration

CONTENT_CREATOR_TOOLS = [
    ToolConfiguration(
        name="generate_outline",
        description="Produce a structured outline for a piece of content",
        parameters={
            "type": "object",
            "properties": {
                "topic": {"type": "string"},
                "contentType": {
                    "type": "string",
                    "enum": [
                        "blog-post",
                        "documentation",
                        "marketing-copy",
                        "tutorial",
                        "article",
                        "social-media",
                    ],
                },
                "targetAudience": {"type": "string"},
                "keyPoints": {"type": "array", "items": {"type": "string"}},
                "tone": {"type": "string"},
                "length": {"type": "string", "enum": ["short", "medium", "long"]},
            },
            "required": ["topic", "contentType"],
        },
        required_permissions=[],
    ),
    ToolConfiguration(
        name="write_section",
        description="Write one section of content from an outline",
        parameters={
            "type": "object",
            "properties": {
                "sectionTitle": {"type": "string"},
                "outline": {"type": "string"},
                "context": {"type": "string"},
                "style": {"type": "object"},
                "wordCount": {"type": "integer", "minimum": 50},
            },
            "required": ["sectionTitle", "outline"],
        },
        required_permissions=[],
    ),
    ToolConfiguration(
        name="optimize_for_seo",
        description="Optimize content for a primary keyword and report SEO metrics",
        parameters={
            "type": "object",
            "properties": {
                "content": {"type": "string"},
                "primaryKeyword": {"type": "string"},
                "secondaryKeywords": {"type": "array", "items": {"type": "string"}},
                "options": {"type": "object"},
            },
            "required": ["content", "primaryKeyword"],
        },
        required_permissions=[],
    ),
    ToolConfiguration(
        name="format_content",
        description="Render content for a target format or platform",
        parameters={
            "type": "object",
            "properties": {
                "content": {"type": "string"},
                "outputFormat": {
                    "type": "string",
                    "enum": ["markdown", "html", "plain-text", "rich-text", "json"],
                },
                "options": {"type": "object"},
            },
            "required": ["content", "outputFormat"],
        },
        required_permissions=[],
    ),
]

content_creator_template = AgentTemplate(
    id="content-creator",
    name="Content Creator Agent",
    description=(
        "Specializes in blog posts, documentation, marketing copy, and SEO optimization. Ideal for "
        "content marketing, technical writing, and multi-platform content generation."
    ),
    capability_tags=["content-creation", "seo", "writing", "marketing", "documentation"],
    ideal_for=[
        "Blog post generation and publishing workflows",
        "Technical documentation and API guides",
        "Marketing copy and campaign content",
        "SEO-optimized content production",
        "Multi-platform content formatting",
    ],
    system_prompt=(
        "You are a content creator agent specializing in blog posts, SEO optimization, "
        "and multi-platform formatting."
    ),
    default_tools=CONTENT_CREATOR_TOOLS,
    required_dependencies=["@anthropic-ai/claude-agent-sdk"],
    recommended_integrations=["WordPress API", "Medium API"],
)
