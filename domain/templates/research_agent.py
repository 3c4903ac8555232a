# domain/templates/research_agent.py
from domain.models.agent_template import AgentTemplate, ToolConfiguration

RESEARCH_AGENT_TOOLS = [
    ToolConfiguration(
        name="search_web",
        description="Search one or more engines and return ranked results",
        parameters={
            "type": "object",
            "properties": {
                "query": {"type": "string"},
                "searchEngines": {"type": "array", "items": {"type": "string"}},
                "maxResults": {"type": "integer", "default": 10},
                "dateRange": {"type": "string"},
                "domains": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["query"],
        },
        required_permissions=["network"],
    ),
    ToolConfiguration(
        name="extract_content",
        description="Fetch a URL and return cleaned text with metadata",
        parameters={
            "type": "object",
            "properties": {
                "url": {"type": "string", "format": "uri"},
                "extractionMode": {"type": "string", "enum": ["full", "main", "summary"]},
                "includeMetadata": {"type": "boolean", "default": True},
            },
            "required": ["url"],
        },
        required_permissions=["network"],
    ),
    ToolConfiguration(
        name="verify_facts",
        description="Check a claim against several sources",
        parameters={
            "type": "object",
            "properties": {
                "claim": {"type": "string"},
                "sources": {"type": "array", "items": {"type": "string"}},
                "minSources": {"type": "integer", "default": 2},
            },
            "required": ["claim"],
        },
        required_permissions=["network"],
    ),
    ToolConfiguration(
        name="synthesize_research",
        description="Combine findings into a summary, analysis or report with citations",
        parameters={
            "type": "object",
            "properties": {
                "findings": {"type": "array", "items": {"type": "object"}},
                "synthesisType": {"type": "string", "enum": ["summary", "analysis", "report"]},
                "includeCitations": {"type": "boolean", "default": True},
            },
            "required": ["findings"],
        },
        required_permissions=[],
    ),
]

research_agent_template = AgentTemplate(
    id="research-agent",
    name="Research Agent",
    description=(
        "Specializes in web search, content extraction, fact-checking, and source verification. "
        "Ideal for information gathering, competitive research, and knowledge synthesis."
    ),
    capability_tags=["web-search", "data-extraction", "fact-checking", "research", "synthesis"],
    ideal_for=[
        "Competitive research and market analysis",
        "Automated fact-checking and source verification",
        "Content aggregation and knowledge synthesis",
        "Due diligence and background research",
        "Literature review and citation gathering",
    ],
    system_prompt=(
        "You are a research agent specializing in web search, content extraction, "
        "fact-checking, and source verification."
    ),
    default_tools=RESEARCH_AGENT_TOOLS,
    required_dependencies=["@anthropic-ai/claude-agent-sdk", "axios", "cheerio"],
    recommended_integrations=["Google Search API", "Bing Search API"],
)
