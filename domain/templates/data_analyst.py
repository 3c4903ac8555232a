# domain/templates/data_analyst.py
from domain.models.agent_template import AgentTemplate, ToolConfiguration

DATA_ANALYST_TOOLS = [
    ToolConfiguration(
        name="read_csv",
        description="Read and parse a CSV file into rows",
        parameters={
            "type": "object",
            "properties": {
                "filePath": {"type": "string", "description": "Path to the CSV file"},
                "delimiter": {"type": "string", "default": ","},
                "hasHeaders": {"type": "boolean", "default": True},
                "encoding": {"type": "string", "default": "utf-8"},
            },
            "required": ["filePath"],
        },
        required_permissions=["file:read"],
    ),
    ToolConfiguration(
        name="analyze_data",
        description="Run descriptive, correlation, regression or distribution analysis",
        parameters={
            "type": "object",
            "properties": {
                "data": {"type": "array", "items": {"type": "object"}},
                "analysisType": {
                    "type": "string",
                    "enum": ["descriptive", "correlation", "regression", "distribution"],
                },
                "columns": {"type": "array", "items": {"type": "string"}},
                "groupBy": {"type": "string"},
            },
            "required": ["data", "analysisType"],
        },
        required_permissions=[],
    ),
    ToolConfiguration(
        name="generate_visualization",
        description="Build a chart configuration from tabular data",
        parameters={
            "type": "object",
            "properties": {
                "data": {"type": "array", "items": {"type": "object"}},
                "chartType": {
                    "type": "string",
                    "enum": ["bar", "line", "scatter", "pie", "histogram", "heatmap"],
                },
                "xAxis": {"type": "string"},
                "yAxis": {"type": "string"},
                "title": {"type": "string"},
                "outputPath": {"type": "string"},
            },
            "required": ["data", "chartType", "xAxis", "yAxis"],
        },
        required_permissions=["file:write"],
    ),
    ToolConfiguration(
        name="export_report",
        description="Format analysis results as JSON, CSV, Markdown or HTML",
        parameters={
            "type": "object",
            "properties": {
                "data": {"type": "object"},
                "format": {"type": "string", "enum": ["json", "csv", "markdown", "html"]},
                "outputPath": {"type": "string"},
                "includeMetadata": {"type": "boolean", "default": True},
            },
            "required": ["data", "format"],
        },
        required_permissions=["file:write"],
    ),
]

data_analyst_template = AgentTemplate(
    id="data-analyst",
    name="Data Analyst Agent",
    description=(
        "Specializes in CSV data processing, statistical analysis, visualization, and report "
        "generation. Ideal for data exploration, business intelligence, and automated reporting workflows."
    ),
    capability_tags=["data-processing", "statistics", "visualization", "reporting", "file-access"],
    ideal_for=[
        "Automated data analysis and reporting",
        "CSV file processing and transformation",
        "Statistical analysis and insights generation",
        "Business intelligence dashboards",
        "Data quality assessment and validation",
    ],
    system_prompt="You are a data analyst agent specializing in CSV processing and statistical analysis.",
    default_tools=DATA_ANALYST_TOOLS,
    required_dependencies=["@anthropic-ai/claude-agent-sdk", "csv-parse", "simple-statistics"],
    recommended_integrations=[],
)
