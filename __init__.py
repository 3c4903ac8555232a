"""
Agent Template Advisor v1.0 - Deterministic Template Classification

Turns the answers of a guided agent-design interview into a ranked list of
agent templates and a full recommendation for the best match.

Features:
- Immutable requirement and template models
- Deterministic, explainable template scoring with stable tie-breaks
- System prompt customization and MCP server recommendations
- Complexity assessment and implementation plans
- Mid-interview archetype preview discounted by data completeness
"""

__version__ = "1.0.0"
__author__ = "Design Agent Team"
