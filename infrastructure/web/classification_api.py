# infrastructure/web/classification_api.py
from fastapi import APIRouter, HTTPException, Depends
from functools import lru_cache
from typing import Dict, Any, Optional, List
from pydantic import BaseModel, Field
from application.services.template_classifier import TemplateClassifier, ClassificationError
from domain.models.agent_requirements import (
    AgentRequirements,
    AgentCapabilities,
    EnvironmentPreferences,
    MemoryType,
    RuntimeEnvironment
)
from domain.templates import ALL_TEMPLATES, summarize_templates
from shared.logging import logger

router = APIRouter(prefix="/classification", tags=["template-classification"])

# Dependency injection; main.py and tests override this with their own catalog
@lru_cache(maxsize=1)
def get_classifier() -> TemplateClassifier:
    return TemplateClassifier(ALL_TEMPLATES)

class CapabilitiesModel(BaseModel):
    memory: MemoryType = Field(default=MemoryType.NONE)
    file_access: bool = False
    web_access: bool = False
    code_execution: bool = False
    data_analysis: bool = False
    tool_integrations: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

class EnvironmentModel(BaseModel):
    runtime: RuntimeEnvironment
    deployment_targets: Optional[List[str]] = None
    compliance_requirements: Optional[List[str]] = None

class RequirementsModel(BaseModel):
    name: str = Field(..., description="Agent name")
    description: str = Field(default="", description="What the agent is for")
    primary_outcome: str = Field(default="", description="Main goal, scanned for capability keywords")
    target_audience: List[str] = Field(default_factory=list)
    interaction_style: str = Field(default="task-focused")
    delivery_channels: List[str] = Field(default_factory=list)
    success_metrics: List[str] = Field(default_factory=list)
    constraints: Optional[List[str]] = None
    preferred_technologies: Optional[List[str]] = None
    capabilities: CapabilitiesModel = Field(default_factory=CapabilitiesModel)
    environment: Optional[EnvironmentModel] = None
    additional_notes: Optional[str] = None

    def to_domain(self) -> AgentRequirements:
        environment = None
        if self.environment is not None:
            environment = EnvironmentPreferences(
                runtime=self.environment.runtime,
                deployment_targets=self.environment.deployment_targets,
                compliance_requirements=self.environment.compliance_requirements
            )

        return AgentRequirements(
            name=self.name,
            description=self.description,
            primary_outcome=self.primary_outcome,
            target_audience=list(self.target_audience),
            interaction_style=self.interaction_style,
            delivery_channels=list(self.delivery_channels),
            success_metrics=list(self.success_metrics),
            capabilities=AgentCapabilities(**self.capabilities.model_dump()),
            constraints=self.constraints,
            preferred_technologies=self.preferred_technologies,
            environment=environment,
            additional_notes=self.additional_notes
        )

class PartialResponsesModel(BaseModel):
    responses: Dict[str, Any] = Field(default_factory=dict, description="Answers keyed by field name or question id")

@router.get("/templates")
async def list_templates(classifier: TemplateClassifier = Depends(get_classifier)) -> List[Dict[str, Any]]:
    """List the templates the classifier ranks"""
    return [summary.to_dict() for summary in summarize_templates(classifier.templates)]

@router.post("/scores")
async def score_templates(
    request: RequirementsModel,
    classifier: TemplateClassifier = Depends(get_classifier)
) -> List[Dict[str, Any]]:
    """Rank every template against the requirements"""

    try:
        scores = classifier.score_all_templates(request.to_domain())
        return [score.to_dict() for score in scores]

    except Exception as e:
        logger.error("Failed to score templates", agent_name=request.name, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to score templates: {str(e)}")

@router.post("/recommendations")
async def recommend_template(
    request: RequirementsModel,
    classifier: TemplateClassifier = Depends(get_classifier)
) -> Dict[str, Any]:
    """Classify requirements into a full agent recommendation"""

    try:
        recommendations = classifier.classify(request.to_domain())
        return recommendations.to_dict()

    except ClassificationError as e:
        logger.error("Classification unavailable", agent_name=request.name, error=str(e))
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error("Failed to classify requirements", agent_name=request.name, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to classify requirements: {str(e)}")

@router.post("/partial")
async def preview_archetype(
    request: PartialResponsesModel,
    classifier: TemplateClassifier = Depends(get_classifier)
) -> Optional[Dict[str, Any]]:
    """Preview the emerging archetype for an unfinished interview"""

    try:
        result = classifier.get_partial_archetype(request.responses)
        return result.to_dict() if result is not None else None

    except Exception as e:
        logger.error("Failed to preview archetype", error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to preview archetype: {str(e)}")
