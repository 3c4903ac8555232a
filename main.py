# main.py
import os
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI

# Internal imports
from application.services.template_classifier import TemplateClassifier, NoTemplatesAvailableError
from domain.templates import ALL_TEMPLATES
from infrastructure.web.classification_api import router as classification_router, get_classifier
from shared.logging import logger, setup_logging

# Global application state
app_state = {}

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""

    # Startup
    logger.info("Starting Agent Template Advisor")

    # Setup logging
    setup_logging(
        level=os.getenv("LOG_LEVEL", "INFO"),
        json_logs=os.getenv("JSON_LOGS", "true").lower() == "true"
    )

    try:
        # Refuse to start without templates
        if not ALL_TEMPLATES:
            raise NoTemplatesAvailableError("Template catalog is empty")

        classifier = TemplateClassifier(ALL_TEMPLATES)
        app_state["classifier"] = classifier
        app.dependency_overrides.setdefault(get_classifier, get_app_classifier)

        logger.info("Application initialized successfully",
                   template_count=len(classifier.templates),
                   templates=[template.id for template in classifier.templates])

    except Exception as e:
        logger.error("Failed to initialize application", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Agent Template Advisor")
    app_state.clear()

# Create FastAPI app
app = FastAPI(
    title="Agent Template Advisor",
    description="Deterministic template classification and recommendations for interview-driven agent design",
    version="1.0.0",
    lifespan=lifespan
)

# Dependency injection
def get_app_classifier() -> TemplateClassifier:
    return app_state["classifier"]

@app.get("/health")
async def health_check():
    """System health check"""

    classifier = app_state.get("classifier")
    template_count = len(classifier.templates) if classifier else 0

    return {
        "status": "healthy" if template_count > 0 else "unhealthy",
        "template_count": template_count,
        "version": "1.0.0",
        "timestamp": datetime.utcnow().isoformat()
    }

@app.get("/")
async def root():
    """API root endpoint"""
    return {
        "service": "Agent Template Advisor",
        "description": "Ranks agent templates against interview requirements",
        "features": [
            "Deterministic template scoring",
            "System prompt customization",
            "MCP server recommendations",
            "Complexity assessment and implementation plans",
            "Mid-interview archetype preview"
        ],
        "endpoints": {
            "templates": "GET /classification/templates",
            "scores": "POST /classification/scores",
            "recommendations": "POST /classification/recommendations",
            "partial_archetype": "POST /classification/partial",
            "health_check": "GET /health"
        }
    }

# Include classification router
app.include_router(classification_router)

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "0.0.0.0")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.getenv("RELOAD", "false").lower() == "true"
    )
