# application/services/template_classifier.py
import re
from typing import Dict, Any, Iterable, List, Optional, Tuple

from domain.models.agent_requirements import AgentRequirements, AgentCapabilities
from domain.models.agent_template import (
    AgentTemplate,
    AgentRecommendations,
    PartialArchetypeResult,
    TemplateScore
)
from application.services.recommendation_builder import (
    assess_complexity,
    customize_system_prompt,
    generate_implementation_steps,
    generate_mcp_servers,
    generate_notes,
    round_percent
)
from application.services.partial_classifier import (
    build_partial_requirements,
    calculate_data_completeness,
    normalize_responses
)
from shared.logging import logger, log_classification, log_partial_classification

CAPABILITY_MATCH_WEIGHT = 10
USE_CASE_WEIGHT = 15
USE_CASE_MAX_MATCHES = 2
USE_CASE_MAX = USE_CASE_WEIGHT * USE_CASE_MAX_MATCHES
INTERACTION_STYLE_MAX = 15
CAPABILITY_REQUIREMENT_WEIGHT = 7

DATA_ANALYSIS_TAGS = ("data-processing", "statistics", "visualization", "reporting")
CODE_EXECUTION_TAGS = ("code-review", "testing")

# Keyword families scanned in the lower-cased primary outcome
OUTCOME_KEYWORD_FAMILIES = (
    (re.compile(r"report|statistic|visualiz|chart|graph|metric|data|analys"), DATA_ANALYSIS_TAGS),
    (re.compile(r"blog|article|seo|market|document|content|writ"),
     ("content-creation", "seo", "formatting")),
    (re.compile(r"review|test|refactor|debug|quality|code|develop"),
     ("code-review", "testing", "refactoring")),
    (re.compile(r"web|scrape|extract|verify|fact|research|search"),
     ("research", "web-search", "web-scraping", "fact-checking")),
    (re.compile(r"schedule|orchestrat|queue|task|job|automat|workflow"),
     ("automation", "scheduling", "orchestration")),
)

# Templates that suit each interaction style; styles not listed fit every template
INTERACTION_STYLE_FIT: Dict[str, Tuple[str, ...]] = {
    "conversational": ("content-creator", "research-agent"),
    "task-focused": ("data-analyst", "code-assistant", "automation-agent"),
    "collaborative": ("code-assistant", "content-creator"),
}

# (capability flag, template tag, reasoning fragment)
CAPABILITY_REQUIREMENTS: Tuple[Tuple[str, str, str], ...] = (
    ("file_access", "file-access", "Supports file access"),
    ("web_access", "web-access", "Supports web access"),
    ("data_analysis", "data-processing", "Supports data analysis"),
)

class ClassificationError(Exception):
    pass

class NoTemplatesAvailableError(ClassificationError):
    pass

class TemplateNotFoundError(ClassificationError):
    pass

class TemplateClassifier:
    """Deterministic ranking of agent templates against interview requirements"""

    def __init__(self, templates: Iterable[AgentTemplate] = ()):
        self.templates: Tuple[AgentTemplate, ...] = tuple(templates)

    def classify(self, requirements: AgentRequirements) -> AgentRecommendations:
        """Pick the best matching template and derive a full recommendation"""
        scores = self.score_all_templates(requirements)

        if not scores:
            raise NoTemplatesAvailableError("No templates available for classification")

        best_match = scores[0]
        template = self._find_template(best_match.template_id)
        if template is None:
            raise TemplateNotFoundError(f"Template {best_match.template_id} not found")

        complexity = assess_complexity(requirements, template)
        alternatives = scores[1:3]

        recommendations = AgentRecommendations(
            agent_type=template.id,
            required_dependencies=list(template.required_dependencies),
            mcp_servers=generate_mcp_servers(requirements),
            system_prompt=customize_system_prompt(template, requirements),
            tool_configurations=list(template.default_tools),
            estimated_complexity=complexity,
            implementation_steps=generate_implementation_steps(requirements, template, complexity),
            notes=generate_notes(best_match, alternatives, requirements)
        )

        log_classification(
            agent_type=template.id,
            confidence=best_match.score,
            complexity=complexity.value,
            template_count=len(self.templates),
            alternatives=[alternative.template_id for alternative in alternatives],
            missing_capabilities=best_match.missing_capabilities
        )

        return recommendations

    def score_all_templates(self, requirements: AgentRequirements) -> List[TemplateScore]:
        """Score every template, best match first; ties keep catalog order"""
        scores = [self.score_template(template, requirements) for template in self.templates]
        # sorted() is stable, so equal scores stay in catalog order
        ranked = sorted(scores, key=lambda score: score.score, reverse=True)

        if ranked:
            logger.debug("Templates ranked",
                        template_count=len(ranked),
                        top_template=ranked[0].template_id,
                        top_score=ranked[0].score)
        return ranked

    def score_template(self, template: AgentTemplate, requirements: AgentRequirements) -> TemplateScore:
        """Score a single template against requirements.

        Raw points from four components are normalized to a 0-100 score:

        * 10 per required capability tag the template carries
        * 15 per ``ideal_for`` phrase matching the primary outcome, at most 2
        * 15 when the template suits the requested interaction style
        * 7 per requested file/web/data capability the template supports

        A template whose ``capability_tags`` or ``ideal_for`` is ``None``
        raises ``TypeError``.
        """
        raw_score = 0
        matched_capabilities: List[str] = []
        missing_capabilities: List[str] = []
        reasons: List[str] = []

        required_capabilities = self.extract_required_capabilities(requirements)
        capability_match_max = len(required_capabilities) * CAPABILITY_MATCH_WEIGHT
        for capability in required_capabilities:
            if capability in template.capability_tags:
                matched_capabilities.append(capability)
                raw_score += CAPABILITY_MATCH_WEIGHT
            else:
                missing_capabilities.append(capability)

        matching_use_cases = self._match_use_cases(template, requirements.primary_outcome)
        if matching_use_cases:
            raw_score += USE_CASE_WEIGHT * min(len(matching_use_cases), USE_CASE_MAX_MATCHES)
            reasons.append(f"Matches use cases: {', '.join(matching_use_cases)}")

        if self._matches_interaction_style(template, requirements.interaction_style_name):
            raw_score += INTERACTION_STYLE_MAX
            reasons.append(f"Compatible with {requirements.interaction_style_name} interaction style")

        requirement_score, requirement_max, requirement_reasons = self._score_capability_requirements(
            template, requirements.capabilities
        )
        raw_score += requirement_score
        reasons.extend(requirement_reasons)

        total_possible_score = capability_match_max + USE_CASE_MAX + INTERACTION_STYLE_MAX + requirement_max
        if total_possible_score > 0:
            normalized_score = round((raw_score / total_possible_score) * 100, 2)
        else:
            normalized_score = 0.0

        return TemplateScore(
            template_id=template.id,
            score=normalized_score,
            matched_capabilities=matched_capabilities,
            missing_capabilities=missing_capabilities,
            reasoning=self._build_reasoning_summary(matched_capabilities, missing_capabilities, reasons)
        )

    def get_partial_archetype(self, responses: Optional[Dict[str, Any]]) -> Optional[PartialArchetypeResult]:
        """Preview the emerging archetype from an incomplete interview"""
        if not self.templates:
            return None

        normalized = normalize_responses(responses)
        if not normalized:
            # Nothing answered yet: fall back to the first catalog entry
            first = self.templates[0]
            return PartialArchetypeResult(
                archetype=first.id,
                archetype_name=first.name,
                confidence=0,
                raw_score=0,
                data_completeness=0
            )

        requirements = build_partial_requirements(normalized)
        top_score = self.score_all_templates(requirements)[0]
        template = self._find_template(top_score.template_id)

        data_completeness = calculate_data_completeness(normalized)
        raw_score = round_percent(top_score.score)
        confidence = round_percent(top_score.score * data_completeness / 100)

        result = PartialArchetypeResult(
            archetype=top_score.template_id,
            archetype_name=template.name if template else top_score.template_id,
            confidence=confidence,
            raw_score=raw_score,
            data_completeness=data_completeness
        )

        log_partial_classification(
            archetype=result.archetype,
            confidence=result.confidence,
            raw_score=result.raw_score,
            data_completeness=result.data_completeness
        )

        return result

    def extract_required_capabilities(self, requirements: AgentRequirements) -> List[str]:
        """Capability tags implied by the flags and the primary outcome, deduplicated in order"""
        capabilities: List[str] = []
        flags = requirements.capabilities

        if flags.file_access:
            capabilities.append("file-access")
        if flags.web_access:
            capabilities.append("web-access")
        if flags.data_analysis:
            capabilities.extend(DATA_ANALYSIS_TAGS)
        if flags.code_execution:
            capabilities.extend(CODE_EXECUTION_TAGS)

        outcome = requirements.primary_outcome.lower()
        for pattern, tags in OUTCOME_KEYWORD_FAMILIES:
            if pattern.search(outcome):
                capabilities.extend(tags)

        return list(dict.fromkeys(capabilities))

    def _find_template(self, template_id: str) -> Optional[AgentTemplate]:
        for template in self.templates:
            if template.id == template_id:
                return template
        return None

    def _match_use_cases(self, template: AgentTemplate, primary_outcome: str) -> List[str]:
        outcome = primary_outcome.lower()
        matches = []
        for use_case in template.ideal_for:
            use_case_lower = use_case.lower()
            if use_case_lower in outcome or outcome in use_case_lower:
                matches.append(use_case)
        return matches

    def _matches_interaction_style(self, template: AgentTemplate, style: str) -> bool:
        suited = INTERACTION_STYLE_FIT.get(style)
        if suited is None:
            return True
        return template.id in suited

    def _score_capability_requirements(self, template: AgentTemplate,
                                       capabilities: AgentCapabilities) -> Tuple[int, int, List[str]]:
        score = 0
        max_score = 0
        reasons: List[str] = []

        for flag, tag, reason in CAPABILITY_REQUIREMENTS:
            supported = tag in template.capability_tags
            if getattr(capabilities, flag) is True:
                max_score += CAPABILITY_REQUIREMENT_WEIGHT
                if supported:
                    score += CAPABILITY_REQUIREMENT_WEIGHT
                    reasons.append(reason)

        return score, max_score, reasons

    def _build_reasoning_summary(self, matched: List[str], missing: List[str],
                                 reasons: List[str]) -> str:
        parts: List[str] = []

        if matched:
            parts.append(f"Matched capabilities: {', '.join(matched)}")
        if missing:
            parts.append(f"Missing capabilities: {', '.join(missing)}")
        parts.extend(reasons)

        return ". ".join(parts) or "Basic template match"
