"""Main pipeline orchestrator — intent → code → validation → optional repair → response."""

import logging
import os

from config.defaults import DEFAULTS
from core.errors import GenerationError
from core.state import GeneratedPage, GenerationRequest, GenerationResponse
from core.validator import validate_code
from agents.intent_extractor import IntentExtractor
from agents.code_synthesizer import CodeSynthesizer
from agents.code_repairer import CodeRepairer
from agents.component_writer import ComponentWriter
from agents.code_refiner import CodeRefiner
from utils.llm import AnthropicClient, OpenAIClient

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs the pipeline: extract intent → synthesize → validate → repair (once).

    Stages run strictly in sequence. Intent extraction uses intent_client;
    synthesis, repair and the standalone component/refine operations use
    code_client. Both clients are shared across requests and never mutated
    per request.
    """

    def __init__(self, intent_client, code_client, intent_model=None, code_model=None):
        self.intent_extractor = IntentExtractor(intent_client, model=intent_model)
        self.synthesizer = CodeSynthesizer(code_client, model=code_model)
        self.repairer = CodeRepairer(code_client, model=code_model)
        self.component_writer = ComponentWriter(code_client, model=code_model)
        self.refiner = CodeRefiner(code_client, model=code_model)

    def generate_website(self, request: GenerationRequest) -> GenerationResponse:
        """Run the full pipeline. Never raises; failures land in response.error."""
        try:
            return self._run(request)
        except GenerationError as e:
            logger.error("[orchestrator] generation failed: %s", e)
            return GenerationResponse(success=False, error=str(e))
        except Exception as e:
            logger.exception("[orchestrator] unexpected error")
            return GenerationResponse(success=False, error=str(e) or "Unknown error occurred")

    def _run(self, request: GenerationRequest) -> GenerationResponse:
        logger.info("[orchestrator] starting generation: %s", request.prompt)

        context = self.intent_extractor.run(request.prompt)

        style = request.style or DEFAULTS["default_style"]
        code = self.synthesizer.run(context, style)
        logger.info("[orchestrator] code generated (%d chars)", len(code))

        validation = validate_code(code)
        logger.info("[orchestrator] code validated: %s", validation.valid)

        warnings = [w.message for w in validation.warnings]
        repair_failed = False
        if not validation.valid:
            outcome = self.repairer.run(code, validation.errors)
            code = outcome.code
            if outcome.repaired:
                # Repaired text is a new artifact; report what it still gets wrong
                revalidation = validate_code(code)
                warnings = [w.message for w in revalidation.warnings]
                warnings.extend(e.message for e in revalidation.errors)
            else:
                # Unrepaired output is still returned; flag what is unresolved
                repair_failed = True
                warnings.extend(e.message for e in validation.errors)

        page = GeneratedPage(
            name="Home",
            path="/",
            code=code,
            seo_title=context.intent,
            seo_description=f"{context.intent} - Built with AI Web Builder",
        )
        return GenerationResponse(
            success=True,
            pages=[page],
            components=[],
            warnings=warnings,
            repair_failed=repair_failed,
        )

    def generate_component(self, name, description, style=None):
        """Generate one reusable component. Provider failures propagate."""
        return self.component_writer.run(name, description, style)

    def refine_code(self, code, feedback):
        """Rewrite code according to feedback. Provider failures propagate."""
        return self.refiner.run(code, feedback)


def build_orchestrator():
    """Construct an Orchestrator wired to the default providers.

    Nothing here touches credentials; each client checks its key on first call.
    """
    return Orchestrator(
        AnthropicClient(),
        OpenAIClient(),
        intent_model=os.environ.get(DEFAULTS["intent_model_env"]),
        code_model=os.environ.get(DEFAULTS["code_model_env"]),
    )
