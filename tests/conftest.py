"""
Pytest configuration and fixtures for Albert tests.
"""
import os
import asyncio
import pytest
from unittest.mock import MagicMock, AsyncMock

# Set test environment before importing albert modules
os.environ["GROQ_API_KEY"] = "test-groq-key"
os.environ["PERPLEXITY_API_KEY"] = "test-perplexity-key"
os.environ["REPLICATE_API_TOKEN"] = "test-replicate-token"
os.environ["DEBUG"] = "true"

from albert.services.podcast.models import PodcastRequest
from albert.services.podcast.prompts import (
    CATEGORIZER_SYSTEM,
    IMAGE_PROMPT_SYSTEM,
    STATUS_ANALYSIS_SYSTEM,
)


SAMPLE_QUESTIONS = [
    "1. Qu'est-ce que la Révolution française ?",
    "2. Pourquoi a-t-elle commencé ?",
    "3. Qui étaient les personnages importants ?",
    "4. Qu'est-ce qui a changé après ?",
    "5. Quel a été son impact sur le monde ?",
]


def make_llm(label="past", questions=None, script="Bonjour les enfants ! Voici notre podcast.",
             image_prompt_errors=()):
    """
    Build a mock LLMService that answers each stage by inspecting the messages.

    ``image_prompt_errors`` lists the image prompt numbers whose call raises.
    """
    questions = SAMPLE_QUESTIONS if questions is None else questions

    async def complete(messages, temperature=0.7, max_tokens=None):
        system = messages[0]["content"] if messages[0]["role"] == "system" else None
        user = messages[-1]["content"]

        if system == CATEGORIZER_SYSTEM:
            return label
        if system == IMAGE_PROMPT_SYSTEM:
            number = 1 if "prompt number 1 of" in user else 2
            if number in image_prompt_errors:
                raise RuntimeError(f"image prompt {number} failed")
            return f"  A glowing landscape, prompt {number}  "
        if system is None:
            return script
        return "\n".join(questions)

    llm = MagicMock()
    llm.model = "test-llm-model"
    llm.complete = AsyncMock(side_effect=complete)
    llm.close = AsyncMock()
    return llm


def make_research(analysis="La Révolution française est un événement passé (1789).",
                  failing_question=None, delays=None):
    """
    Build a mock ResearchService.

    ``delays`` maps question text to a sleep in seconds before answering.
    """
    delays = delays or {}

    async def ask(system_prompt, user_prompt):
        if system_prompt == STATUS_ANALYSIS_SYSTEM:
            return f"  {analysis}  "
        await asyncio.sleep(delays.get(user_prompt, 0))
        if user_prompt == failing_question:
            raise RuntimeError(f"Research failed for: {user_prompt}")
        return f"Réponse: {user_prompt}"

    research = MagicMock()
    research.model = "test-research-model"
    research.ask = AsyncMock(side_effect=ask)
    research.close = AsyncMock()
    return research


_DEFAULT_OUTPUT = object()


def make_images(output=_DEFAULT_OUTPUT):
    """Build a mock ImageService; ``output`` overrides every run() result."""
    counter = {"n": 0}

    async def run(inputs):
        if output is not _DEFAULT_OUTPUT:
            return output
        counter["n"] += 1
        return [f"https://images.test/{counter['n']}.png"]

    images = MagicMock()
    images.model = "test-image-model"
    images.run = AsyncMock(side_effect=run)
    images.close = AsyncMock()
    return images


@pytest.fixture
def podcast_request():
    """Sample podcast request."""
    return PodcastRequest(
        topic="French Revolution",
        country="France",
        audience="Primary school children",
    )


@pytest.fixture
def mock_llm():
    return make_llm()


@pytest.fixture
def mock_research():
    return make_research()


@pytest.fixture
def mock_images():
    return make_images()


@pytest.fixture
def orchestrator(mock_llm, mock_research, mock_images):
    """Orchestrator wired to mock services."""
    from albert.services.podcast.orchestrator import PodcastOrchestrator
    return PodcastOrchestrator(llm=mock_llm, research=mock_research, images=mock_images)


@pytest.fixture
def test_client(orchestrator):
    """Create a test client with the orchestrator dependency overridden."""
    from fastapi.testclient import TestClient
    from albert.api.main import app
    from albert.api.dependencies import get_podcast_orchestrator

    app.dependency_overrides[get_podcast_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def llm_factory():
    return make_llm


@pytest.fixture
def research_factory():
    return make_research


@pytest.fixture
def images_factory():
    return make_images


@pytest.fixture
def sample_questions():
    return list(SAMPLE_QUESTIONS)
