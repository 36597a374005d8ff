"""Tests for the code-model agents: synthesizer, repairer, component writer, refiner."""

import pytest

from agents.code_refiner import CodeRefiner
from agents.code_repairer import CodeRepairer
from agents.code_synthesizer import CodeSynthesizer
from agents.component_writer import ComponentWriter
from config.defaults import DEFAULTS
from core.errors import CodeGenerationError, EmptyResponseError, ProviderError
from core.state import GenerationContext, ValidationError
from fakes import HOME_CODE, FakeClient


def _context():
    return GenerationContext(
        intent="bakery website",
        pages=["Home", "Menu"],
        features=["contact form", "menu"],
        style="creative",
        components=["header", "footer"],
    )


# ---------------------------------------------------------------------------
# CodeSynthesizer
# ---------------------------------------------------------------------------

def test_synthesizer_returns_raw_output():
    raw = "Here you go:\n" + HOME_CODE
    client = FakeClient(raw)
    assert CodeSynthesizer(client).run(_context(), "creative") == raw


def test_synthesizer_prompt_contents():
    client = FakeClient(HOME_CODE)
    CodeSynthesizer(client).run(_context(), "corporate")

    call = client.calls[0]
    system, user = call["messages"][0]["content"], call["messages"][1]["content"]
    assert "Follow the corporate design style" in system
    assert "export default function" in system
    assert "$style" not in system
    assert "Create a bakery website website" in user
    assert "Pages: Home, Menu" in user
    assert "Features: contact form, menu" in user
    assert "Style: creative" in user
    assert "Components: header, footer" in user
    assert call["temperature"] == DEFAULTS["code_temperature"]
    assert call["max_tokens"] == DEFAULTS["code_max_tokens"]
    assert call["model"] == DEFAULTS["code_model"]


def test_synthesizer_empty_response():
    client = FakeClient(EmptyResponseError("empty"))
    with pytest.raises(CodeGenerationError):
        CodeSynthesizer(client).run(_context(), "modern")


def test_synthesizer_provider_error_propagates(provider_down):
    with pytest.raises(ProviderError):
        CodeSynthesizer(FakeClient(provider_down)).run(_context(), "modern")


# ---------------------------------------------------------------------------
# CodeRepairer
# ---------------------------------------------------------------------------

def test_repairer_replaces_code():
    client = FakeClient(HOME_CODE)
    errors = [ValidationError(message="Missing default export")]
    outcome = CodeRepairer(client).run("function Home() {}", errors)
    assert outcome.repaired is True
    assert outcome.code == HOME_CODE
    assert outcome.error is None


def test_repairer_prompt_embeds_errors_and_code():
    client = FakeClient(HOME_CODE)
    errors = [ValidationError(message="first"), ValidationError(message="second")]
    CodeRepairer(client).run("function Home() {}", errors)

    call = client.calls[0]
    user = call["messages"][1]["content"]
    assert "first\nsecond" in user
    assert user.endswith("Code:\nfunction Home() {}")
    assert "no explanations" in call["messages"][0]["content"]
    assert call["temperature"] == DEFAULTS["repair_temperature"]


def test_repairer_falls_back_on_provider_error(provider_down):
    original = "function Home() {}"
    outcome = CodeRepairer(FakeClient(provider_down)).run(
        original, [ValidationError(message="Missing default export")]
    )
    assert outcome.repaired is False
    assert outcome.code == original
    assert "Connection error" in outcome.error


def test_repairer_falls_back_on_empty_response():
    original = "function Home() {}"
    outcome = CodeRepairer(FakeClient(EmptyResponseError("empty"))).run(
        original, [ValidationError(message="Missing default export")]
    )
    assert outcome.code == original
    assert outcome.repaired is False


# ---------------------------------------------------------------------------
# ComponentWriter / CodeRefiner
# ---------------------------------------------------------------------------

def test_component_writer():
    client = FakeClient("export default function Navbar() {}")
    code = ComponentWriter(client).run("Navbar", "sticky top navigation")
    assert code == "export default function Navbar() {}"
    call = client.calls[0]
    assert "Follow modern design style" in call["messages"][0]["content"]
    assert call["messages"][1]["content"] == "Create a Navbar component: sticky top navigation"
    assert call["max_tokens"] == DEFAULTS["component_max_tokens"]


def test_component_writer_empty_returns_blank():
    assert ComponentWriter(FakeClient(EmptyResponseError("empty"))).run("Navbar", "nav") == ""


def test_refiner_returns_new_code():
    client = FakeClient("refined")
    assert CodeRefiner(client).run("old", "make it blue") == "refined"
    user = client.calls[0]["messages"][1]["content"]
    assert "Current code:\nold" in user
    assert "Feedback: make it blue" in user
    assert client.calls[0]["temperature"] == DEFAULTS["refine_temperature"]


def test_refiner_empty_keeps_code():
    assert CodeRefiner(FakeClient(EmptyResponseError("empty"))).run("old", "x") == "old"


def test_refiner_provider_error_propagates(provider_down):
    with pytest.raises(ProviderError):
        CodeRefiner(FakeClient(provider_down)).run("old", "x")


def test_repairer_falls_back_on_unexpected_exception():
    original = "function Home() {}"
    outcome = CodeRepairer(FakeClient(TimeoutError("read timed out"))).run(
        original, [ValidationError(message="Missing default export")]
    )
    assert outcome.repaired is False
    assert outcome.code == original
    assert outcome.error == "read timed out"
