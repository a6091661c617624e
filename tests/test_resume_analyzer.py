import json
from types import SimpleNamespace

import pytest
from conftest import StubClient, make_response

from jobmatch.agents.resume_analyzer import ResumeAnalysisError, ResumeAnalyzerAgent
from jobmatch.types.profile import CandidateProfile

PAYLOAD = {
    "summary": "Full-stack developer with data viz focus",
    "skills": ["Python", "React"],
    "suggestedJobTitle": "Full Stack Engineer",
    "candidateLocation": "Denver, CO",
    "pastCompanies": ["TechCorp"],
    "suggestedTargetCompanies": [f"Company{i}" for i in range(35)],
}


def test_analyze_returns_profile():
    client = StubClient(make_response(json.dumps(PAYLOAD)))
    profile = ResumeAnalyzerAgent(client=client).analyze(b"%PDF-1.4", "application/pdf")

    assert isinstance(profile, CandidateProfile)
    assert profile.suggested_job_title == "Full Stack Engineer"
    assert profile.candidate_location == "Denver, CO"
    assert profile.past_companies == ["TechCorp"]
    assert len(profile.suggested_target_companies) == 30

    [call] = client.models.calls
    assert call["config"].response_mime_type == "application/json"
    parts = call["contents"][0].parts
    assert parts[0].inline_data.mime_type == "application/pdf"


def test_fenced_json_is_accepted():
    client = StubClient(make_response("```json\n" + json.dumps(PAYLOAD) + "\n```"))
    profile = ResumeAnalyzerAgent(client=client).analyze(b"img", "image/png")
    assert profile.skills == ["Python", "React"]


def test_unsupported_type_is_rejected_before_calling_gemini():
    client = StubClient()
    with pytest.raises(ResumeAnalysisError, match="PDF or an Image"):
        ResumeAnalyzerAgent(client=client).analyze(b"text", "text/plain")
    assert client.models.calls == []


def test_parse_failure():
    client = StubClient(make_response("not-json"))
    with pytest.raises(ResumeAnalysisError):
        ResumeAnalyzerAgent(client=client).analyze(b"%PDF", "application/pdf")


def test_transport_failure():
    client = StubClient(TimeoutError("slow"))
    with pytest.raises(ResumeAnalysisError, match="Failed to analyze resume"):
        ResumeAnalyzerAgent(client=client).analyze(b"%PDF", "application/pdf")


def test_empty_candidates():
    client = StubClient(SimpleNamespace(candidates=[]))
    with pytest.raises(ResumeAnalysisError):
        ResumeAnalyzerAgent(client=client).analyze(b"%PDF", "application/pdf")


def test_thought_parts_are_ignored():
    response = make_response(json.dumps(PAYLOAD))
    response.candidates[0].content.parts.insert(0, SimpleNamespace(text="Reading the resume...", thought=True))
    profile = ResumeAnalyzerAgent(client=StubClient(response)).analyze(b"%PDF", "application/pdf")
    assert profile.suggested_job_title == "Full Stack Engineer"
