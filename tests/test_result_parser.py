import json

from jobmatch.search.result_parser import parse_jobs, strip_markdown_fences

JOBS = [
    {"title": "Backend Engineer", "company": "TechCorp", "matchScore": 85},
    {"title": "Data Engineer", "company": "DataCo"},
]


def test_parse_clean_array():
    assert parse_jobs(json.dumps(JOBS)) == JOBS


def test_parse_fenced_array_matches_clean_parse():
    fenced = "\n  ```json\n" + json.dumps(JOBS, indent=2) + "\n```  \n"
    assert parse_jobs(fenced) == parse_jobs(json.dumps(JOBS))


def test_parse_array_surrounded_by_prose():
    text = "Here are the listings I found:\n" + json.dumps(JOBS) + "\nLet me know if you need more."
    assert parse_jobs(text) == JOBS


def test_parse_garbage_returns_empty():
    assert parse_jobs("I could not find any jobs today.") == []
    assert parse_jobs("[not json]") == []
    assert parse_jobs("") == []


def test_parse_non_array_returns_empty():
    assert parse_jobs(json.dumps({"jobs": JOBS})) == []


def test_non_object_entries_become_empty_records():
    assert parse_jobs('[{"title": "A"}, "oops", 3]') == [{"title": "A"}, {}, {}]


def test_strip_markdown_fences():
    assert strip_markdown_fences("```json\n[]\n```") == "[]"
    assert strip_markdown_fences("  []  ") == "[]"


def test_deeply_nested_answer_returns_empty():
    nested = "[" * 200000 + "]" * 200000
    assert parse_jobs(nested) == []
    assert parse_jobs("Here: " + nested) == []
