import pytest

from matching.keywords import build_frequency, extract_top_keywords, match_keywords


def test_build_frequency_counts_in_first_occurrence_order():
    freq = build_frequency(["sql", "python", "sql", "aws", "python", "sql"])
    assert freq == {"sql": 3, "python": 2, "aws": 1}
    assert list(freq) == ["sql", "python", "aws"]


def test_build_frequency_empty():
    assert build_frequency([]) == {}


def test_extract_top_keywords_sorted_by_frequency():
    tokens = ["aws", "python", "python", "docker", "python", "docker"]
    assert extract_top_keywords(tokens) == ["python", "docker", "aws"]


def test_extract_top_keywords_ties_keep_first_occurrence():
    tokens = ["kafka", "spark", "airflow", "spark", "kafka", "dbt", "airflow"]
    assert extract_top_keywords(tokens) == ["kafka", "spark", "airflow", "dbt"]


def test_extract_top_keywords_truncates():
    tokens = ["a1", "b2", "b2", "c3", "c3", "c3"]
    assert extract_top_keywords(tokens, top_k=2) == ["c3", "b2"]
    assert extract_top_keywords(tokens, top_k=0) == []


def test_extract_top_keywords_rejects_negative_top_k():
    with pytest.raises(ValueError):
        extract_top_keywords(["python"], top_k=-1)


def test_match_keywords_partition():
    jd = ["python", "aws", "docker", "terraform"]
    resume = ["python", "docker", "java"]
    m = match_keywords(jd, resume)

    assert m.matched == ("python", "docker")
    assert m.missing == ("aws", "terraform")
    assert set(m.matched) | set(m.missing) == set(jd)
    assert not set(m.matched) & set(m.missing)
    assert m.jd_count == 4
    assert m.resume_count == 3
    assert m.overlap_pct == 50.0


def test_match_keywords_dedupes_inputs():
    m = match_keywords(["python", "python", "aws"], ["aws", "aws"])
    assert m.jd_count == 2
    assert m.resume_count == 1
    assert m.matched == ("aws",)
    assert m.missing == ("python",)


def test_match_keywords_full_overlap():
    m = match_keywords(["sql", "aws"], ["aws", "sql", "go"])
    assert m.overlap_pct == 100.0
    assert m.missing == ()


def test_match_keywords_empty_jd():
    m = match_keywords([], ["python"])
    assert m.overlap_pct == 0.0
    assert m.jd_count == 0
    assert m.matched == () and m.missing == ()
