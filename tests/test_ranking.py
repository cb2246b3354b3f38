from datetime import datetime, timezone

from ticketsim.domain.models import SimilarityResult
from ticketsim.infra.ranking import rank_results


def _result(result_id: int, score: float) -> SimilarityResult:
    return SimilarityResult(
        id=result_id,
        subject=f"Ticket {result_id}",
        description_snippet="",
        category="other",
        status="open",
        created_at=datetime(2026, 2, 1, tzinfo=timezone.utc),
        relevance_score=score,
    )


def test_rank_results_applies_threshold_inclusively():
    results = [_result(1, 0.04), _result(2, 0.05), _result(3, 0.3)]
    ranked = rank_results(results)
    assert [item.id for item in ranked] == [3, 2]


def test_rank_results_sorts_descending():
    results = [_result(1, 0.2), _result(2, 0.9), _result(3, 0.5)]
    assert [item.id for item in rank_results(results)] == [2, 3, 1]


def test_rank_results_keeps_source_order_for_ties():
    results = [_result(1, 0.4), _result(2, 0.7), _result(3, 0.4), _result(4, 0.4)]
    assert [item.id for item in rank_results(results)] == [2, 1, 3, 4]


def test_rank_results_truncates():
    results = [_result(idx, 0.5) for idx in range(1, 11)]
    ranked = rank_results(results)
    assert [item.id for item in ranked] == [1, 2, 3, 4, 5]
    assert len(rank_results(results, top_k=2)) == 2


def test_rank_results_empty():
    assert rank_results([]) == []


def test_rank_results_with_key_keeps_payload_attached():
    pairs = [(_result(7, 0.3), "first"), (_result(7, 0.8), "second"), (_result(7, 0.01), "third")]
    ranked = rank_results(pairs, key=lambda pair: pair[0].relevance_score)
    assert [label for _, label in ranked] == ["second", "first"]
